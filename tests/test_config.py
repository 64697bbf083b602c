"""Tests for TOML configuration loading."""

import tomllib
from pathlib import Path

import pytest
from loguru import logger

from kbd_list.core.config import (
    Config,
    LoggingConfig,
    ScrollConfig,
    create_default_config,
    get_config_dir,
    get_log_file,
    load_config,
)
from kbd_list.core.output import setup_loguru


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "absent.toml")
        assert config == Config()

    def test_default_file_round_trips(self, tmp_path: Path) -> None:
        config = load_config(write_config(tmp_path, create_default_config()))
        assert config == Config()

    def test_reads_sections(self, tmp_path: Path) -> None:
        path = write_config(
            tmp_path,
            """
[keys]
enabled = false
scopes = ["list"]
enable_on_form_tags = ["input"]

[scroll]
behavior = "instant"

[list]
index_attribute = "data-row"

[logging]
level = "DEBUG"
log_file = "~/logs/kbd.log"
""",
        )
        config = load_config(path)
        assert config.keys.enabled is False
        assert config.keys.scopes == ("list",)
        assert config.keys.enable_on_form_tags == ("input",)
        assert config.scroll.behavior == "instant"
        assert config.list.index_attribute == "data-row"
        assert config.logging.level == "DEBUG"
        assert get_log_file(config) == Path("~/logs/kbd.log").expanduser()

    @pytest.mark.parametrize(
        "text,section",
        [
            ('[scroll]\nbehavior = "bouncy"', "scroll"),
            ('[list]\nindex_attribute = " "', "list"),
            ('[logging]\nlevel = "LOUD"', "logging"),
            ('[logging]\nlevel = 5', "logging"),
            ('[logging]\nmax_file_size_mb = "big"', "logging"),
            ('[keys]\nenable_on_form_tags = ["div"]', "keys"),
            ('[keys]\nenable_on_form_tags = "yes"', "keys"),
        ],
    )
    def test_invalid_section_falls_back(self, tmp_path: Path, text: str, section: str) -> None:
        config = load_config(write_config(tmp_path, text))
        assert getattr(config, section) == getattr(Config(), section)

    def test_log_level_is_normalized(self, tmp_path: Path) -> None:
        config = load_config(write_config(tmp_path, '[logging]\nlevel = "debug"'))
        assert config.logging.level == "DEBUG"

    def test_loaded_level_is_accepted_by_loguru(self, tmp_path: Path) -> None:
        config = load_config(write_config(tmp_path, '[logging]\nlevel = "warning"'))
        setup_loguru(tmp_path / "kbd.log", level=config.logging.level)
        logger.remove()

    def test_malformed_toml_raises(self, tmp_path: Path) -> None:
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(write_config(tmp_path, "[scroll\n"))


class TestValidation:
    def test_scroll_behavior(self) -> None:
        ScrollConfig("smooth").validate()
        with pytest.raises(ValueError):
            ScrollConfig("slow").validate()

    def test_logging_sizes(self) -> None:
        with pytest.raises(ValueError):
            LoggingConfig(max_file_size_mb=0).validate()


class TestPaths:
    def test_xdg_config_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / "kbd-list"

    def test_default_log_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        assert get_log_file(Config()) == tmp_path / "kbd-list" / "kbd-list.log"
