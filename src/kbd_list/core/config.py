"""
Configuration management for kbd-list
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger

from kbd_list.hotkeys import KeyBindingOptions
from kbd_list.scroll import SCROLL_BEHAVIORS

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ListConfig:
    """Configuration for list item lookup."""

    index_attribute: str = "data-index"

    def validate(self) -> None:
        """Validate list configuration values.

        Raises:
            ValueError: If the index attribute is empty
        """
        if not self.index_attribute.strip():
            raise ValueError("index_attribute must not be empty")


@dataclass
class ScrollConfig:
    """Configuration for scroll synchronization."""

    behavior: str = "smooth"  # 'smooth' or 'instant'

    def validate(self) -> None:
        """Validate scroll configuration values.

        Raises:
            ValueError: If behavior is unknown
        """
        if self.behavior not in SCROLL_BEHAVIORS:
            raise ValueError(
                f"Invalid scroll behavior: {self.behavior!r}. "
                f"Valid behaviors are: {SCROLL_BEHAVIORS}"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/kbd-list/kbd-list.log)
    )
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of backup files to keep

    def validate(self) -> None:
        """Validate logging configuration values.

        Raises:
            ValueError: If level is unknown or sizes are not positive integers
        """
        if not isinstance(self.level, str) or self.level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level!r}. Valid levels are: {VALID_LOG_LEVELS}"
            )
        sizes = (self.max_file_size_mb, self.backup_count)
        if any(isinstance(s, bool) or not isinstance(s, int) for s in sizes):
            raise ValueError("max_file_size_mb and backup_count must be integers")
        if self.max_file_size_mb <= 0 or self.backup_count < 0:
            raise ValueError("max_file_size_mb must be > 0 and backup_count >= 0")


@dataclass
class Config:
    """Main configuration object."""

    keys: KeyBindingOptions = field(default_factory=KeyBindingOptions)
    scroll: ScrollConfig = field(default_factory=ScrollConfig)
    list: ListConfig = field(default_factory=ListConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "kbd-list"
    return Path.home() / ".config" / "kbd-list"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "kbd-list"
    return Path.home() / ".local" / "share" / "kbd-list"


def get_log_file(config: Config) -> Path:
    """Resolve the log file path from config."""
    if config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / "kbd-list.log"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in the project root (marked by pyproject.toml).

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            return config_path if config_path.exists() else None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/kbd-list (or ~/.config/kbd-list)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# kbd-list Configuration

[keys]
# Enable the navigation key binding
enabled = true

# Only fire while one of these scopes is active (empty = any scope)
scopes = []

# Fire even while a form field has focus: true, false, or a list of tags
# ("input", "textarea", "select")
enable_on_form_tags = false

# Mark matching key events handled before the handler runs
prevent_default = false

[scroll]
# How the list scrolls to the active item ("smooth" or "instant")
behavior = "smooth"

[list]
# Attribute carrying each rendered item's index
index_attribute = "data-index"

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/kbd-list/kbd-list.log)
# log_file = "/path/to/custom/kbd-list.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of backup log files to keep
backup_count = 5
""".strip()


def _parse_form_tags(value: object) -> bool | tuple[str, ...]:
    if isinstance(value, bool):
        return value
    if isinstance(value, (list, tuple)):
        return tuple(str(tag).lower() for tag in value)
    raise ValueError(f"enable_on_form_tags must be a bool or list, got {value!r}")


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    Invalid sections are replaced by their defaults with a warning.

    Args:
        config_path: Explicit config file (default: see get_config_path)

    Returns:
        Parsed Config
    """
    config_path = config_path or get_config_path()
    config = Config()

    if not config_path.exists():
        logger.debug(f"No config at {config_path}, using defaults")
        return config

    with open(config_path, "rb") as f:
        toml_data = tomllib.load(f)

    if "keys" in toml_data:
        keys_data = toml_data["keys"]
        try:
            config.keys = KeyBindingOptions(
                enabled=keys_data.get("enabled", config.keys.enabled),
                scopes=tuple(keys_data.get("scopes", config.keys.scopes)),
                enable_on_form_tags=_parse_form_tags(
                    keys_data.get("enable_on_form_tags", config.keys.enable_on_form_tags)
                ),
                prevent_default=keys_data.get(
                    "prevent_default", config.keys.prevent_default
                ),
            )
            config.keys.validate()
        except ValueError as e:
            logger.warning(f"Invalid [keys] configuration: {e}. Using defaults.")
            config.keys = KeyBindingOptions()

    if "scroll" in toml_data:
        scroll_data = toml_data["scroll"]
        config.scroll = ScrollConfig(
            behavior=scroll_data.get("behavior", config.scroll.behavior),
        )
        try:
            config.scroll.validate()
        except ValueError as e:
            logger.warning(f"Invalid [scroll] configuration: {e}. Using defaults.")
            config.scroll = ScrollConfig()

    if "list" in toml_data:
        list_data = toml_data["list"]
        config.list = ListConfig(
            index_attribute=list_data.get(
                "index_attribute", config.list.index_attribute
            ),
        )
        try:
            config.list.validate()
        except ValueError as e:
            logger.warning(f"Invalid [list] configuration: {e}. Using defaults.")
            config.list = ListConfig()

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        level = logging_data.get("level", config.logging.level)
        config.logging = LoggingConfig(
            # loguru level names are upper case
            level=level.upper() if isinstance(level, str) else level,
            log_file=logging_data.get("log_file"),
            max_file_size_mb=logging_data.get(
                "max_file_size_mb", config.logging.max_file_size_mb
            ),
            backup_count=logging_data.get("backup_count", config.logging.backup_count),
        )
        try:
            config.logging.validate()
        except ValueError as e:
            logger.warning(f"Invalid [logging] configuration: {e}. Using defaults.")
            config.logging = LoggingConfig()

    return config
