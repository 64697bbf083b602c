"""
kbd-list CLI - browse lines of a file and print the selected one

Reads the items, opens the interactive list, and writes the chosen line to
stdout so the command can be used in shell pipelines.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from kbd_list.core.config import (
    VALID_LOG_LEVELS,
    create_default_config,
    get_log_file,
    load_config,
)
from kbd_list.core.output import setup_loguru


def read_lines(path: str) -> list[str]:
    """Read non-empty lines from a file."""
    text = Path(path).expanduser().read_text(encoding="utf-8")
    return [line.rstrip("\n") for line in text.splitlines() if line.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kbd-list",
        description="kbd-list - keyboard and mouse list selection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="File with one item per line",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config.toml (default: project, cwd, then ~/.config/kbd-list)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        help="Override the configured log level",
    )
    parser.add_argument(
        "--title",
        default="",
        help="Header text shown above the list",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the default configuration and exit",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the kbd-list command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.print_config:
        print(create_default_config())
        return 0

    if not args.file:
        parser.error("a file is required")

    config = load_config(args.config)
    if args.log_level:
        config.logging.level = args.log_level
    setup_loguru(
        get_log_file(config),
        level=config.logging.level,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
    )

    try:
        lines = read_lines(args.file)
    except OSError as e:
        logger.error(f"Cannot read {args.file}: {e}")
        print(f"kbd-list: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    from kbd_list.ui.blessed import run_list

    selected = run_list(lines, config=config, title=args.title or args.file)
    if selected is None:
        return 1
    print(selected)
    return 0


if __name__ == "__main__":
    sys.exit(main())
