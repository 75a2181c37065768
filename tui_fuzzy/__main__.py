"""Launch the fuzzy finder demo TUI.

Usage:
    python -m tui_fuzzy
    python -m tui_fuzzy --items labels.txt --config fuzzy.yaml
    python -m tui_fuzzy --log-file fuzzy.log --log-level DEBUG
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .config import load_config
from .tui import FuzzyDemoApp


def read_items(path: Path) -> list[str]:
    """Read one item per line, skipping blank lines."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f if line.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fuzzy finder demo")
    parser.add_argument("--config", type=Path, default=None, help="Path to YAML matcher config")
    parser.add_argument("--items", type=Path, default=None, help="File with one item per line")
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs to this file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # The TUI owns the terminal, so logs only go to a file
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    try:
        config = load_config(args.config)
        items = read_items(args.items) if args.items else None
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    FuzzyDemoApp(items=items, config=config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
