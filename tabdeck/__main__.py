"""Entry point for the tabdeck CLI."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import __version__
from .log import logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="tabdeck")
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"tabdeck {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Preferences file (default: ~/.tabdeck/preferences.yaml)",
    )
    parser.add_argument(
        "--open",
        dest="open_titles",
        action="append",
        default=[],
        metavar="TITLE",
        help="Open a terminal tab with this title (repeatable)",
    )
    parser.add_argument(
        "--split",
        action="store_true",
        help="Show the tabs opened with --open side by side",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write debug logs to this file",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run tabdeck."""
    args = _build_parser().parse_args(argv)

    if args.log_file:
        handler = logging.FileHandler(args.log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)

    from .app import TabDeckApp
    from .preferences import load_preferences

    app = TabDeckApp(
        prefs=load_preferences(args.config),
        open_titles=args.open_titles,
        split_opened=args.split,
    )
    app.run()


if __name__ == "__main__":
    main()
