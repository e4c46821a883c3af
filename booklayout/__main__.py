"""Booklayout CLI entry point.

Allows running via `python -m booklayout` and provides the console script
defined in `pyproject.toml`.

Usage:
    booklayout [FILE]              Lay out a text file (stdin if omitted)
    booklayout --help-book test    Lay out a bundled help book
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys
from pathlib import Path
from typing import List, Optional

import blessed

from .errors import ConfigurationError, HelpResourceNotFoundError
from .help_book import HelpType, build_help_book
from .paginator import layout_pages
from .settings import LayoutSettings
from .terminal import BookPreview


def get_version_string() -> str:
    try:
        return importlib.metadata.version("booklayout")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="booklayout",
        description="Lay out text as written book pages.",
    )
    parser.add_argument("file", nargs="?", help="text file to lay out (default: stdin)")
    parser.add_argument("--help-book", metavar="NAME",
                        help="lay out a bundled help book (test, sample)")
    parser.add_argument("--width", type=int, help="maximum line width in pixels")
    parser.add_argument("--lines", type=int, help="lines per page")
    parser.add_argument("--font", help="font name")
    parser.add_argument("--config-dir", type=Path, help="directory holding settings.json")
    parser.add_argument("--save", action="store_true",
                        help="store --width/--lines/--font as the new defaults")
    parser.add_argument("--plain", action="store_true", help="do not emit terminal colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="log page contents")
    parser.add_argument("-V", "--version", action="version", version=get_version_string())
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = LayoutSettings(args.config_dir)
    overrides = {"max_line_width": args.width, "lines_per_page": args.lines,
                 "font_name": args.font}
    metrics, config = settings.resolve(**overrides)
    try:
        config.validate()
    except ConfigurationError as e:
        print(f"Invalid layout: {e}", file=sys.stderr)
        return 2

    if args.save:
        stored = settings.load()
        stored.update({k: v for k, v in overrides.items() if v is not None})
        if not settings.save(stored):
            print(f"Could not save settings to {settings.settings_file}", file=sys.stderr)
            return 1

    term = blessed.Terminal(force_styling=None) if args.plain else blessed.Terminal()
    preview = BookPreview(term)
    try:
        if args.help_book:
            book = build_help_book(HelpType.from_name(args.help_book),
                                   metrics=metrics, config=config)
            output = preview.render_book(book)
        else:
            if args.file:
                text = Path(args.file).read_text(encoding="utf-8")
            else:
                text = sys.stdin.read()
            output = preview.render_pages(layout_pages(text, metrics, config))
    except ConfigurationError as e:
        print(f"Invalid layout: {e}", file=sys.stderr)
        return 2
    except HelpResourceNotFoundError as e:
        print(str(e), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Could not read {args.file or 'stdin'}: {e}", file=sys.stderr)
        return 1

    print("\n".join(output))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
