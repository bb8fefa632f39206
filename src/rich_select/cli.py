"""CLI interface for rich-select."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable

from rich.console import Console

from . import __version__
from .catalog import ItemCatalog
from .components import Choice, SelectionMode
from .config import load_config, options_from_config
from .errors import InvalidConfigurationError
from .prompt import SelectionPrompt
from .themes import DEFAULT_THEME

logger = logging.getLogger(__name__)


def parse_choices(lines: Iterable[str]) -> list[Choice[str]]:
    """Parse an item file into choices.

    An unindented line ending in ``:`` starts a group; indented lines
    below it are its children. A header with no children is kept as a
    plain item, exactly as written. Blank lines and ``#`` comments are
    skipped.
    """
    choices: list[Choice[str]] = []
    headers: list[tuple[Choice[str], str]] = []
    group: Choice[str] | None = None

    for raw in lines:
        line = raw.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if line[0].isspace() and group is not None:
            group.add(stripped)
        elif not line[0].isspace() and stripped.endswith(":"):
            group = Choice(stripped[:-1].rstrip())
            headers.append((group, stripped))
            choices.append(group)
        else:
            group = None
            choices.append(Choice(stripped))

    for header, text in headers:
        if not header.children:
            header.data = text
    return choices


def _read_choices(args) -> list[Choice[str]]:
    choices = [Choice(item) for item in args.items]
    if args.file:
        path = Path(args.file)
        try:
            choices.extend(parse_choices(path.read_text().splitlines()))
        except OSError as e:
            print(f"Error: Cannot read {path}: {e.strerror or e}", file=sys.stderr)
            sys.exit(1)
    return choices


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="rich-select",
        description="rich-select: pick one item from a keyboard-driven list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Item file format:\n"
            "  Fruit:\n"
            "    apple\n"
            "    banana\n"
            "  carrot\n"
            "\n"
            "A header with no indented items below it is a plain item,\n"
            "kept as written (colon included).\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"rich-select {__version__}")
    parser.add_argument("items", nargs="*", help="Items to choose from")
    parser.add_argument("-f", "--file", help="Read items (and groups) from a file")
    parser.add_argument("--title", default="Select", help="Panel title")
    parser.add_argument("--page-size", type=int, default=None, help="Rows per page")
    parser.add_argument("--wrap", dest="wrap_around", action="store_true", default=None,
                        help="Wrap around at the ends of the list")
    parser.add_argument("--search", dest="search_enabled", action="store_true", default=None,
                        help="Enable type-to-search (jumps to the first match)")
    parser.add_argument("--filter", dest="only_show_searched_text", action="store_true",
                        default=None, help="Only show items matching the search (implies --search)")
    parser.add_argument("--mode", choices=[m.value for m in SelectionMode],
                        help="leaf: groups cannot be chosen; leaf_or_group: anything can")
    parser.add_argument("--skip-groups", dest="skip_unselectable_items", action="store_true",
                        default=None, help="Skip group headers while navigating (leaf mode)")
    parser.add_argument("--config", help="Config file (default: ~/.config/rich-select/config.yaml)")
    parser.add_argument("--debug", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = load_config(Path(args.config).expanduser() if args.config else None)
    if args.debug or cfg.get("debug"):
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s: %(message)s"
        )

    if args.only_show_searched_text:
        args.search_enabled = True

    try:
        options = options_from_config(
            cfg,
            page_size=args.page_size,
            wrap_around=args.wrap_around,
            mode=args.mode,
            skip_unselectable_items=args.skip_unselectable_items,
            search_enabled=args.search_enabled,
            only_show_searched_text=args.only_show_searched_text,
        )
    except InvalidConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    choices = _read_choices(args)
    if not choices:
        print("Error: No items to choose from.", file=sys.stderr)
        sys.exit(1)

    theme = DEFAULT_THEME.with_overrides(cfg.get("theme") or {})

    prompt = SelectionPrompt(
        ItemCatalog.from_choices(choices),
        converter=str,
        options=options,
        title=args.title,
        console=Console(stderr=True),
        theme=theme,
    )

    try:
        result = prompt.show()
    except KeyboardInterrupt:
        print(file=sys.stderr)
        sys.exit(130)

    if result is None:
        logger.debug("Selection cancelled")
        sys.exit(1)
    print(result)
