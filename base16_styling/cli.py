import argparse
import json

from .logging import setup_logging
from .theme import BASE16_KEYS, BASE16_THEMES, THEME_NAMES, get_base16_theme


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="base16-styling",
        description="Inspect built-in base16 themes and their inverted variants",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("themes", help="List built-in theme names")

    show = subparsers.add_parser(
        "show",
        help="Print the colors of a theme reference",
    )
    show.add_argument(
        "theme",
        help="Theme name, optionally suffixed with ':inverted' (e.g. ocean:inverted)",
    )
    show.add_argument(
        "--json",
        action="store_true",
        help="Print the resolved theme as JSON",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(level="DEBUG", console=True)

    if args.command == "themes":
        _run_themes()
    elif args.command == "show":
        theme = get_base16_theme(args.theme)
        if theme is None:
            parser.error(f"Unknown theme: {args.theme}")
        _run_show(theme, args.json)


def _run_themes():
    """List built-in themes with their authors."""
    for name in THEME_NAMES:
        print(f"  {name:12} {BASE16_THEMES[name].get('author', '')}")


def _run_show(theme, as_json):
    """Print a resolved theme's metadata and colors."""
    if as_json:
        print(json.dumps(dict(theme), indent=2))
        return

    print("=" * 60)
    print(f"BASE16 THEME: {theme.get('scheme', 'unnamed').upper()}")
    if theme.get("author"):
        print(f"by {theme['author']}")
    print("=" * 60)
    for key in BASE16_KEYS:
        print(f"  {key}  {theme[key]}")


if __name__ == "__main__":
    main()
