"""Resolving theme references to concrete base16 themes."""

from collections.abc import Mapping

from ..color import invert_color
from ..logging import get_logger
from .builtin import BASE16_THEMES

logger = get_logger(__name__)

INVERTED = "inverted"


def invert_theme(theme):
    """Return a copy of a base16 theme with every color luma-inverted.

    Keys starting with ``base`` are run through invert_color, ``scheme`` gets
    an ``:inverted`` suffix, everything else is copied as is.
    """
    inverted = {}
    for key, value in theme.items():
        if key.startswith("base"):
            inverted[key] = invert_color(value)
        elif key == "scheme":
            inverted[key] = f"{value}:{INVERTED}"
        else:
            inverted[key] = value
    return inverted


def get_base16_theme(theme, base16_themes=None):
    """Resolve a theme reference to a base16 theme mapping.

    Args:
        theme: A base16 theme mapping, a theme name (optionally suffixed with
            ``:inverted``), or a mapping whose ``extend`` field holds one of
            those
        base16_themes: Optional mapping of extra named themes; these take
            precedence over the built-in ones

    Returns:
        The theme mapping, or None if the reference is not a usable theme
    """
    if isinstance(theme, Mapping) and theme.get("extend"):
        theme = theme["extend"]

    if isinstance(theme, str):
        name, _, modifier = theme.partition(":")
        modifier = modifier.split(":")[0]
        resolved = (base16_themes or {}).get(name) or BASE16_THEMES.get(name)
        if resolved is None:
            logger.debug(f"Unknown base16 theme '{name}'")
        elif modifier == INVERTED:
            resolved = invert_theme(resolved)
        theme = resolved

    if isinstance(theme, Mapping) and "base00" in theme:
        return theme
    return None
