"""Merge base16 themes with user styling into per-key component props."""

from .color import invert_color
from .errors import InvalidStylingError, StylingError
from .styling import (
    KeyResolver,
    StylingFactory,
    StylingKind,
    StylingOptions,
    create_styling,
    get_styling_by_keys,
    merge_styling,
    merge_stylings,
)
from .theme import BASE16_KEYS, BASE16_THEMES, DEFAULT_BASE16, get_base16_theme, invert_theme

__all__ = [
    "BASE16_KEYS",
    "BASE16_THEMES",
    "DEFAULT_BASE16",
    "InvalidStylingError",
    "KeyResolver",
    "StylingError",
    "StylingFactory",
    "StylingKind",
    "StylingOptions",
    "create_styling",
    "get_base16_theme",
    "get_styling_by_keys",
    "invert_color",
    "invert_theme",
    "merge_styling",
    "merge_stylings",
]
