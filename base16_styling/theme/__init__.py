from .builtin import BASE16_KEYS, BASE16_THEMES, DEFAULT_BASE16, THEME_NAMES
from .resolver import get_base16_theme, invert_theme

__all__ = [
    "BASE16_KEYS",
    "BASE16_THEMES",
    "DEFAULT_BASE16",
    "THEME_NAMES",
    "get_base16_theme",
    "invert_theme",
]
