"""Building key resolvers from a theme and styling overrides."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..logging import get_logger
from ..theme import BASE16_KEYS, DEFAULT_BASE16, get_base16_theme
from .lookup import get_styling_by_keys
from .merge import merge_stylings

logger = get_logger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class StylingOptions:
    """Read-only configuration shared by every resolver built from a factory.

    Attributes:
        default_base16: Theme used for colors the input does not provide;
            falls back to the built-in default theme
        base16_themes: Named themes looked up before the built-in ones
    """

    default_base16: Optional[Mapping] = None
    base16_themes: Optional[Mapping] = None


class KeyResolver:
    """Callable returning props for styling keys from a merged styling map."""

    def __init__(self, merged_styling, args=()):
        self.merged_styling = merged_styling
        self.args = tuple(args)

    def __call__(self, keys, *args):
        return get_styling_by_keys(self.merged_styling, keys, *self.args, *args)

    def __repr__(self):
        return f"KeyResolver(keys={list(self.merged_styling)!r})"


class StylingFactory:
    """Builds KeyResolvers for themes.

    Args:
        get_styling_from_base16: Function taking a 16-color base16 theme and
            returning the default styling map
        options: StylingOptions, or a mapping of its fields
    """

    def __init__(
        self,
        get_styling_from_base16: Callable[[dict], Mapping],
        options: Any = None,
    ) -> None:
        if options is None:
            options = StylingOptions()
        elif isinstance(options, Mapping):
            options = StylingOptions(**options)
        self.get_styling_from_base16 = get_styling_from_base16
        self.options = options

    def base16_colors(self, styling_input):
        """Pick the 16 theme colors, falling back to the configured defaults."""
        default_base16 = self.options.default_base16 or DEFAULT_BASE16
        return {
            key: styling_input.get(key)
            or default_base16.get(key)
            or DEFAULT_BASE16[key]
            for key in BASE16_KEYS
        }

    def with_theme(self, theme_or_styling=None, *args) -> KeyResolver:
        """Build a KeyResolver for a theme reference and/or styling overrides.

        Args:
            theme_or_styling: Theme name, base16 theme mapping, or a mapping
                of styling overrides (optionally with base16 colors and an
                ``extend`` theme reference)
            *args: Arguments bound in front of the ones given at lookup time
        """
        styling_input = (
            dict(theme_or_styling) if isinstance(theme_or_styling, Mapping) else {}
        )

        base16_theme = get_base16_theme(theme_or_styling, self.options.base16_themes)
        if base16_theme:
            styling_input = {**base16_theme, **styling_input}
        elif isinstance(theme_or_styling, str) or styling_input.get("extend"):
            logger.debug(f"Could not resolve {theme_or_styling!r}, using default colors")

        theme = self.base16_colors(styling_input)
        custom_styling = {
            key: value for key, value in styling_input.items() if key not in BASE16_KEYS
        }
        default_styling = self.get_styling_from_base16(theme)

        merged_styling = merge_stylings(custom_styling, default_styling)
        logger.debug(
            f"Merged {len(custom_styling)} custom and {len(default_styling)} "
            f"default stylings into {len(merged_styling)} keys"
        )
        return KeyResolver(merged_styling, args)

    __call__ = with_theme


def create_styling(get_styling_from_base16, options=None, theme_or_styling=_MISSING, *args):
    """Create a styling resolver, or a factory if no theme is given yet.

    ``create_styling(fn, options)(theme)`` and
    ``create_styling(fn, options, theme)`` give the same resolver.
    """
    factory = StylingFactory(get_styling_from_base16, options)
    if theme_or_styling is _MISSING:
        return factory
    return factory.with_theme(theme_or_styling, *args)
