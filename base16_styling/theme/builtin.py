"""Built-in base16 color schemes."""

from types import MappingProxyType


def _scheme(scheme, author, colors):
    """Build a read-only base16 theme from its 16 colors, base00 first."""
    theme = {"scheme": scheme, "author": author}
    theme.update((f"base0{i:X}", color) for i, color in enumerate(colors))
    return MappingProxyType(theme)


_THEMES = {
    "default": _scheme(
        "default",
        "chris kempson (http://chriskempson.com)",
        [
            "#181818", "#282828", "#383838", "#585858",
            "#b8b8b8", "#d8d8d8", "#e8e8e8", "#f8f8f8",
            "#ab4642", "#dc9656", "#f7ca88", "#a1b56c",
            "#86c1b9", "#7cafc2", "#ba8baf", "#a16946",
        ],
    ),
    "eighties": _scheme(
        "eighties",
        "chris kempson (http://chriskempson.com)",
        [
            "#2d2d2d", "#393939", "#515151", "#747369",
            "#a09f93", "#d3d0c8", "#e8e6df", "#f2f0ec",
            "#f2777a", "#f99157", "#ffcc66", "#99cc99",
            "#66cccc", "#6699cc", "#cc99cc", "#d27b53",
        ],
    ),
    "google": _scheme(
        "google",
        "seth wright (http://sethawright.com)",
        [
            "#1d1f21", "#282a2e", "#373b41", "#969896",
            "#b4b7b4", "#c5c8c6", "#e0e0e0", "#ffffff",
            "#cc342b", "#f96a38", "#fba922", "#198844",
            "#3971ed", "#3971ed", "#a36ac7", "#3971ed",
        ],
    ),
    "monokai": _scheme(
        "monokai",
        "wimer hazenberg (http://www.monokai.nl)",
        [
            "#272822", "#383830", "#49483e", "#75715e",
            "#a59f85", "#f8f8f2", "#f5f4f1", "#f9f8f5",
            "#f92672", "#fd971f", "#f4bf75", "#a6e22e",
            "#a1efe4", "#66d9ef", "#ae81ff", "#cc6633",
        ],
    ),
    "ocean": _scheme(
        "ocean",
        "chris kempson (http://chriskempson.com)",
        [
            "#2b303b", "#343d46", "#4f5b66", "#65737e",
            "#a7adba", "#c0c5ce", "#dfe1e8", "#eff1f5",
            "#bf616a", "#d08770", "#ebcb8b", "#a3be8c",
            "#96b5b4", "#8fa1b3", "#b48ead", "#ab7967",
        ],
    ),
    "tomorrow": _scheme(
        "tomorrow",
        "chris kempson (http://chriskempson.com)",
        [
            "#1d1f21", "#282a2e", "#373b41", "#969896",
            "#b4b7b4", "#c5c8c6", "#e0e0e0", "#ffffff",
            "#cc6666", "#de935f", "#f0c674", "#b5bd68",
            "#8abeb7", "#81a2be", "#b294bb", "#a3685a",
        ],
    ),
    "twilight": _scheme(
        "twilight",
        "david hart (http://hart-dev.com)",
        [
            "#1e1e1e", "#323537", "#464b50", "#5f5a60",
            "#838184", "#a7a7a7", "#c3c3c3", "#ffffff",
            "#cf6a4c", "#cda869", "#f9ee98", "#8f9d6a",
            "#afc4db", "#7587a6", "#9b859d", "#9b703f",
        ],
    ),
}

BASE16_THEMES = MappingProxyType(_THEMES)
THEME_NAMES = sorted(BASE16_THEMES.keys())

DEFAULT_BASE16 = BASE16_THEMES["default"]

# Reserved color keys, base00..base0F; everything else in a styling input
# is treated as a custom styling key
BASE16_KEYS = tuple(key for key in DEFAULT_BASE16 if key.startswith("base"))
