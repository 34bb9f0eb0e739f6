import pytest

from base16_styling.color import invert_color, parse_color
from base16_styling.theme import (
    BASE16_KEYS,
    BASE16_THEMES,
    DEFAULT_BASE16,
    get_base16_theme,
    invert_theme,
)


def test_base16_keys():
    assert len(BASE16_KEYS) == 16
    assert BASE16_KEYS[0] == "base00"
    assert BASE16_KEYS[-1] == "base0F"
    for theme in BASE16_THEMES.values():
        assert all(key in theme for key in BASE16_KEYS)


def test_builtin_themes_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_BASE16["base00"] = "#000000"


def test_resolve_named_theme():
    assert get_base16_theme("ocean") is BASE16_THEMES["ocean"]


def test_custom_themes_take_precedence():
    custom = dict(BASE16_THEMES["ocean"], base00="#000000")
    assert get_base16_theme("ocean", {"ocean": custom}) is custom
    assert get_base16_theme("monokai", {"ocean": custom}) is BASE16_THEMES["monokai"]


def test_unknown_theme_is_none():
    assert get_base16_theme("solarized") is None
    assert get_base16_theme("solarized:inverted") is None
    assert get_base16_theme(None) is None
    assert get_base16_theme({"value": "some-class"}) is None


def test_extend_is_followed():
    assert get_base16_theme({"extend": "monokai", "value": "x"}) is BASE16_THEMES["monokai"]
    theme = {"base00": "#101010"}
    assert get_base16_theme({"extend": theme}) is theme


def test_theme_mapping_is_returned_as_is():
    theme = {"base00": "#101010", "scheme": "mine"}
    assert get_base16_theme(theme) is theme


def test_resolve_inverted_theme():
    theme = get_base16_theme("ocean:inverted")
    assert theme["scheme"] == "ocean:inverted"
    assert theme["author"] == BASE16_THEMES["ocean"]["author"]
    assert theme["base00"] == invert_color(BASE16_THEMES["ocean"]["base00"])


def test_invert_theme_keeps_keys_and_input():
    original = dict(BASE16_THEMES["eighties"])
    inverted = invert_theme(original)
    assert list(inverted) == list(original)
    assert original == dict(BASE16_THEMES["eighties"])
    assert inverted["author"] == original["author"]
    assert all(inverted[key] != original[key] for key in BASE16_KEYS[:3])


def test_double_inversion():
    theme = {"scheme": "gray", "author": "me", "base00": "#808080", "base01": "#7a7a7a"}
    restored = invert_theme(invert_theme(theme))
    assert restored["scheme"] == "gray:inverted:inverted"
    assert restored["author"] == "me"
    for key in ("base00", "base01"):
        original = parse_color(theme[key])
        roundtrip = parse_color(restored[key])
        assert all(abs(a - b) <= 2 for a, b in zip(original, roundtrip))
