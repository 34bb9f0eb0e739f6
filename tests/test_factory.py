import pytest

from base16_styling import (
    BASE16_KEYS,
    BASE16_THEMES,
    DEFAULT_BASE16,
    KeyResolver,
    StylingFactory,
    StylingOptions,
    create_styling,
    invert_color,
)


def value_styling(theme):
    return {
        "value": {"color": theme["base0D"]},
        "label": "label",
    }


def test_custom_styling_merges_with_theme_colors():
    styling = create_styling(
        value_styling, None, {"base0D": "#ff0000", "value": {"fontWeight": "bold"}}
    )
    assert styling("value") == {"style": {"color": "#ff0000", "fontWeight": "bold"}}


def test_unknown_inverted_theme_falls_back_to_defaults():
    styling = create_styling(value_styling, None, "solarized:inverted")
    assert styling("value") == {"style": {"color": DEFAULT_BASE16["base0D"]}}
    assert list(styling(None)) == ["value", "label"]


def test_theme_gets_exactly_the_base16_colors():
    seen = []

    def capture(theme):
        seen.append(theme)
        return {}

    create_styling(capture, None, "ocean")
    assert list(seen[0]) == list(BASE16_KEYS)
    assert seen[0]["base00"] == BASE16_THEMES["ocean"]["base00"]


def test_named_and_inverted_themes():
    ocean = BASE16_THEMES["ocean"]
    assert create_styling(value_styling, None, "ocean")("value") == {
        "style": {"color": ocean["base0D"]}
    }
    assert create_styling(value_styling, None, "ocean:inverted")("value") == {
        "style": {"color": invert_color(ocean["base0D"])}
    }


def test_direct_fields_win_over_extended_theme():
    styling = create_styling(
        value_styling, None, {"extend": "ocean", "base0D": "#000001", "label": "mine"}
    )
    assert styling("value") == {"style": {"color": "#000001"}}
    assert styling("label") == {"className": "label mine"}


def test_default_base16_option():
    options = StylingOptions(default_base16={"base0D": "#123456"})
    seen = []

    def capture(theme):
        seen.append(theme)
        return value_styling(theme)

    styling = create_styling(capture, options, None)
    assert styling("value") == {"style": {"color": "#123456"}}
    assert seen[0]["base00"] == DEFAULT_BASE16["base00"]


def test_custom_theme_registry_from_mapping_options():
    mine = dict(DEFAULT_BASE16, base0D="#abcdef")
    styling = create_styling(value_styling, {"base16_themes": {"mine": mine}}, "mine")
    assert styling("value") == {"style": {"color": "#abcdef"}}


def test_partial_application():
    factory = create_styling(value_styling, None)
    assert isinstance(factory, StylingFactory)
    resolver = factory("ocean")
    assert isinstance(resolver, KeyResolver)
    assert resolver("value") == create_styling(value_styling, None, "ocean")("value")
    assert factory.with_theme("ocean")(["label", "value"]) == resolver(["label", "value"])


def test_preset_args_come_first():
    def args_styling(theme):
        return {"value": lambda props, *args: {"style": {"args": args}}}

    styling = create_styling(args_styling, None, None, "a")
    assert styling("value", "b") == {"style": {"args": ("a", "b")}}


def test_custom_function_overrides_default_style():
    styling = StylingFactory(value_styling).with_theme(
        {"value": lambda props: {**props, "className": "custom"}}
    )
    assert styling("value") == {
        "className": "custom",
        "style": {"color": DEFAULT_BASE16["base0D"]},
    }


def test_resolver_is_reusable():
    styling = create_styling(value_styling, None, {"label": {"margin": 0}})
    first = styling(["label", "value"])
    assert styling(["label", "value"]) == first
    assert first == {
        "className": "label",
        "style": {"margin": 0, "color": DEFAULT_BASE16["base0D"]},
    }


def test_options_are_frozen():
    options = StylingOptions()
    with pytest.raises(AttributeError):
        options.base16_themes = {}
