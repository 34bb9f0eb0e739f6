"""Merging styling values.

A styling value is one of three things:

* a class name string,
* a mapping of style attributes,
* a function ``(props, *args) -> props`` that receives the props built so
  far and returns the props to merge in.

merge_styling combines a custom value with a default one so that the custom
side always has the last word, whatever mix of kinds is involved.
"""

from collections.abc import Mapping
from enum import Enum

from ..errors import InvalidStylingError


class StylingKind(Enum):
    CLASS_NAME = "className"
    STYLE = "style"
    FUNCTION = "function"


def kind_of(styling, key=None):
    """Classify a styling value, raising InvalidStylingError for anything else"""
    if isinstance(styling, str):
        return StylingKind.CLASS_NAME
    if isinstance(styling, Mapping):
        return StylingKind.STYLE
    if callable(styling):
        return StylingKind.FUNCTION
    raise InvalidStylingError(styling, key)


def join_class_names(*class_names):
    return " ".join(name for name in class_names if name)


def combine_props(props, extra):
    """Lay ``extra`` props over ``props``, returning a new props dict.

    Class names are concatenated, styles are shallow-merged with ``extra``
    winning on conflicts.
    """
    props = props or {}
    extra = extra or {}
    return {
        "className": join_class_names(props.get("className"), extra.get("className")),
        "style": {**(props.get("style") or {}), **(extra.get("style") or {})},
    }


# Each entry builds the merged value for (custom kind, default kind)


def _class_name_on_class_name(custom, default):
    return join_class_names(default, custom)


def _class_name_on_style(custom, default):
    def styling(props, *args):
        return combine_props(props, {"className": custom, "style": default})

    return styling


def _class_name_on_function(custom, default):
    def styling(props, *args):
        return combine_props(default(props, *args), {"className": custom})

    return styling


def _style_on_class_name(custom, default):
    def styling(props, *args):
        return combine_props(props, {"className": default, "style": custom})

    return styling


def _style_on_style(custom, default):
    return {**default, **custom}


def _style_on_function(custom, default):
    def styling(props, *args):
        return combine_props(default(props, *args), {"style": custom})

    return styling


def _function_on_class_name(custom, default):
    def styling(props, *args):
        return custom(combine_props({"className": default}, props), *args)

    return styling


def _function_on_style(custom, default):
    def styling(props, *args):
        return custom(combine_props({"style": default}, props), *args)

    return styling


def _function_on_function(custom, default):
    def styling(props, *args):
        return custom(default(props, *args), *args)

    return styling


MERGE_TABLE = {
    (StylingKind.CLASS_NAME, StylingKind.CLASS_NAME): _class_name_on_class_name,
    (StylingKind.CLASS_NAME, StylingKind.STYLE): _class_name_on_style,
    (StylingKind.CLASS_NAME, StylingKind.FUNCTION): _class_name_on_function,
    (StylingKind.STYLE, StylingKind.CLASS_NAME): _style_on_class_name,
    (StylingKind.STYLE, StylingKind.STYLE): _style_on_style,
    (StylingKind.STYLE, StylingKind.FUNCTION): _style_on_function,
    (StylingKind.FUNCTION, StylingKind.CLASS_NAME): _function_on_class_name,
    (StylingKind.FUNCTION, StylingKind.STYLE): _function_on_style,
    (StylingKind.FUNCTION, StylingKind.FUNCTION): _function_on_function,
}


def merge_styling(custom_styling, default_styling, key=None):
    """Merge a custom styling value over a default one.

    Args:
        custom_styling: Caller-supplied styling value, or None
        default_styling: Theme-derived styling value, or None
        key: Styling key, only used in error messages

    Returns:
        The merged styling value; a string or mapping when both sides are of
        the same literal kind, otherwise a styling function

    Raises:
        InvalidStylingError: If either value is not a str, mapping or callable
    """
    if custom_styling is None:
        return default_styling
    if default_styling is None:
        return custom_styling

    merge = MERGE_TABLE[kind_of(custom_styling, key), kind_of(default_styling, key)]
    return merge(custom_styling, default_styling)


def merge_stylings(custom_stylings, default_stylings):
    """Merge two styling maps key by key.

    The result holds the default keys first, followed by keys that only
    appear in the custom map.
    """
    keys = list(default_stylings)
    keys.extend(key for key in custom_stylings if key not in default_stylings)

    return {
        key: merge_styling(custom_stylings.get(key), default_stylings.get(key), key=key)
        for key in keys
    }
