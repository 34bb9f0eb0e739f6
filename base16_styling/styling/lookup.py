"""Resolving styling keys to final ``className``/``style`` props."""

from .merge import StylingKind, join_class_names, kind_of


def _snapshot(props):
    # Styling functions get their own copy so they cannot alter earlier steps
    return {**props, "style": dict(props.get("style") or {})}


def get_styling_by_keys(merged_styling, keys, *args):
    """Combine the styling of one or more keys into a props dict.

    Args:
        merged_styling: Styling map, as returned by merge_stylings
        keys: A single key, a list/tuple of keys applied in order, or None to
            get the whole styling map back
        *args: Extra arguments passed to every styling function

    Returns:
        dict: Props with ``className`` and/or ``style``; empty fields are
        left out
    """
    if keys is None:
        return merged_styling

    if not isinstance(keys, (list, tuple)):
        keys = [keys]

    props = {"className": "", "style": {}}
    for key in keys:
        styling = merged_styling.get(key)
        if styling is None or styling == "":
            continue

        kind = kind_of(styling, key)
        if kind is StylingKind.CLASS_NAME:
            props = {**props, "className": join_class_names(props.get("className"), styling)}
        elif kind is StylingKind.STYLE:
            props = {**props, "style": {**(props.get("style") or {}), **styling}}
        else:
            props = {**props, **(styling(_snapshot(props), *args) or {})}

    if not props.get("className"):
        props.pop("className", None)
    if not props.get("style"):
        props.pop("style", None)

    return props
