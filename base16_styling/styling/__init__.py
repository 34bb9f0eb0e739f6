from .factory import KeyResolver, StylingFactory, StylingOptions, create_styling
from .lookup import get_styling_by_keys
from .merge import StylingKind, kind_of, merge_styling, merge_stylings

__all__ = [
    "KeyResolver",
    "StylingFactory",
    "StylingKind",
    "StylingOptions",
    "create_styling",
    "get_styling_by_keys",
    "kind_of",
    "merge_styling",
    "merge_stylings",
]
