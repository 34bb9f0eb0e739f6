"""Exceptions raised by base16_styling."""


class StylingError(Exception):
    """Base exception for all styling errors"""


class InvalidStylingError(StylingError, TypeError):
    """A styling value is not a class name, a style mapping or a function."""

    def __init__(self, value, key=None):
        self.value = value
        self.key = key
        where = f" for key '{key}'" if key is not None else ""
        super().__init__(
            f"Invalid styling value{where}: {value!r} "
            f"(expected str, mapping or callable, got {type(value).__name__})"
        )
