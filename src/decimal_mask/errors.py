"""Exceptions raised by the masking core."""

from __future__ import annotations


class MaskError(Exception):
    """Base class for masking errors."""


class ParseError(MaskError):
    """Raised when raw field text does not reduce to a digit sequence."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Cannot parse a numeric value from {text!r}")
        self.text = text


class ValueExceedsMax(MaskError):
    """Raised when a parsed value is above the configured maximum."""

    def __init__(self, value: float, max_value: float) -> None:
        super().__init__(f"Value {value} exceeds maximum {max_value}")
        self.value = value
        self.max_value = max_value
