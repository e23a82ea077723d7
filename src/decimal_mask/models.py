"""Data models for the decimal mask: configuration, input state and results."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum

DEFAULT_MAX_DIGITS = 15


class InputState(Enum):
    """Re-entry guard for programmatic text writes.

    A field is ``SUPPRESSING`` between writing its own formatted text and
    receiving the change notification that write causes.
    """

    IDLE = "Idle"
    SUPPRESSING = "Suppressing"


@dataclass(frozen=True)
class MaskConfig:
    """Immutable formatting limits for a masked decimal field."""

    prefix: str = ""
    suffix: str = ""
    max_value: float = sys.float_info.max
    max_integer_digits: int = DEFAULT_MAX_DIGITS
    max_decimal_digits: int = DEFAULT_MAX_DIGITS

    def __post_init__(self) -> None:
        if self.max_integer_digits < 1:
            raise ValueError(
                f"max_integer_digits must be at least 1, got {self.max_integer_digits}"
            )
        if self.max_decimal_digits < 0:
            raise ValueError(
                f"max_decimal_digits must not be negative, got {self.max_decimal_digits}"
            )


@dataclass(frozen=True)
class MaskResult:
    """Formatted text to show in the field and where to put the cursor."""

    text: str
    cursor: int
