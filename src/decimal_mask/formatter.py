"""Render fixed-point values as grouped text with prefix and suffix."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, Context, Decimal

from decimal_mask.models import MaskConfig

# Width of the space between the number and its prefix or suffix.
PREFIX_SPACE_SIZE = 1
SUFFIX_SPACE_SIZE = 1


def _group_digits(digits: str) -> str:
    """Group *digits* in threes with commas, keeping any leading zeros."""
    width = len(digits) + (len(digits) - 1) // 3
    return f"{int(digits):0{width},d}"


def format_number(value: float, config: MaskConfig) -> str:
    """Format the bare number: grouped integer part and fixed fraction.

    The float's shortest round-trip representation is used, so ``5.79``
    renders as ``5.79`` padded with zeros instead of exposing binary noise.
    Only the lowest ``max_integer_digits`` integer digits are kept.

    Args:
        value: A finite value.
        config: The field configuration.

    Returns:
        The unsigned number, e.g. ``"1,234.50"``.
    """
    places = config.max_decimal_digits
    exact = abs(Decimal(repr(value)))
    # Enough precision for every integer digit plus the requested fraction.
    context = Context(prec=max(exact.adjusted(), 0) + places + 2)
    quantized = exact.quantize(
        Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN, context=context
    )
    integer_part, _, fraction = f"{quantized:f}".partition(".")
    integer_part = integer_part[-config.max_integer_digits :]
    number = _group_digits(integer_part)
    if places > 0:
        number += "." + fraction
    return number


def format_value(value: float, config: MaskConfig) -> str:
    """Format a value for display in a masked field.

    Args:
        value: The value to render.
        config: The field configuration.

    Returns:
        The display text, e.g. ``"R$ 1,234.50"`` or ``"12.50 kg"``.

    Raises:
        ValueError: If *value* is NaN or infinite.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value {value}")

    sign = "-" if value < 0 else ""
    text = format_number(value, config)

    if config.prefix:
        text = f"{config.prefix} {sign}{text}"
    else:
        text = f"{sign}{text}"

    if config.suffix:
        text = f"{text} {config.suffix}"

    return text


def pinned_position(text: str, config: MaskConfig) -> int:
    """Return the only cursor position the field allows.

    Args:
        text: The text currently displayed.
        config: The field configuration.

    Returns:
        End of the text, or the position right before ``" <suffix>"``.
    """
    if not config.suffix:
        return len(text)
    return max(len(text) - SUFFIX_SPACE_SIZE - len(config.suffix), 0)


def max_text_length(config: MaskConfig) -> int:
    """Return the longest text the host should accept from the keyboard."""
    length = config.max_integer_digits + config.max_decimal_digits + 1
    if config.prefix:
        length += len(config.prefix) + PREFIX_SPACE_SIZE
    if config.suffix:
        length += len(config.suffix) + SUFFIX_SPACE_SIZE
    return length
