"""Parse masked field text back into a fixed-point value."""

from __future__ import annotations

import re

from decimal_mask.errors import ParseError
from decimal_mask.models import MaskConfig

# Separators and the euro sign are always stripped, whatever the config says.
_ALWAYS_STRIPPED = ",.€"

_DIGITS_RE = re.compile(r"[0-9]+")
_WHITESPACE_RE = re.compile(r"\s")


def _strip_pattern(config: MaskConfig) -> re.Pattern[str]:
    """Build the character class of symbols removed before parsing.

    Prefix and suffix contribute their individual characters, not the
    literal strings, so a digit inside the suffix (e.g. ``m2``) is also
    removed from the typed digits.
    """
    chars = dict.fromkeys(config.prefix + config.suffix + _ALWAYS_STRIPPED)
    return re.compile("[" + "".join(re.escape(c) for c in chars) + "]")


def divisor_for(max_decimal_digits: int) -> int:
    """Return the scale applied to the typed digit sequence.

    Args:
        max_decimal_digits: Configured number of fractional digits.

    Returns:
        ``10 ** max_decimal_digits``; zero or fewer digits still divide by 10.
    """
    return 10 ** max(max_decimal_digits, 1)


def parse_value(raw_text: str | None, config: MaskConfig) -> float:
    """Convert the current field text into its numeric value.

    Every symbol the formatter adds is stripped and the remaining digits are
    read as an integer whose last ``max_decimal_digits`` digits are the
    fraction, so typing a digit shifts the value one place to the left.

    Args:
        raw_text: The text currently in the field, e.g. ``"R$ 1,234.56"``.
        config: The field configuration.

    Returns:
        The parsed value; ``0.0`` for empty text.

    Raises:
        ParseError: If anything other than digits remains after stripping.
    """
    if not raw_text:
        return 0.0

    cleaned = _strip_pattern(config).sub("", raw_text)
    cleaned = _WHITESPACE_RE.sub("", cleaned)

    if not _DIGITS_RE.fullmatch(cleaned):
        raise ParseError(raw_text)

    return float(cleaned) / divisor_for(config.max_decimal_digits)
