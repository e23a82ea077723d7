"""Live fixed-point decimal masking for text inputs."""

from decimal_mask.errors import MaskError, ParseError, ValueExceedsMax
from decimal_mask.field import MaskedDecimalField, MaskHost
from decimal_mask.formatter import format_value, max_text_length, pinned_position
from decimal_mask.models import InputState, MaskConfig, MaskResult
from decimal_mask.parser import parse_value

__all__ = [
    "InputState",
    "MaskConfig",
    "MaskError",
    "MaskHost",
    "MaskResult",
    "MaskedDecimalField",
    "ParseError",
    "ValueExceedsMax",
    "format_value",
    "max_text_length",
    "parse_value",
    "pinned_position",
]
