"""Textual widgets backed by the masking core."""

from decimal_mask.widgets.decimal_input import DecimalInput

__all__ = ["DecimalInput"]
