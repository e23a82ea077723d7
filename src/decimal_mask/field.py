"""Keystroke-driven masked decimal field, independent of any UI toolkit."""

from __future__ import annotations

import math
from typing import Protocol

from decimal_mask.errors import ParseError, ValueExceedsMax
from decimal_mask.formatter import format_value, max_text_length, pinned_position
from decimal_mask.logging import get_logger
from decimal_mask.models import InputState, MaskConfig, MaskResult
from decimal_mask.parser import parse_value

log = get_logger(__name__)


class MaskHost(Protocol):
    """The text surface a :class:`MaskedDecimalField` drives.

    Hosts must report every change of their text, including the ones caused
    by :meth:`replace_text`, back through
    :meth:`MaskedDecimalField.on_text_changed`.
    """

    def replace_text(self, text: str) -> None: ...

    def set_cursor(self, offset: int) -> None: ...


class MaskedDecimalField:
    """Holds a decimal value and keeps the field text formatted around it.

    Each digit typed into the field shifts the value one decimal place to
    the left, the way cash registers take amounts.  The text is rewritten
    after every change and the cursor is held right before the suffix.
    """

    def __init__(
        self,
        config: MaskConfig | None = None,
        *,
        has_placeholder: bool = False,
        host: MaskHost | None = None,
    ) -> None:
        """Initialize the field.

        Args:
            config: Formatting limits; defaults to :class:`MaskConfig` defaults.
            has_placeholder: When set, a zero value leaves the text empty so
                the host can show its placeholder instead of ``0``.
            host: Optional text surface to write formatted text to.
        """
        self.config = config or MaskConfig()
        self.has_placeholder = has_placeholder
        self.host = host
        self.state = InputState.IDLE
        self.value: float | None = None if has_placeholder else 0.0

    @property
    def text(self) -> str:
        """The formatted text for the current value."""
        if self.value is None:
            return ""
        return format_value(self.value, self.config)

    @property
    def cursor(self) -> int:
        """The pinned cursor position within :attr:`text`."""
        return pinned_position(self.text, self.config)

    @property
    def max_text_length(self) -> int:
        """Longest raw text the host should let the user type."""
        return max_text_length(self.config)

    def _check_max(self, value: float) -> None:
        if value > self.config.max_value:
            raise ValueExceedsMax(value, self.config.max_value)

    def apply_raw_input(self, raw_text: str) -> MaskResult:
        """Parse user-edited text, update the value and reformat.

        Invalid or too large input keeps the previous value.  The field
        enters the suppressing state, expecting the host to echo the
        returned text back.

        Args:
            raw_text: The field text after the user's edit.

        Returns:
            The text to display and the cursor offset to apply.
        """
        old_value = self.value
        try:
            new_value: float | None = parse_value(raw_text, self.config)
        except ParseError as exc:
            log.warning("mask.parse_failed", text=exc.text)
            new_value = old_value
        else:
            if self.has_placeholder and new_value == 0.0:
                log.debug("mask.cleared_to_placeholder")
                self.value = None
                self.state = InputState.SUPPRESSING
                return MaskResult("", 0)

            try:
                self._check_max(new_value)
            except ValueExceedsMax as exc:
                log.debug("mask.rejected", value=exc.value, max_value=exc.max_value)
                new_value = old_value

        self.value = new_value
        self.state = InputState.SUPPRESSING
        return MaskResult(self.text, self.cursor)

    def on_text_changed(self, text: str) -> MaskResult | None:
        """Handle a text change notification from the host.

        The first notification after a programmatic write is that write's
        echo and is swallowed.

        Args:
            text: The field text after the change.

        Returns:
            The applied result, or None when the notification was swallowed.
        """
        if self.state is InputState.SUPPRESSING:
            self.state = InputState.IDLE
            return None

        result = self.apply_raw_input(text)
        self._write(result)
        return result

    def on_selection_changed(self, start: int, end: int, text: str) -> int | None:
        """Pin the cursor whenever the host reports a selection change.

        Args:
            start: Selection start offset.
            end: Selection end offset.
            text: The text currently in the field.

        Returns:
            The position the cursor was moved to, or None if already pinned.
        """
        position = pinned_position(text, self.config)
        if start == position and end == position:
            return None
        if self.host is not None:
            self.host.set_cursor(position)
        return position

    def set_value(self, value: float | None) -> str:
        """Assign a value directly and render it.

        The maximum is not enforced here; programmatic values are trusted.

        Args:
            value: The new value, or None to clear the field.

        Returns:
            The formatted text now shown by the field.
        """
        if value is None:
            self.value = None if self.has_placeholder else 0.0
        elif not math.isfinite(value):
            log.warning("mask.non_finite_value", value=value)
        else:
            self.value = float(value)

        result = MaskResult(self.text, self.cursor)
        if self.host is not None:
            self.state = InputState.SUPPRESSING
            self._write(result)
        return result.text

    def clear(self) -> MaskResult:
        """Clear the field as if all its text had been deleted."""
        result = self.apply_raw_input("")
        self._write(result)
        return result

    def _write(self, result: MaskResult) -> None:
        if self.host is None:
            return
        self.host.replace_text(result.text)
        self.host.set_cursor(result.cursor)
