"""Decimal input widget that keeps its text masked while typing."""

from __future__ import annotations

from textual.message import Message
from textual.widgets import Input
from textual.widgets.input import Selection

from decimal_mask.field import MaskedDecimalField
from decimal_mask.formatter import pinned_position
from decimal_mask.models import MaskConfig


class DecimalInput(Input):
    """An Input that only accepts digits and formats them as a fixed-point value.

    Each digit is appended to the right of the value, so with two decimals
    typing ``5``, ``7``, ``9`` shows ``0.05``, ``0.57`` and ``5.79``.
    Backspace shifts the value back.  The cursor is always kept right
    before the suffix.
    """

    class ValueChanged(Message):
        """Posted when typing or assignment changes the decimal value."""

        def __init__(self, decimal_input: DecimalInput, value: float | None) -> None:
            super().__init__()
            self.decimal_input = decimal_input
            self.value = value

        @property
        def control(self) -> DecimalInput:
            """The DecimalInput that sent the message."""
            return self.decimal_input

    def __init__(
        self,
        config: MaskConfig | None = None,
        decimal_value: float | None = None,
        **kwargs,
    ) -> None:
        """Initialize the input.

        Args:
            config: Prefix, suffix and digit limits for the mask.
            decimal_value: Initial value; zero (or empty with a placeholder)
                when omitted.
            **kwargs: Passed to :class:`~textual.widgets.Input`.  A
                ``placeholder`` makes a zero value render as empty text.
        """
        mask = MaskedDecimalField(config, has_placeholder=bool(kwargs.get("placeholder")))
        if decimal_value is not None:
            mask.set_value(decimal_value)
        kwargs.pop("value", None)
        # Assigned first: Input.__init__ may already trigger the watchers.
        self.mask = mask
        super().__init__(**kwargs)
        mask.host = self

    @property
    def decimal_value(self) -> float | None:
        """The current value, or None while the placeholder is shown."""
        return self.mask.value

    @decimal_value.setter
    def decimal_value(self, value: float | None) -> None:
        self.mask.set_value(value)
        self.post_message(self.ValueChanged(self, self.mask.value))

    def on_mount(self) -> None:
        """Show the initial value with the cursor at the editable position."""
        with self.prevent(Input.Changed):
            self.value = self.mask.text
        self.cursor_position = self.mask.cursor

    # MaskHost

    def replace_text(self, text: str) -> None:
        """Write formatted text without re-entering the change handler."""
        with self.prevent(Input.Changed):
            self.value = text
        # Input.Changed arrives asynchronously, so report the echo here.
        self.mask.on_text_changed(text)

    def set_cursor(self, offset: int) -> None:
        """Move the cursor to *offset*."""
        self.cursor_position = offset

    def _forward(self, raw_text: str) -> None:
        """Hand user-edited text to the mask and announce the new value."""
        if self.mask.on_text_changed(raw_text) is not None:
            self.post_message(self.ValueChanged(self, self.mask.value))

    async def _on_key(self, event) -> None:
        """Intercept keys: allow digits and navigation, reject everything else."""
        # Let navigation and control keys pass through to the parent handler.
        if not event.is_printable:
            await super()._on_key(event)
            return

        event.prevent_default()
        event.stop()

        char = event.character
        if not (char and char.isdigit()):
            return

        cursor = self.cursor_position
        raw_text = self.value[:cursor] + char + self.value[cursor:]

        # Same cap the keyboard would hit on a length-limited field.
        if len(raw_text) > self.mask.max_text_length:
            return

        self._forward(raw_text)

    def on_input_changed(self, event: Input.Changed) -> None:
        """Treat external edits (paste, assignment to ``value``) as typing."""
        event.stop()
        self._forward(self._cap_length(event.value))

    def _cap_length(self, text: str) -> str:
        """Drop the end of an oversized insertion, keeping the suffix.

        The cursor sits right after inserted text, so the excess characters
        are the ones just before the pinned position.
        """
        excess = len(text) - self.mask.max_text_length
        if excess <= 0:
            return text
        end = pinned_position(text, self.mask.config)
        return text[: max(end - excess, 0)] + text[end:]

    def watch_selection(self, selection: Selection) -> None:
        """Pin the cursor after every selection change."""
        self.mask.on_selection_changed(selection.start, selection.end, self.value)

    def action_delete_left(self) -> None:
        """Remove the last typed digit."""
        cursor = self.cursor_position
        if cursor == 0:
            return
        self._forward(self.value[: cursor - 1] + self.value[cursor:])

    def action_delete_left_all(self) -> None:
        """Clear the value."""
        self.mask.clear()
        self.post_message(self.ValueChanged(self, self.mask.value))

    action_delete_left_word = action_delete_left_all

    def action_delete_right(self) -> None:
        """Nothing is editable right of the cursor."""

    action_delete_right_word = action_delete_right
    action_delete_right_all = action_delete_right
