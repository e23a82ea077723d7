"""Textual demo application hosting a single DecimalInput."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from decimal_mask.models import MaskConfig
from decimal_mask.widgets.decimal_input import DecimalInput


def describe_value(value: float | None) -> str:
    """Return the status bar text for a field value."""
    if value is None:
        return "Value: (empty)"
    return f"Value: {value!r}"


class DecimalMaskApp(App):
    """Type into a masked decimal field and watch its value."""

    TITLE = "decimal-mask"

    CSS = """
    #amount {
        margin: 1 2;
    }
    #value-bar {
        margin: 0 2;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("escape", "quit", "Quit"),
        Binding("ctrl+r", "reset", "Reset", show=False),
    ]

    def __init__(self, config: MaskConfig | None = None, placeholder: str = "") -> None:
        """Initialize the app.

        Args:
            config: Mask configuration for the input.
            placeholder: Hint shown while the value is empty.
        """
        super().__init__()
        self.config = config or MaskConfig()
        self.placeholder = placeholder
        self.last_value: float | None = None

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        field = DecimalInput(self.config, placeholder=self.placeholder, id="amount")
        yield field
        yield Static(describe_value(field.decimal_value), id="value-bar")

    def on_mount(self) -> None:
        """Focus the input."""
        self.query_one("#amount", DecimalInput).focus()

    def on_decimal_input_value_changed(self, event: DecimalInput.ValueChanged) -> None:
        """Show the new value in the status bar."""
        self.last_value = event.value
        self.query_one("#value-bar", Static).update(describe_value(event.value))

    def action_reset(self) -> None:
        """Clear the input."""
        self.query_one("#amount", DecimalInput).decimal_value = None
