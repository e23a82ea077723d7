"""Tests for the DecimalInput widget keyboard handling and masking."""

from __future__ import annotations

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Input

from decimal_mask.models import MaskConfig
from decimal_mask.widgets.decimal_input import DecimalInput


class _DecimalApp(App):
    """Minimal app with a DecimalInput for isolated widget testing."""

    def __init__(self, config: MaskConfig, **input_kwargs) -> None:
        super().__init__()
        self.config = config
        self.input_kwargs = input_kwargs
        self.values: list[float | None] = []

    def compose(self) -> ComposeResult:
        """Compose a DecimalInput and a second Input for focus changes."""
        yield DecimalInput(self.config, id="amount", **self.input_kwargs)
        yield Input(id="other")

    def on_decimal_input_value_changed(self, event: DecimalInput.ValueChanged) -> None:
        self.values.append(event.value)


def _cents_app(**kwargs) -> _DecimalApp:
    return _DecimalApp(MaskConfig(max_decimal_digits=2), **kwargs)


class TestDecimalInputInitial:
    """Tests for the initial rendering."""

    async def test_zero_rendered(self):
        app = _cents_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one("#amount", DecimalInput).value == "0.00"

    async def test_placeholder_leaves_text_empty(self):
        app = _cents_app(placeholder="Amount")
        async with app.run_test() as pilot:
            await pilot.pause()
            inp = app.query_one("#amount", DecimalInput)
            assert inp.value == ""
            assert inp.decimal_value is None

    async def test_initial_decimal_value(self):
        app = _DecimalApp(MaskConfig(suffix="kg", max_decimal_digits=2), decimal_value=12.5)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one("#amount", DecimalInput).value == "12.50 kg"


class TestDecimalInputOnKey:
    """Tests for digit entry in DecimalInput._on_key."""

    async def test_digits_shift_in_from_the_right(self):
        app = _cents_app()
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("5")
            assert inp.value == "0.05"
            await pilot.press("7")
            assert inp.value == "0.57"
            await pilot.press("9")
            assert inp.value == "5.79"
            assert inp.decimal_value == 5.79

    async def test_letter_is_blocked(self):
        app = _cents_app()
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("a")
            assert inp.value == "0.00"

    async def test_period_is_blocked(self):
        app = _cents_app()
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("1", ".")
            assert inp.value == "0.01"

    async def test_grouping_applied(self):
        app = _cents_app()
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("1", "2", "3", "4", "5", "6")
            assert inp.value == "1,234.56"

    async def test_suffix_and_cursor(self):
        app = _DecimalApp(MaskConfig(suffix="kg", max_decimal_digits=2))
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("1", "2", "5", "0")
            assert inp.value == "12.50 kg"
            assert inp.cursor_position == 5

    async def test_prefix(self):
        app = _DecimalApp(MaskConfig(prefix="R$", max_decimal_digits=2))
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("9", "9")
            assert inp.value == "R$ 0.99"

    async def test_over_max_is_ignored(self):
        app = _DecimalApp(MaskConfig(max_decimal_digits=2, max_value=1.0))
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("9", "9", "9")
            assert inp.value == "0.99"
            assert inp.decimal_value == 0.99

    async def test_length_limit(self):
        app = _DecimalApp(MaskConfig(max_integer_digits=2, max_decimal_digits=2))
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("1", "2", "3", "4", "5")
            assert inp.value == "12.34"

    async def test_value_changed_posted(self):
        app = _cents_app()
        async with app.run_test() as pilot:
            app.query_one("#amount", DecimalInput).focus()
            await pilot.pause()
            await pilot.press("4", "2")
            await pilot.pause()
            assert app.values == [0.04, 0.42]


class TestDecimalInputDeletion:
    """Tests for backspace and clearing."""

    async def test_backspace_shifts_back(self):
        app = _cents_app()
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("5", "7", "9", "backspace")
            assert inp.value == "0.57"

    async def test_backspace_before_suffix(self):
        app = _DecimalApp(MaskConfig(suffix="kg", max_decimal_digits=2), decimal_value=12.5)
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("backspace")
            assert inp.value == "1.25 kg"

    async def test_backspace_to_zero_shows_placeholder(self):
        app = _cents_app(placeholder="Amount")
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("5")
            assert inp.value == "0.05"
            await pilot.press("backspace")
            assert inp.value == ""
            assert inp.decimal_value is None

    async def test_delete_left_all_clears(self):
        app = _cents_app()
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("5", "7")
            inp.action_delete_left_all()
            await pilot.pause()
            assert inp.value == "0.00"
            assert inp.decimal_value == 0.0

    async def test_delete_right_does_nothing(self):
        app = _DecimalApp(MaskConfig(suffix="kg", max_decimal_digits=2), decimal_value=1.0)
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("delete")
            assert inp.value == "1.00 kg"


class TestDecimalInputCursor:
    """Tests for cursor pinning."""

    async def test_home_is_pinned_back(self):
        app = _DecimalApp(MaskConfig(suffix="kg", max_decimal_digits=2), decimal_value=12.5)
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            await pilot.press("home")
            await pilot.pause()
            assert inp.cursor_position == 5

    async def test_programmatic_cursor_is_pinned_back(self):
        app = _cents_app(decimal_value=5.79)
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            inp.cursor_position = 1
            await pilot.pause()
            assert inp.cursor_position == 4


class TestDecimalInputAssignment:
    """Tests for programmatic changes."""

    async def test_decimal_value_setter(self):
        app = _cents_app()
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.decimal_value = 42.5
            await pilot.pause()
            assert inp.value == "42.50"
            assert app.values[-1] == 42.5

    async def test_text_assignment_is_masked(self):
        """Writing raw text (e.g. a paste) is parsed like typing."""
        app = _cents_app()
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.value = "1234"
            await pilot.pause()
            assert inp.value == "12.34"
            assert inp.decimal_value == 12.34

    async def test_oversized_paste_is_cut_to_length(self):
        """A paste past the length limit keeps only what fits, like typing."""
        app = _DecimalApp(MaskConfig(max_integer_digits=2, max_decimal_digits=2))
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            inp.post_message(events.Paste("123456789"))
            await pilot.pause()
            assert inp.value == "0.01"
            assert inp.decimal_value == 0.01
            await pilot.press("backspace")
            assert inp.value == "0.00"
            assert inp.decimal_value == 0.0

    async def test_oversized_paste_keeps_suffix(self):
        app = _DecimalApp(MaskConfig(suffix="kg", max_integer_digits=2, max_decimal_digits=2))
        async with app.run_test() as pilot:
            inp = app.query_one("#amount", DecimalInput)
            inp.focus()
            await pilot.pause()
            inp.post_message(events.Paste("987"))
            await pilot.pause()
            assert inp.value == "0.09 kg"
            assert inp.decimal_value == 0.09
