"""Shared test fixtures."""

from __future__ import annotations

import pytest

from decimal_mask.field import MaskedDecimalField
from decimal_mask.models import MaskConfig


class RecordingHost:
    """A MaskHost that records writes and echoes them like a real text field."""

    def __init__(self) -> None:
        self.field: MaskedDecimalField | None = None
        self.texts: list[str] = []
        self.cursors: list[int] = []

    def replace_text(self, text: str) -> None:
        self.texts.append(text)
        if self.field is not None:
            self.field.on_text_changed(text)

    def set_cursor(self, offset: int) -> None:
        self.cursors.append(offset)


@pytest.fixture
def cents_config() -> MaskConfig:
    """Two decimals, no prefix or suffix."""
    return MaskConfig(max_decimal_digits=2)


@pytest.fixture
def kg_config() -> MaskConfig:
    """Two decimals with a ``kg`` suffix."""
    return MaskConfig(suffix="kg", max_decimal_digits=2)


@pytest.fixture
def real_config() -> MaskConfig:
    """Two decimals with an ``R$`` prefix."""
    return MaskConfig(prefix="R$", max_decimal_digits=2)


@pytest.fixture
def host() -> RecordingHost:
    """A recording host not yet attached to a field."""
    return RecordingHost()


@pytest.fixture
def hosted_field(cents_config: MaskConfig, host: RecordingHost) -> MaskedDecimalField:
    """A two-decimal field wired to a recording host."""
    field = MaskedDecimalField(cents_config, host=host)
    host.field = field
    return field
