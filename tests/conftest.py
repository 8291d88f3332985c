"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from structlog.testing import capture_logs

from maths import MathsConfig, RoundingMode


@pytest.fixture
def log_events() -> Iterator[list[dict]]:
    """Capture structlog events emitted during the test."""
    with capture_logs() as events:
        yield events


@pytest.fixture
def low_precision_config() -> MathsConfig:
    """Config carrying only two fractional digits."""
    return MathsConfig(precision=2)


@pytest.fixture
def half_even_config() -> MathsConfig:
    """Config defaulting to banker's rounding."""
    return MathsConfig(rounding_mode=RoundingMode.HALF_EVEN)
