"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime

import pytest

from payment_gateways.infrastructure.id_generator import SequentialIdGenerator
from payment_gateways.infrastructure.output_sink import InMemoryOutputSink
from payment_gateways.infrastructure.time_provider import FixedTimeProvider


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic log lines."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def output_sink() -> InMemoryOutputSink:
    """Captures trace lines instead of printing them."""
    return InMemoryOutputSink()


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    """Yields tokens 00000001, 00000002, ..."""
    return SequentialIdGenerator()
