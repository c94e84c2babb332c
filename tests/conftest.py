"""
Pytest configuration and fixtures.
"""
import logging

import pytest
from prometheus_client import CollectorRegistry

from internal.infrastructure.metrics import build_response_status_histogram
from pkg.resilience.sampler import IntervalSampler, reset_samplers


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Fake clock starting at a fixed time."""
    return FakeClock()


@pytest.fixture
def sampler(clock):
    """One-second error-log sampler on the fake clock."""
    return IntervalSampler(interval=1.0, clock=clock)


@pytest.fixture
def registry():
    """Fresh Prometheus registry per test."""
    return CollectorRegistry()


@pytest.fixture
def histogram(registry):
    """Response status histogram registered in the test registry."""
    return build_response_status_histogram(registry=registry)


@pytest.fixture
def request_logger(caplog):
    """Request logger captured at DEBUG."""
    caplog.set_level(logging.DEBUG, logger="test.http.request")
    return logging.getLogger("test.http.request")


@pytest.fixture(autouse=True)
def clean_samplers():
    """Drop process-wide samplers between tests."""
    reset_samplers()
    yield
    reset_samplers()


@pytest.fixture
def observation_count(registry):
    """Number of histogram observations labeled with a status."""
    def count(status: str) -> float:
        value = registry.get_sample_value(
            "http_response_status_seconds_count",
            {"status": status},
        )
        return value or 0.0

    return count
