"""
Metrics infrastructure for request observability.

Provides the Prometheus histogram and the sink writing to it.
"""

from .prometheus import (
    RESPONSE_STATUS,
    RESPONSE_STATUS_BUCKETS,
    RESPONSE_STATUS_NAME,
    build_response_status_histogram,
)
from .sink import PrometheusLatencySink

__all__ = [
    "RESPONSE_STATUS",
    "RESPONSE_STATUS_BUCKETS",
    "RESPONSE_STATUS_NAME",
    "build_response_status_histogram",
    "PrometheusLatencySink",
]
