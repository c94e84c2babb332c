"""
Use case package for request observability.

Contains outcome classification and the request observation pipeline.
"""
from .classify_outcome import (
    OutcomeClassifier,
    classify_status,
    DEFAULT_ERROR_THRESHOLD,
)
from .observe_request import (
    RequestObserver,
    LogSink,
    MetricsSink,
    error_status_code,
    DEFAULT_FALLBACK_STATUS,
)

__all__ = [
    "OutcomeClassifier",
    "classify_status",
    "DEFAULT_ERROR_THRESHOLD",
    "RequestObserver",
    "LogSink",
    "MetricsSink",
    "error_status_code",
    "DEFAULT_FALLBACK_STATUS",
]
