"""
Domain package for request observability.

Contains the request log record, severity levels, and domain errors.
"""
from .request_log import (
    HttpRequestLog,
    Severity,
    STATUS_UNSET,
    format_peer_address,
)
from .errors import (
    ObservabilityError,
    InvalidRecordError,
    RecordAlreadyFinalizedError,
    ConfigurationError,
)

__all__ = [
    "HttpRequestLog",
    "Severity",
    "STATUS_UNSET",
    "format_peer_address",
    "ObservabilityError",
    "InvalidRecordError",
    "RecordAlreadyFinalizedError",
    "ConfigurationError",
]
