"""
HTTP Middleware for request observability.

Provides middleware components for request processing.
"""

from .request_log import RequestLogMiddleware, build_request_observer

__all__ = [
    "RequestLogMiddleware",
    "build_request_observer",
]
