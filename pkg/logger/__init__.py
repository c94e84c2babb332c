"""
Logger package.
"""
from .logger import (
    setup_logging,
    get_logger,
    StructuredFormatter,
    StructuredLogger,
    StructuredQueueHandler,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "StructuredFormatter",
    "StructuredLogger",
    "StructuredQueueHandler",
]
