"""
Structured log sink.

Writes finalized request records through the structured logger.
"""
import logging
from typing import Optional

from internal.domain.request_log import HttpRequestLog, Severity
from pkg.logger.logger import get_logger


REQUEST_LOG_MESSAGE = "http request"

# Plain stdlib logger for reporting emission failures.
_fallback_logger = logging.getLogger(__name__ + ".fallback")


class StructuredLogSink:
    """
    Log sink emitting one structured record per call.
    
    Record fields travel as logging extras, so the JSON formatter
    renders each of them as a top-level key.
    """
    
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        """
        Initialize the sink.
        
        Args:
            logger: Destination logger; defaults to the request logger.
        """
        self._logger = logger or get_logger("http.request")
    
    @property
    def logger(self) -> logging.Logger:
        """Get the destination logger."""
        return self._logger
    
    def emit(self, record: HttpRequestLog, severity: Severity) -> None:
        """
        Emit a record.
        
        Args:
            record: Finalized request record.
            severity: ERROR or DEBUG.
        """
        try:
            self._logger.log(severity.level, REQUEST_LOG_MESSAGE, extra=record.to_dict())
        except Exception:
            _fallback_logger.warning(
                "Failed to emit request log for %s %s",
                record.method,
                record.path,
                exc_info=True,
            )
