"""
Structured logging module.

Provides JSON-formatted structured logging with optional background dispatch.
"""
import copy
import json
import logging
import queue
import sys
from datetime import datetime, timezone
from logging.handlers import QueueHandler, QueueListener
from typing import Any, Optional


# Attributes every LogRecord carries; anything else is a structured extra.
_RESERVED_ATTRS = frozenset((
    "name", "msg", "args", "levelname", "levelno",
    "pathname", "filename", "module", "exc_info",
    "exc_text", "stack_info", "lineno", "funcName",
    "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "message",
    "taskName",
))


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.
    
    Outputs log records as JSON for easy parsing by log aggregators.
    """
    
    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as JSON.
        
        Args:
            record: Log record to format.
            
        Returns:
            JSON-formatted log string.
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = self._serialize_value(value)
        
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        return json.dumps(log_data, ensure_ascii=False, default=str)
    
    def _serialize_value(self, value: Any) -> Any:
        """
        Serialize a value for JSON output.
        
        Args:
            value: Value to serialize.
            
        Returns:
            JSON-serializable value.
        """
        if isinstance(value, (str, int, float, bool, type(None))):
            return value
        if isinstance(value, (list, tuple)):
            return [self._serialize_value(v) for v in value]
        if isinstance(value, dict):
            return {k: self._serialize_value(v) for k, v in value.items()}
        return str(value)


class StructuredQueueHandler(QueueHandler):
    """
    Queue handler that leaves formatting to the listener.
    
    Only the message arguments are merged; exception info and extras
    stay on the record for StructuredFormatter.
    """
    
    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        """
        Prepare a record for enqueuing.
        
        Args:
            record: Record to enqueue.
            
        Returns:
            Copy of the record with its message rendered.
        """
        record = copy.copy(record)
        record.msg = record.getMessage()
        record.args = None
        return record


class StructuredLogger(logging.Logger):
    """
    Logger with structured logging support.
    
    Allows passing extra fields as keyword arguments.
    """
    
    def _log_with_extras(
        self,
        level: int,
        msg: str,
        args: tuple,
        **kwargs: Any,
    ) -> None:
        """
        Log with extra fields.
        
        Args:
            level: Log level.
            msg: Log message.
            args: Message arguments.
            **kwargs: Extra fields to include in log.
        """
        if not self.isEnabledFor(level):
            return
        exc_info = kwargs.pop("exc_info", None)
        extra = kwargs.pop("extra", {})
        extra.update(kwargs)
        super()._log(level, msg, args, exc_info=exc_info, extra=extra)
    
    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log debug message with extra fields."""
        self._log_with_extras(logging.DEBUG, msg, args, **kwargs)
    
    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log info message with extra fields."""
        self._log_with_extras(logging.INFO, msg, args, **kwargs)
    
    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log warning message with extra fields."""
        self._log_with_extras(logging.WARNING, msg, args, **kwargs)
    
    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log error message with extra fields."""
        self._log_with_extras(logging.ERROR, msg, args, **kwargs)
    
    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log critical message with extra fields."""
        self._log_with_extras(logging.CRITICAL, msg, args, **kwargs)


# Set custom logger class
logging.setLoggerClass(StructuredLogger)


def setup_logging(
    level: str = "INFO",
    json_format: bool = True,
    queued: bool = False,
) -> Optional[QueueListener]:
    """
    Set up logging configuration.
    
    With ``queued`` the root logger only enqueues records; a background
    listener thread formats and writes them, so request paths never wait
    on stream I/O. The caller owns the returned listener and must start
    and stop it.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Whether to use JSON format.
        queued: Whether to dispatch records through a background queue.
        
    Returns:
        The queue listener when ``queued`` is set, otherwise None.
    """
    log_level = getattr(logging, level.upper())
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    
    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    # Create console handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
        )
    
    if not queued:
        root_logger.addHandler(handler)
        return None
    
    log_queue: queue.SimpleQueue = queue.SimpleQueue()
    root_logger.addHandler(StructuredQueueHandler(log_queue))
    return QueueListener(log_queue, handler, respect_handler_level=True)


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.
    
    Args:
        name: Logger name (typically __name__).
        
    Returns:
        StructuredLogger instance.
    """
    return logging.getLogger(name)  # type: ignore
