"""
Observe Request Use Case.

Wraps a downstream handler: times it, classifies its outcome, and hands
the finished record to the log and metrics sinks. The handler's result
or exception always reaches the caller untouched.
"""
import time
from functools import wraps
from typing import Any, Awaitable, Callable, Optional, Protocol, TypeVar

from internal.domain.errors import ObservabilityError
from internal.domain.request_log import HttpRequestLog, MAX_STATUS, MIN_STATUS, Severity
from internal.usecase.classify_outcome import OutcomeClassifier
from pkg.logger.logger import get_logger


logger = get_logger(__name__)


T = TypeVar("T")

DEFAULT_FALLBACK_STATUS = 500


class LogSink(Protocol):
    """Protocol for structured request log emission."""

    def emit(self, record: HttpRequestLog, severity: Severity) -> None:
        """Emit a finalized record at the given severity."""
        ...


class MetricsSink(Protocol):
    """Protocol for request latency observations."""

    def observe(self, status: int, elapsed: float) -> None:
        """Record one latency observation labeled by status."""
        ...


def error_status_code(error: BaseException) -> Optional[int]:
    """
    Get the status code an exception carries, if any.
    
    Args:
        error: Exception raised by a downstream handler.
        
    Returns:
        The integer ``status_code`` attribute when it is a valid HTTP
        status, otherwise None.
    """
    status = getattr(error, "status_code", None)
    if isinstance(status, int) and not isinstance(status, bool) and MIN_STATUS <= status <= MAX_STATUS:
        return status
    return None


class RequestObserver:
    """
    Request observability pipeline.
    
    Per request: time the handler, derive a status, classify it, record
    one metrics observation and at most one log line, then give back
    exactly what the handler produced.
    """
    
    def __init__(
        self,
        log_sink: LogSink,
        metrics_sink: MetricsSink,
        classifier: OutcomeClassifier,
        fallback_status: int = DEFAULT_FALLBACK_STATUS,
        respect_error_status: bool = False,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        """
        Initialize the observer.
        
        Args:
            log_sink: Destination for structured request logs.
            metrics_sink: Destination for latency observations.
            classifier: Severity and sampling decision.
            fallback_status: Status observed when the handler raises.
            respect_error_status: Prefer a raised exception's own
                ``status_code`` over the fallback.
            clock: Time source for handler latency.
        """
        self._log_sink = log_sink
        self._metrics_sink = metrics_sink
        self._classifier = classifier
        self._fallback_status = fallback_status
        self._respect_error_status = respect_error_status
        self._clock = clock
    
    @property
    def classifier(self) -> OutcomeClassifier:
        """Get the outcome classifier."""
        return self._classifier
    
    def status_for_error(self, error: Exception) -> int:
        """
        Get the status observed for a failed handler.
        
        Args:
            error: Exception raised by the handler.
            
        Returns:
            Status code to log and label metrics with.
        """
        if self._respect_error_status:
            status = error_status_code(error)
            if status is not None:
                return status
        return self._fallback_status
    
    async def observe(
        self,
        record: HttpRequestLog,
        call: Callable[[], Awaitable[T]],
        status_of: Callable[[T], int],
    ) -> T:
        """
        Run the handler call and record its outcome.
        
        Args:
            record: Record extracted from the request before the call.
            call: Zero-argument coroutine function invoking the handler.
            status_of: Reads the status code of a handler result.
            
        Returns:
            The handler result, unchanged.
            
        Raises:
            Exception: Whatever the handler raised, re-raised unchanged.
        """
        start = self._clock()
        try:
            result = await call()
        except Exception as e:
            elapsed = self._clock() - start
            self._complete(record, self.status_for_error(e), elapsed)
            raise
        elapsed = self._clock() - start
        
        self._complete(record, status_of(result), elapsed)
        return result
    
    def wrap(
        self,
        handler: Callable[[Any], Awaitable[T]],
        extract: Callable[[Any], HttpRequestLog],
        status_of: Callable[[T], int],
    ) -> Callable[[Any], Awaitable[T]]:
        """
        Wrap a handler into an observed handler of the same shape.
        
        Args:
            handler: Coroutine function taking a request.
            extract: Builds the request record from the request.
            status_of: Reads the status code of a handler result.
            
        Returns:
            Coroutine function taking the same request and producing
            the same result or exception as ``handler``.
        """
        @wraps(handler)
        async def observed(request: Any) -> T:
            record = extract(request)
            return await self.observe(record, lambda: handler(request), status_of)
        
        return observed
    
    def _complete(self, record: HttpRequestLog, status: int, elapsed: float) -> None:
        """Finalize the record and hand it to both sinks."""
        self._metrics_sink.observe(status, elapsed)
        
        try:
            record.finalize(status, elapsed)
        except ObservabilityError as e:
            logger.warning(
                "Request log not emitted",
                method=record.method,
                path=record.path,
                error=str(e),
            )
            return
        
        severity = self._classifier.decide(record.status)
        if severity is not None:
            self._log_sink.emit(record, severity)
