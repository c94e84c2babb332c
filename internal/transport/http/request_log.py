"""
Request logging middleware for HTTP requests.

Logs every request as a structured record and observes its latency in
a Prometheus histogram labeled by status code.
"""
from typing import Optional

from prometheus_client import Histogram
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from config.settings import Settings
from internal.infrastructure.log_sink import StructuredLogSink
from internal.infrastructure.metrics import RESPONSE_STATUS, PrometheusLatencySink
from internal.transport.http.extractor import extract_request_log
from internal.usecase.classify_outcome import OutcomeClassifier
from internal.usecase.observe_request import RequestObserver
from pkg.logger.logger import get_logger
from pkg.resilience.sampler import IntervalSampler, get_sampler


logger = get_logger(__name__)


ERROR_LOG_SAMPLER = "http.request.error"


def _response_status(response: Response) -> int:
    return response.status_code


def build_request_observer(
    sample_interval: Optional[float] = None,
    error_threshold: Optional[int] = None,
    fallback_status: Optional[int] = None,
    respect_error_status: Optional[bool] = None,
    histogram: Optional[Histogram] = None,
    log_sink: Optional[StructuredLogSink] = None,
    sampler: Optional[IntervalSampler] = None,
) -> RequestObserver:
    """
    Build the request observer with the standard sinks.
    
    Unset arguments are read from Settings at call time.
    
    Args:
        sample_interval: Error-log sample window in seconds.
        error_threshold: Lowest status logged as an error.
        fallback_status: Status observed when the handler raises.
        respect_error_status: Prefer a raised exception's own status code.
        histogram: Latency histogram; defaults to the process histogram.
        log_sink: Log sink; defaults to the structured request logger.
        sampler: Error-log sampler; defaults to the process-wide one.
        
    Returns:
        Configured RequestObserver.
    """
    if sample_interval is None:
        sample_interval = Settings.ERROR_LOG_SAMPLE_INTERVAL
    if error_threshold is None:
        error_threshold = Settings.ERROR_STATUS_THRESHOLD
    if fallback_status is None:
        fallback_status = Settings.FALLBACK_STATUS_CODE
    if respect_error_status is None:
        respect_error_status = Settings.RESPECT_ERROR_STATUS
    
    if sampler is None:
        sampler = get_sampler(ERROR_LOG_SAMPLER, sample_interval)
    
    return RequestObserver(
        log_sink=log_sink or StructuredLogSink(),
        metrics_sink=PrometheusLatencySink(histogram or RESPONSE_STATUS),
        classifier=OutcomeClassifier(sampler, error_threshold=error_threshold),
        fallback_status=fallback_status,
        respect_error_status=respect_error_status,
    )


class RequestLogMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log and time every HTTP request.
    
    Passes the request and the downstream response or exception through
    unchanged. Error responses (5xx) are logged at ERROR at most once per
    sample interval; everything else is logged at DEBUG.
    """
    
    def __init__(self, app: ASGIApp, observer: Optional[RequestObserver] = None) -> None:
        """
        Initialize the middleware.
        
        Args:
            app: Downstream ASGI application.
            observer: Observation pipeline; defaults to one built from settings.
        """
        super().__init__(app)
        self._observer = observer or build_request_observer()
        logger.info("Request log middleware installed")
    
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """
        Process request and record its outcome.
        
        Args:
            request: Incoming HTTP request.
            call_next: Next middleware/handler in chain.
            
        Returns:
            HTTP response from the handler.
        """
        record = extract_request_log(request)
        return await self._observer.observe(
            record,
            lambda: call_next(request),
            _response_status,
        )
