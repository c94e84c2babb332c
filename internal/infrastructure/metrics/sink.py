"""
Prometheus latency sink.

Records one histogram observation per request.
"""
from prometheus_client import Histogram

from pkg.logger.logger import get_logger


logger = get_logger(__name__)


class PrometheusLatencySink:
    """
    Metrics sink backed by a Prometheus histogram.
    
    Observation failures are logged and dropped so they never fail the
    request being observed.
    """
    
    def __init__(self, histogram: Histogram) -> None:
        """
        Initialize the sink.
        
        Args:
            histogram: Latency histogram with a ``status`` label.
        """
        self._histogram = histogram
    
    def observe(self, status: int, elapsed: float) -> None:
        """
        Record a latency observation.
        
        Args:
            status: Outcome status code, used as the label value.
            elapsed: Latency in seconds.
        """
        try:
            self._histogram.labels(status=str(status)).observe(elapsed)
        except Exception as e:
            logger.warning(
                "Failed to record request latency",
                status=status,
                error=str(e),
            )
