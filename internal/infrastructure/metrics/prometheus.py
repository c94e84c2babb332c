"""
Prometheus Metrics for request observability.

Defines the response latency histogram keyed by status code.
"""

from prometheus_client import CollectorRegistry, Histogram, REGISTRY

RESPONSE_STATUS_NAME = 'http_response_status_seconds'

RESPONSE_STATUS_BUCKETS = [0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]


def build_response_status_histogram(
    registry: CollectorRegistry = REGISTRY,
    namespace: str = '',
) -> Histogram:
    """
    Build the response latency histogram.
    
    Args:
        registry: Registry the histogram is registered in.
        namespace: Optional metric name prefix.
        
    Returns:
        Histogram with a single ``status`` label.
    """
    return Histogram(
        RESPONSE_STATUS_NAME,
        'HTTP response latency by status code',
        ['status'],
        namespace=namespace,
        registry=registry,
        buckets=RESPONSE_STATUS_BUCKETS,
    )


# Process-wide histogram in the default registry
RESPONSE_STATUS = build_response_status_histogram()
