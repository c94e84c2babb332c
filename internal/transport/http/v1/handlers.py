"""
HTTP handlers for the request log service.

Health and Prometheus scrape endpoints.
"""
from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from config.settings import Settings
from internal.transport.http.dto import HealthResponse


router = APIRouter(tags=["service"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns:
        Health status.
    """
    return HealthResponse(service=Settings.APP_NAME)


@router.get("/metrics")
async def metrics() -> Response:
    """
    Prometheus metrics endpoint.

    Returns:
        Prometheus metrics in text format.
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )
