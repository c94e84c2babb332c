"""
FastAPI Application Entry Point.

HTTP server with request logging and latency metrics.
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from fastapi import FastAPI

from config.settings import Settings
from internal.infrastructure.metrics import build_response_status_histogram, RESPONSE_STATUS
from internal.transport.http.middleware import RequestLogMiddleware, build_request_observer
from internal.transport.http.v1.handlers import router
from pkg.logger.logger import setup_logging, get_logger


Settings.validate()

# Setup logging
log_listener = setup_logging(
    level=Settings.LOG_LEVEL,
    json_format=Settings.json_logs(),
    queued=Settings.LOG_QUEUED,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    
    Runs the background log writer for the lifetime of the app.
    """
    if log_listener is not None:
        log_listener.start()
    
    logger.info(
        "Starting request log service",
        sample_interval=Settings.ERROR_LOG_SAMPLE_INTERVAL,
        error_threshold=Settings.ERROR_STATUS_THRESHOLD,
    )
    
    yield
    
    logger.info("Request log service shutdown complete")
    
    if log_listener is not None:
        log_listener.stop()


def create_app() -> FastAPI:
    """
    Create the FastAPI application.
    
    Returns:
        App with request logging installed.
    """
    app = FastAPI(
        title="Request Log Service",
        description="HTTP service with request logging and latency metrics",
        version="1.0.0",
        lifespan=lifespan,
    )
    
    histogram = RESPONSE_STATUS
    if Settings.METRICS_NAMESPACE:
        histogram = build_response_status_histogram(namespace=Settings.METRICS_NAMESPACE)
    
    app.add_middleware(
        RequestLogMiddleware,
        observer=build_request_observer(histogram=histogram),
    )
    
    app.include_router(router)
    
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=Settings.HOST,
        port=Settings.PORT,
    )
