"""
Unit tests for service endpoints.
"""
import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from config.settings import Settings
from internal.transport.http.v1.handlers import router


@pytest.fixture
def app():
    app = FastAPI()
    app.include_router(router)
    return app


class TestServiceEndpoints:
    """Tests for health and metrics endpoints."""
    
    @pytest.mark.asyncio
    async def test_health(self, app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/health")
        
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": Settings.APP_NAME}
    
    @pytest.mark.asyncio
    async def test_metrics_exposes_response_histogram(self, app):
        """Test that the process histogram is scraped."""
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/metrics")
        
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "http_response_status_seconds" in response.text
