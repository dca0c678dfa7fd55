"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health endpoint
responds as expected, and the security middleware is wired in.
"""

from unittest.mock import patch

from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import create_app, run

HEALTH = "/api/v1/health"


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get(HEALTH)
        assert response.status_code == 200

    def test_health_response_body(self, client) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get(HEALTH).json()
        assert body["status"] == "ok"
        assert body["version"] == client.app.version


class TestSecurityMiddleware:
    """Tests for security headers and rate limiting."""

    def test_security_headers_present(self, client) -> None:
        response = client.get(HEALTH)
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Content-Security-Policy" in response.headers

    def test_rate_limit_returns_429(self, make_settings) -> None:
        app = create_app(make_settings(rate_limit_default="2/minute"))
        with TestClient(app) as client:
            statuses = [client.get(HEALTH).status_code for _ in range(3)]
        assert statuses == [200, 200, 429]


class TestServerEntryPoint:
    """Tests for the console script that starts uvicorn."""

    def test_run_serves_app_module(self) -> None:
        with patch("app.main.uvicorn.run") as mock_run:
            run()
        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args == ("app.main:app",)
        assert kwargs["port"] == settings.port
        assert kwargs["host"] == settings.host
