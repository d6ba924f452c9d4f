"""
Security Headers Middleware Unit Tests
"""

from unittest.mock import MagicMock, patch

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from keyword_board.middleware.security_headers import SECURITY_HEADERS, SecurityHeadersMiddleware


def _client(enabled: bool = True) -> TestClient:
    app = FastAPI()

    @app.get("/test")
    async def test_endpoint():
        return {"message": "success"}

    @app.get("/framed")
    async def framed_endpoint():
        return JSONResponse({"message": "ok"}, headers={"X-Frame-Options": "DENY"})

    settings = MagicMock()
    settings.SECURITY_HEADERS_ENABLED = enabled
    with patch("keyword_board.middleware.security_headers.get_settings", return_value=settings):
        app.add_middleware(SecurityHeadersMiddleware)
        client = TestClient(app)
        client.get("/test")
    return client


def test_headers_added():
    response = _client().get("/test")

    assert response.status_code == 200
    for name, value in SECURITY_HEADERS.items():
        assert response.headers[name] == value
    assert "script-src 'self'" in response.headers["Content-Security-Policy"]


def test_route_headers_take_precedence():
    response = _client().get("/framed")

    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_disabled():
    response = _client(enabled=False).get("/test")

    assert "X-Content-Type-Options" not in response.headers
