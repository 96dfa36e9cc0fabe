"""API tests for non-versioned system routes and cross-cutting behaviour.

Validates root and health endpoints, trace ID propagation and RFC 9457
error bodies for unknown routes.
"""

from fastapi.testclient import TestClient

from src.core.config import get_settings
from src.main import app

client = TestClient(app)


def test_root_endpoint_returns_status_and_version() -> None:
    """Root endpoint should return operational status and app version."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()

    assert data["message"] == get_settings().app_name
    assert data["status"] == "operational"
    assert data["version"] == get_settings().app_version


def test_health_endpoint_returns_healthy_status() -> None:
    """Health endpoint should return a healthy status indicator."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_trace_id_is_echoed() -> None:
    """Incoming X-Trace-Id is returned unchanged."""
    response = client.get("/health", headers={"X-Trace-Id": "trace-123"})

    assert response.headers["X-Trace-Id"] == "trace-123"


def test_trace_id_generated_when_absent() -> None:
    response = client.get("/health")

    assert response.headers["X-Trace-Id"]


def test_unknown_route_returns_problem_details() -> None:
    """404s use the RFC 9457 body with the request trace ID."""
    response = client.get("/does-not-exist", headers={"X-Trace-Id": "trace-404"})

    assert response.status_code == 404
    body = response.json()
    assert body["status"] == 404
    assert body["title"] == "Resource Not Found"
    assert body["instance"] == "/does-not-exist"
    assert body["trace_id"] == "trace-404"
    assert body["type"].endswith("/errors/not-found")
