"""Tests for health endpoints and cross-cutting middleware."""

from httpx import AsyncClient

from colletro.infrastructure.persistence import database


async def test_health_returns_200(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_ready_without_database_returns_503(client: AsyncClient, monkeypatch) -> None:
    monkeypatch.setattr(database, "_ensure_engine", lambda: None)
    monkeypatch.setattr(database, "engine", None)
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json() == {"status": "not_ready", "message": "Database not configured"}


async def test_request_id_is_generated_and_returned(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.headers.get("X-Request-ID")


async def test_valid_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123_DEF"})
    assert response.headers["X-Request-ID"] == "abc-123_DEF"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id;DROP"}
    )
    assert response.headers["X-Request-ID"] != "bad id;DROP"
