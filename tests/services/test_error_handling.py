"""Response writing and the process-level catch-all.

Tests cover:
    - Unhandled exceptions -> 500 {"error": "Internal server error"}
    - Responses are pretty-printed JSON with unescaped non-ASCII
    - Health and readiness probes
    - Session-level driver errors -> StorageError
"""

import json

import pytest
from sqlalchemy import text

from reviews_api.api.response_writer import write_response
from reviews_api.core.errors import StorageError
from reviews_api.infrastructure.database import DatabaseSessionManager


async def test_unhandled_exception_becomes_generic_500(
    client, auth_headers, monkeypatch,
):
    def _explode(path):
        raise RuntimeError("segfault-ish detail")

    monkeypatch.setattr("reviews_api.api.routes.reviews.parse_route", _explode)
    res = await client.get("/api/reviews", headers=auth_headers)
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
    assert "segfault" not in res.text


async def test_error_bodies_are_pretty_printed(client):
    res = await client.get("/api/reviews")
    assert res.headers["content-type"].startswith("application/json")
    assert res.text == json.dumps({"error": "API key is required"}, indent=4)


def test_write_response_keeps_non_ascii():
    response = write_response(200, {"user_name": "Zoë"})
    assert response.status_code == 200
    assert response.body == '{\n    "user_name": "Zoë"\n}'.encode("utf-8")


async def test_health_is_public(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_reports_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_session_maps_driver_error_to_storage_error(
    test_engine, test_session_factory,
):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory

    with pytest.raises(StorageError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM missing_table"))
    assert exc_info.value.operation == "session"
    assert exc_info.value.to_response() == {"error": "Internal server error"}


async def test_session_reraises_non_driver_errors(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory

    with pytest.raises(RuntimeError):
        async with manager.session():
            raise RuntimeError("boom")
