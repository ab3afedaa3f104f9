"""
SimpleForm Backend: Application Tests
======================================

What we test:
    ✅ GET / describes the API
    ✅ /health reports database status (200 / 503)
    ✅ request IDs are generated, honoured and echoed in error bodies
    ✅ missing store is a 500, not a crash
    ✅ lifespan opens a database from settings and serves requests
    ✅ settings validation
"""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from simpleform.config import Settings
from simpleform.database import Database
from simpleform.main import create_app


class TestIndex:

    @pytest.mark.asyncio
    async def test_index_lists_endpoints(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Simple Form CRUD API"
        assert set(body["endpoints"]) == {
            "POST /responses",
            "GET /responses",
            "GET /responses/:id",
            "PUT /responses/:id",
            "DELETE /responses/:id",
        }


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["database"] == "connected"

    @pytest.mark.asyncio
    async def test_database_down(self, test_client, database, monkeypatch):
        monkeypatch.setattr(database, "ping", AsyncMock(side_effect=OSError("refused")))

        response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated(self, test_client):
        response = await test_client.get("/")
        assert response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_client_supplied_id_echoed(self, test_client):
        response = await test_client.get("/responses/missing", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"
        assert response.json()["request_id"] == "abc123"


class TestWiring:

    @pytest.mark.asyncio
    async def test_missing_store_is_server_error(self):
        app = create_app(store=None)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/responses")

        assert response.status_code == 500
        assert response.json()["error"] == "Response store is not initialised"

    def test_lifespan_opens_database(self, tmp_path):
        settings = Settings(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'simpleform.db'}",
            log_level="WARNING",
        )
        app = create_app(settings=settings)

        with TestClient(app) as client:
            created = client.post(
                "/responses", json={"name": "Ann", "email": "a@x.com", "feedback": "Great"}
            )
            assert created.status_code == 200
            listing = client.get("/responses")
            assert [r["id"] for r in listing.json()["data"]] == [created.json()["data"]["id"]]

        assert app.state.store is None


class TestSettings:

    def test_log_level_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            Settings(log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    @pytest.mark.asyncio
    async def test_sqlite_engine_skips_pool_options(self):
        database = Database.from_settings(Settings(database_url="sqlite+aiosqlite:///:memory:"))
        try:
            await database.ping()
        finally:
            await database.dispose()
