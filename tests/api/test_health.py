"""Health Probes — liveness always up, readiness follows the database."""

import store_api.infrastructure.database as db_module


async def test_liveness_returns_200(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database_returns_200(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database_returns_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)

    res = await client.get("/api/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"

