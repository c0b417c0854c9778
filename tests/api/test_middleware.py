"""HTTP Middleware — request ids, CORS on failures and trailing slashes.

Tests:
    - X-Request-ID echoed when sent, generated when absent
    - Unexpected 500s still carry X-Request-ID and CORS headers
    - Error log lines carry the request id
    - Collection and item paths answer with or without a trailing slash
"""

import logging

from store_api.services.handle_categories import CategoryHandlers

ALLOWED_ORIGIN = "http://localhost:5173"


async def test_request_id_is_echoed(client):
    res = await client.get("/api/health", headers={"X-Request-ID": "req-123"})
    assert res.headers["X-Request-ID"] == "req-123"


async def test_request_id_generated_when_absent(client):
    res = await client.get("/api/health")
    assert len(res.headers["X-Request-ID"]) == 32


async def test_unexpected_error_keeps_request_id_and_cors_headers(
    client, monkeypatch,
):
    async def _boom(self):
        raise RuntimeError("boom")

    monkeypatch.setattr(CategoryHandlers, "list_categories", _boom)

    res = await client.get(
        "/api/categories",
        headers={"X-Request-ID": "req-500", "Origin": ALLOWED_ORIGIN},
    )

    assert res.status_code == 500
    assert res.json() == {"message": "boom"}
    assert res.headers["X-Request-ID"] == "req-500"
    assert res.headers["access-control-allow-origin"] == ALLOWED_ORIGIN


async def test_domain_error_log_carries_request_id(client, caplog):
    caplog.set_level(logging.WARNING, logger="store_api.api.error_handlers")

    res = await client.get(
        "/api/categories/999", headers={"X-Request-ID": "req-404"},
    )

    assert res.status_code == 404
    [record] = [
        r for r in caplog.records if r.name == "store_api.api.error_handlers"
    ]
    assert record.request_id == "req-404"
    assert record.status_code == 404


async def test_unexpected_error_log_carries_request_id(
    client, caplog, monkeypatch,
):
    async def _boom(self):
        raise RuntimeError("boom")

    monkeypatch.setattr(CategoryHandlers, "list_categories", _boom)
    caplog.set_level(logging.ERROR, logger="store_api.api.error_handlers")

    await client.get("/api/categories", headers={"X-Request-ID": "req-err"})

    records = [
        r for r in caplog.records if r.name == "store_api.api.error_handlers"
    ]
    assert records
    assert all(r.request_id == "req-err" for r in records)
    assert any(r.exc_info for r in records)


async def test_collection_path_with_trailing_slash(client, category):
    res = await client.get("/api/categories/")

    assert res.status_code == 200
    assert [c["name"] for c in res.json()] == ["Books"]


async def test_item_path_with_trailing_slash(client, category):
    res = await client.get(f"/api/categories/{category.id}/")

    assert res.status_code == 200
    assert res.json()["id"] == category.id


async def test_create_with_trailing_slash_is_not_redirected(client):
    res = await client.post("/api/categories/", json={"name": "Games"})

    assert res.status_code == 201
    assert res.json()["name"] == "Games"
