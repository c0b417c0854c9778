"""User Routes — listing without passwords and the authenticated current user.

Tests:
    - GET /api/users never exposes password
    - GET /api/users/current: missing header, malformed/expired/foreign tokens, valid token
    - A token for a user that no longer exists is rejected
"""

from datetime import datetime, timedelta, timezone

import pytest

from store_api.infrastructure.security import issue_token

ADA = {"name": "Ada", "email": "ada@example.com", "password": "s3cret-pass"}


@pytest.fixture
async def ada_token(client) -> str:
    await client.post("/api/auth/register", json=ADA)
    res = await client.post(
        "/api/auth/login",
        json={"email": ADA["email"], "password": ADA["password"]},
    )
    return res.json()["accessToken"]


async def test_list_users_hides_passwords(client):
    await client.post("/api/auth/register", json=ADA)

    res = await client.get("/api/users")

    assert res.status_code == 200
    [user] = res.json()
    assert set(user) == {"id", "name", "email"}


async def test_current_user_without_header_returns_401(client):
    res = await client.get("/api/users/current")
    assert res.status_code == 401
    assert res.json() == {"message": "Access token not found."}


async def test_current_user_with_malformed_token_returns_401(client):
    res = await client.get(
        "/api/users/current", headers={"Authorization": "not-a-jwt"},
    )
    assert res.status_code == 401
    assert res.json() == {"message": "Access token is invalid or has expired."}


async def test_current_user_with_expired_token_returns_401(client, secret):
    issued = datetime.now(timezone.utc) - timedelta(hours=2)
    token = issue_token(1, secret, now=issued)

    res = await client.get(
        "/api/users/current", headers={"Authorization": token},
    )

    assert res.status_code == 401
    assert res.json() == {"message": "Access token is invalid or has expired."}


async def test_current_user_with_foreign_signature_returns_401(client):
    token = issue_token(1, "someone-elses-secret")

    res = await client.get(
        "/api/users/current", headers={"Authorization": token},
    )

    assert res.status_code == 401
    assert res.json() == {"message": "Access token is invalid or has expired."}


async def test_current_user_with_raw_token(client, ada_token):
    res = await client.get(
        "/api/users/current", headers={"Authorization": ada_token},
    )

    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Ada"
    assert body["email"] == ADA["email"]
    assert "password" not in body


async def test_current_user_accepts_bearer_scheme(client, ada_token):
    res = await client.get(
        "/api/users/current", headers={"Authorization": f"Bearer {ada_token}"},
    )
    assert res.status_code == 200
    assert res.json()["email"] == ADA["email"]


async def test_current_user_for_unknown_user_returns_401(client, secret):
    token = issue_token(999, secret)

    res = await client.get(
        "/api/users/current", headers={"Authorization": token},
    )

    assert res.status_code == 401
    assert res.json() == {"message": "Access token is invalid or has expired."}
