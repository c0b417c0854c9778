"""Auth Routes — registration and login contract.

Tests:
    - Register: 201, missing fields 422, duplicate email 409, password stored hashed
    - Login: token for the right user; wrong password and unknown email share one 401 text
"""

from sqlalchemy import select

from store_api.infrastructure.security import verify_password, verify_token
from store_api.models.user import User

ADA = {"name": "Ada", "email": "ada@example.com", "password": "s3cret-pass"}


async def test_register_returns_201(client):
    res = await client.post("/api/auth/register", json=ADA)
    assert res.status_code == 201
    assert res.json() == {"message": "User registered successfully."}


async def test_register_stores_bcrypt_hash(client, test_db):
    await client.post("/api/auth/register", json=ADA)

    stored = await test_db.scalar(
        select(User.password).where(User.email == ADA["email"]),
    )
    assert stored != ADA["password"]
    assert stored.startswith("$2b$10$")
    assert verify_password(ADA["password"], stored)


async def test_register_lists_missing_fields(client):
    res = await client.post("/api/auth/register", json={"name": "Ada"})
    assert res.status_code == 422
    assert res.json() == {"message": "Missing fields: email, password"}


async def test_register_twice_returns_409(client):
    await client.post("/api/auth/register", json=ADA)

    res = await client.post("/api/auth/register", json=ADA)

    assert res.status_code == 409
    assert res.json() == {"message": "Email already exists."}


async def test_login_returns_identity_and_token(client, secret):
    await client.post("/api/auth/register", json=ADA)

    res = await client.post(
        "/api/auth/login",
        json={"email": ADA["email"], "password": ADA["password"]},
    )

    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"id", "name", "email", "accessToken"}
    assert body["name"] == "Ada"
    assert verify_token(body["accessToken"], secret) == body["id"]


async def test_login_wrong_password_and_unknown_email_look_the_same(client):
    await client.post("/api/auth/register", json=ADA)

    wrong_password = await client.post(
        "/api/auth/login",
        json={"email": ADA["email"], "password": "not-it"},
    )
    unknown_email = await client.post(
        "/api/auth/login",
        json={"email": "nobody@example.com", "password": "whatever"},
    )

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {
        "message": "Email or password is invalid.",
    }


async def test_login_missing_password_returns_422(client):
    res = await client.post("/api/auth/login", json={"email": ADA["email"]})
    assert res.status_code == 422
    assert res.json() == {"message": "Missing field: password"}
