from sqlalchemy import select

from app.core.security import create_access_token
from app.db.models import User as UserModel

from helpers import PASSWORD, login


async def test_root_redirects_anonymous_to_login(client):
    res = await client.get("/")
    assert res.status_code == 302
    assert res.headers["location"] == "/login"


async def test_login_and_logout(client, alice):
    res = await login(client, "alice@example.com")
    assert res.headers["location"] == "/documents"

    assert (await client.get("/documents")).status_code == 200
    assert (await client.get("/")).headers["location"] == "/documents"

    res = await client.get("/logout")
    assert res.status_code == 302
    assert res.headers["location"] == "/"

    res = await client.get("/documents")
    assert res.status_code == 302
    assert res.headers["location"] == "/login"


async def test_login_with_wrong_password(client, alice):
    res = await client.post("/login", data={"email": "alice@example.com", "password": "Wrong1234"})
    assert res.status_code == 401
    assert "Incorrect email or password" in res.text


async def test_bearer_token_authenticates(client, alice):
    token = create_access_token({"sub": str(alice.id)})
    res = await client.get("/documents", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 200


async def test_invalid_bearer_token_redirects_to_login(client, alice):
    res = await client.get("/documents", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 302
    assert res.headers["location"] == "/login"


async def test_register_creates_user(client, test_db):
    res = await client.post(
        "/register",
        data={"email": "carol@example.com", "username": "carol", "password": PASSWORD},
    )
    assert res.status_code == 302
    assert res.headers["location"] == "/login"

    result = await test_db.execute(select(UserModel).where(UserModel.email == "carol@example.com"))
    user = result.scalar_one()
    assert user.username == "carol"
    assert user.workplace_id is None

    await login(client, "carol@example.com")


async def test_register_duplicate_email(client, alice):
    res = await client.post(
        "/register",
        data={"email": "alice@example.com", "username": "alice2", "password": PASSWORD},
    )
    assert res.status_code == 400
    assert "Email already registered" in res.text


async def test_register_weak_password(client):
    res = await client.post(
        "/register",
        data={"email": "dave@example.com", "username": "dave", "password": "short"},
    )
    assert res.status_code == 400


async def test_health(client):
    res = await client.get("/health")
    assert res.json() == {"status": "ok"}
