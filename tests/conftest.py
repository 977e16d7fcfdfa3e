"""Общие фикстуры: тестовая БД SQLite, HTTP клиент, пользователи."""
import os

# Настройки должны быть заданы до импорта приложения
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("WORKPLACE_APP_SECRET", "test-app-secret")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.db import get_db, get_session_factory
from app.core.security import get_password_hash
from app.db.base import Base
from app.db.models import Community as CommunityModel, User as UserModel
from app.main import app

from helpers import PASSWORD

PASSWORD_HASH = get_password_hash(PASSWORD)


@pytest.fixture
async def test_engine(tmp_path):
    # Файловая БД: параллельным чтениям нужны отдельные соединения
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: test_session_factory

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


async def _create_user(session, email, username, workplace_id=None):
    user = UserModel(
        email=email,
        username=username,
        password_hash=PASSWORD_HASH,
        workplace_id=workplace_id,
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest.fixture
async def alice(test_db):
    return await _create_user(test_db, "alice@example.com", "alice")


@pytest.fixture
async def bob(test_db):
    return await _create_user(test_db, "bob@example.com", "bob")


@pytest.fixture
async def community(test_db):
    community = CommunityModel(id="10", name="Acme")
    test_db.add(community)
    await test_db.commit()
    return community
