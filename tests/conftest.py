import os
from collections.abc import AsyncGenerator

# Settings are read at import time, so these must be set before importing the app
os.environ.setdefault("DB_TYPE", "sqlite")
os.environ.setdefault("DB_NAME", ":memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from school_api.database import Database
from school_api.main import create_app

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory database with all tables created."""
    database = Database(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await database.auto_migrate()
    yield database
    await database.dispose()


@pytest.fixture
async def test_db(database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session() as session:
        yield session


@pytest.fixture
async def client(database) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as test_client:
        yield test_client


@pytest.fixture
def teacher_payload() -> dict:
    return {"FirstName": "Ann", "LastName": "Lee", "Age": 30, "Subject": "Math"}


@pytest.fixture
def user_payload() -> dict:
    return {
        "Email": "ann.lee@example.com",
        "Password": "s3cret-pass",
        "FirstName": "Ann",
        "LastName": "Lee",
    }
