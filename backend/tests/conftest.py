"""
Pytest configuration and fixtures for backend tests.

API tests run the real application against an in-memory SQLite database
(aiosqlite + StaticPool) with the Kafka publisher and search mirror
replaced by recording fakes.
"""

import os

# Must be set before the application settings are imported
os.environ["KAFKA_ENABLED"] = "false"
os.environ["ELASTICSEARCH_ENABLED"] = "false"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["SERVICE_NAME"] = "all"
os.environ["APP_ENV"] = "test"

import json

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from fms.api.deps import get_db, get_side_effects
from fms.core.security import create_access_token
from fms.db.models import Base
from fms.main import app
from fms.services.crud import SideEffects

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class RecordingPublisher:
    """Stands in for EventPublisher; keeps every published event."""

    enabled = True

    def __init__(self):
        self.events: list[tuple[str, dict]] = []

    async def publish(self, topic: str, payload: str) -> bool:
        self.events.append((topic, json.loads(payload)))
        return True

    def topics(self) -> list[str]:
        return [topic for topic, _ in self.events]


class RecordingSearchMirror:
    """Stands in for SearchMirror; matches queries by case-insensitive substring."""

    enabled = True

    def __init__(self):
        self.documents: dict[int, dict] = {}
        self.deleted: list[int] = []

    async def index(self, record_id: int, document: dict) -> bool:
        self.documents[record_id] = document
        return True

    async def delete(self, record_id: int) -> bool:
        self.deleted.append(record_id)
        return self.documents.pop(record_id, None) is not None

    async def query(self, text: str) -> list[dict]:
        needle = text.lower()
        return [
            doc for doc in self.documents.values()
            if any(needle in str(value).lower() for value in doc.values())
        ]


def auth_headers(login: str) -> dict[str, str]:
    """Bearer headers for a principal with the given login."""
    token = create_access_token({"sub": login})
    return {"Authorization": f"Bearer {token}"}


async def _create_all(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def search_mirror():
    return RecordingSearchMirror()


@pytest.fixture
def client(publisher, search_mirror):
    """
    Test client with a fresh database per test.

    Tables are created on the client's own event loop so the aiosqlite
    connection is only ever used from that loop.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_side_effects] = lambda: SideEffects(
        publisher=publisher,
        search=search_mirror,
    )

    with TestClient(app) as test_client:
        test_client.portal.call(_create_all, engine)
        yield test_client
        test_client.portal.call(engine.dispose)

    app.dependency_overrides.clear()


@pytest.fixture
def alice():
    return auth_headers("alice")


@pytest.fixture
def bob():
    return auth_headers("bob")


@pytest.fixture
def headers_for():
    """Factory fixture: ``headers_for("carol")`` builds bearer headers for any login."""
    return auth_headers
