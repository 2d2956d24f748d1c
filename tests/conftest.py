from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from server.app import create_app
from server.repository import InMemoryRandomResultRepository


class UnreachableRepository(InMemoryRandomResultRepository):
    """Behaves like a database that cannot be reached."""

    async def create_random_result(self, value):
        raise ConnectionError("database unreachable")

    async def list_recent(self, limit):
        raise ConnectionError("database unreachable")


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, database_backend="memory")


@pytest.fixture
def repository() -> InMemoryRandomResultRepository:
    return InMemoryRandomResultRepository()


@pytest.fixture
def client(settings, repository):
    with TestClient(create_app(settings, repository)) as test_client:
        yield test_client


@pytest.fixture
def unreachable_client(settings):
    with TestClient(create_app(settings, UnreachableRepository())) as test_client:
        yield test_client
