"""Fixtures for API tests against in-memory persistence."""

import pytest_asyncio
from dishka.integrations.fastapi import FastapiProvider
from httpx import ASGITransport, AsyncClient

from forum.interface.api.app import create_app
from forum.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_user
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    container = build_test_container(None, FastapiProvider())
    yield container
    await container.close()


@pytest_asyncio.fixture
async def database(container):
    """In-memory tables shared by every request, seeded with two users."""
    database = await container.get(InMemoryDatabase)
    for user in (make_user("user-123", "dicoding"), make_user("user-456", "johndoe")):
        database.users[user.id] = user
    return database


@pytest_asyncio.fixture
async def client(container, database):
    app = create_app(container=container)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
