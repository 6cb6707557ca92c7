"""Fixtures for integration tests.

Each test gets its own SQLite database file (via aiosqlite) with the full
schema created, and its own in-process fake Redis server.
"""

import pytest_asyncio
from fakeredis import aioredis as fake_aioredis

from tasker.infrastructure.persistence.database import Database


@pytest_asyncio.fixture
async def database(tmp_path):
    """Provide a fresh database with all tables created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'tasker.db'}")
    await db.create_all()

    yield db

    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture
async def redis_client():
    """Provide an isolated fake Redis client (decoded responses)."""
    client = fake_aioredis.FakeRedis(decode_responses=True)

    yield client

    await client.flushall()
    await client.aclose()
