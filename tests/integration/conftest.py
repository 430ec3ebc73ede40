"""Fixtures for tests that run against a real PostgreSQL database.

Settings are loaded from environment variables, so point DATABASE__URL at a
throwaway database: every test drops and recreates all tables.
"""

import pytest
import pytest_asyncio
from sqlalchemy.exc import SQLAlchemyError

from social.config import Settings
from social.persistence.database import create_engine
from social.persistence.tables import metadata


@pytest_asyncio.fixture(autouse=True)
async def fresh_schema():
    """Start each test from empty tables, skipping when postgres is down."""
    engine = create_engine(Settings())
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.drop_all)
            await conn.run_sync(metadata.create_all)
    except (OSError, SQLAlchemyError) as e:
        await engine.dispose()
        pytest.skip(f"PostgreSQL unavailable: {e}")

    yield
    await engine.dispose()
