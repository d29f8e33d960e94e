"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- PostgreSQL connection pool (skips when the database is unreachable)
- In-memory repository
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from kitchensink.adapters.repository.memory import InMemoryMemberRepository
from kitchensink.adapters.repository.postgres import run_migrations
from kitchensink.config.settings import get_settings


@pytest.fixture
def memory_repository() -> InMemoryMemberRepository:
    """Fresh in-memory repository for each test."""
    return InMemoryMemberRepository()


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """
    Create connection pool for database-backed tests.

    Runs migrations once per session. Skips dependent tests when
    PostgreSQL is not reachable at DATABASE_URL.
    """
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    try:
        pool.wait(timeout=5)
    except PoolTimeout:
        pool.close()
        pytest.skip(f"PostgreSQL not reachable at {settings.database_url}")
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean members table before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM members")
        conn.commit()
    yield
