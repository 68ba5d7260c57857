"""Root conftest — shared test configuration and the in-memory database.

Invariants:
    - Every test gets a fresh in-memory SQLite database with tables created

Design Decisions:
    - StaticPool: one shared connection, so the in-memory database survives
      across sessions within a test
"""

import os

# Ensure tests never reach a real database or a real front-end origin
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("FRONTEND_URL", "http://localhost:5173")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from product_api.infrastructure.database import DatabaseSessionManager  # noqa: E402

MEMORY_DB_URL = "sqlite+aiosqlite:///:memory:"


def make_memory_db_manager() -> DatabaseSessionManager:
    return DatabaseSessionManager(
        MEMORY_DB_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
async def db_manager():
    manager = make_memory_db_manager()
    await manager.connect()
    yield manager
    await manager.dispose()
