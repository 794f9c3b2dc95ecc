"""
Shared pytest fixtures for the compass badges test suite.

Each test gets its own in-memory SQLite database (aiosqlite, single shared
connection via StaticPool) with the full schema, an AsyncSession bound to it
and the SQL repositories wired to that session.
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from compass_badges.db.base import Base
from compass_badges.repositories.sql import get_sql_repositories
from compass_badges.schemas.scenario import ScenarioSchema, SceneSchema
from tests.factories import branch

# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def db_engine():
    """Fresh in-memory database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(db_engine):
    """AsyncSession configured like the application's session factory."""
    maker = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as session:
        yield session


@pytest.fixture
def repos(db):
    """All repository ports backed by the test session."""
    return get_sql_repositories(db)


# ============================================================================
# SCENARIO GRAPH FIXTURES
# ============================================================================


@pytest.fixture
def two_path_scenario() -> ScenarioSchema:
    """A -> B (+5 honesty) -> C (+3 honesty, terminal); A -> D (-2 bravery, terminal)."""
    return ScenarioSchema(
        id="scenario-1",
        title="The Lost Wallet",
        scenes=[
            SceneSchema(
                id="A",
                branches=[branch("B", "honesty", 5), branch("D", "bravery", -2)],
            ),
            SceneSchema(id="B", branches=[branch("C", "honesty", 3)]),
            SceneSchema(id="C"),
            SceneSchema(id="D"),
        ],
    )
