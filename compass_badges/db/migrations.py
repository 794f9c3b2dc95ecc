"""Database URL resolution for Alembic.

The application talks to the database through an async driver; Alembic runs
its migrations on the matching sync driver.
"""
import os

from sqlalchemy.engine import make_url

from compass_badges.core.config import Settings, get_settings

# async driver -> sync driver
SYNC_DRIVERS = {
    "postgresql+asyncpg": "postgresql+psycopg2",
    "sqlite+aiosqlite": "sqlite",
}


def sync_database_url(url: str) -> str:
    parsed = make_url(url)
    drivername = SYNC_DRIVERS.get(parsed.drivername)
    if drivername is None:
        return url
    return parsed.set(drivername=drivername).render_as_string(hide_password=False)


def migration_database_url(settings: Settings | None = None, fallback: str | None = None) -> str | None:
    """ALEMBIC_DATABASE_URL as given, else the app's database URL on a sync driver, else fallback."""
    override = os.getenv("ALEMBIC_DATABASE_URL")
    if override:
        return override

    settings = settings or get_settings()
    if settings.database_url:
        return sync_database_url(settings.database_url)
    return fallback


def is_sqlite_url(url: str) -> bool:
    return make_url(url).get_backend_name() == "sqlite"
