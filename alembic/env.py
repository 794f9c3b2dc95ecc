"""Alembic env for the compass badges schema."""
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from compass_badges.db.base import Base  # noqa: E402
from compass_badges.db.migrations import is_sqlite_url, migration_database_url  # noqa: E402

target_metadata = Base.metadata
database_url = migration_database_url(fallback=config.get_main_option("sqlalchemy.url"))

# SQLite has no ALTER for constraints; batch mode rebuilds the table instead
migration_options = {
    "target_metadata": target_metadata,
    "compare_type": True,
    "render_as_batch": is_sqlite_url(database_url),
}


def run_migrations_offline() -> None:
    context.configure(
        url=database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **migration_options,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        {"sqlalchemy.url": database_url},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, **migration_options)
        with context.begin_transaction():
            context.run_migrations()
    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
