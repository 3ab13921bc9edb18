from logging.config import fileConfig

from feedback_portal.db import Base  # Import Base from db package's __init__.py
from feedback_portal.config import settings
from feedback_portal.db.session import async_engine

from alembic import context

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    Only a URL is needed here, so the migration SQL can be emitted
    without a DBAPI being installed.
    """
    if not settings.DATABASE_URL:
        raise ValueError("DATABASE_URL is not set in the environment settings.")
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()

async def run_migrations_online() -> None:
    """Run migrations in 'online' mode against the application's async engine."""
    if async_engine is None:
        raise RuntimeError("async_engine is not initialized. Check db/session.py and DATABASE_URL.")

    async with async_engine.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await async_engine.dispose()


import asyncio

if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
