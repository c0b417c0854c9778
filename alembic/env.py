"""Alembic environment — runs Store API migrations through an async engine.

The URL comes from DATABASE_URL / DB_URL (normalized like the app does), falling
back to sqlalchemy.url in alembic.ini. All models are imported so autogenerate
sees the full metadata.
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

import store_api.models  # noqa: F401
from store_api.config import normalize_database_url
from store_api.db.base import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def database_url() -> str:
    url = os.environ.get("DATABASE_URL") or os.environ.get("DB_URL")
    if not url:
        url = config.get_main_option("sqlalchemy.url")
    return normalize_database_url(url)


def _configure_and_run(**options) -> None:
    context.configure(target_metadata=target_metadata, **options)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = database_url()
    engine = async_engine_from_config(
        section, prefix="sqlalchemy.", poolclass=pool.NullPool,
    )
    async with engine.connect() as connection:
        await connection.run_sync(
            lambda sync_conn: _configure_and_run(connection=sync_conn),
        )
    await engine.dispose()


if context.is_offline_mode():
    _configure_and_run(
        url=database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
else:
    asyncio.run(_migrate_online())
