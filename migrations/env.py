"""Alembic environment bound to the wallet ledger metadata and settings."""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context

from wallet_service.core.config import get_settings
from wallet_service.db import models  # noqa: F401
from wallet_service.infrastructure.database.base import Base
from wallet_service.infrastructure.database.session import get_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _configure(**options) -> None:
    context.configure(target_metadata=target_metadata, render_as_batch=True, **options)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_with_engine() -> None:
    async with get_engine().connect() as connection:
        await connection.run_sync(lambda sync_conn: _configure(connection=sync_conn))


if context.is_offline_mode():
    # Emits SQL for the configured database instead of connecting to it.
    _configure(url=get_settings().database_url, literal_binds=True)
else:
    asyncio.run(_migrate_with_engine())
