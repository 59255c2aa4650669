# migrations/env.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Alembic environment for the Company API schema.

``ENVIRONMENT`` must be set explicitly (test, development or production)
before anything runs. Variables from ``.env.<ENVIRONMENT>`` and ``.env`` fill
in what the shell did not export. The URL comes from ``DATABASE_URL``, then
``-x url=...``, then ``sqlalchemy.url`` in alembic.ini.

    ENVIRONMENT=development alembic upgrade head
    ENVIRONMENT=test alembic -x show_url=1 upgrade head --sql
"""

from __future__ import annotations

import asyncio
import logging
import logging.config
import os
from pathlib import Path
from urllib.parse import urlsplit

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

import company_api.infrastructure.database.models.company  # noqa: F401
from company_api.infrastructure.database.models.base import metadata

config = context.config
if config.config_file_name is not None:
    logging.config.fileConfig(config.config_file_name)

log = logging.getLogger("alembic.env")

ENVIRONMENTS = ("test", "development", "production")
ROOT = Path(__file__).resolve().parents[1]

target_metadata = metadata


def _environment() -> str:
    env = os.getenv("ENVIRONMENT", "").strip().lower()
    if env not in ENVIRONMENTS:
        raise RuntimeError(
            f"Set ENVIRONMENT to one of {', '.join(ENVIRONMENTS)} before running migrations "
            f"(got {env or 'nothing'!r})."
        )
    return env


def _database_url() -> str:
    for env_file in (ROOT / f".env.{_environment()}", ROOT / ".env"):
        if env_file.is_file():
            load_dotenv(env_file, override=False)

    xargs = context.get_x_argument(as_dictionary=True)
    url = os.getenv("DATABASE_URL") or xargs.get("url") or config.get_main_option("sqlalchemy.url")
    if not url:
        raise RuntimeError("No database URL: export DATABASE_URL or set sqlalchemy.url.")

    if xargs.get("show_url") == "1":
        parts = urlsplit(url)
        log.info("Migrating %s://%s%s", parts.scheme, parts.hostname or "", parts.path)
    return url


def _do_run(connection: Connection | None = None, url: str | None = None) -> None:
    options = {"target_metadata": target_metadata, "compare_type": True, "include_schemas": True}
    if connection is not None:
        context.configure(connection=connection, **options)
    else:
        context.configure(
            url=url, literal_binds=True, dialect_opts={"paramstyle": "named"}, **options
        )
    with context.begin_transaction():
        context.run_migrations()


async def _run_online(url: str) -> None:
    engine = create_async_engine(url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_do_run)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    _do_run(url=_database_url())
else:
    asyncio.run(_run_online(_database_url()))
