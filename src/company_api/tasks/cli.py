# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Company API CLI: operational commands (schema, seed, listing, tokens).

Commands:
    db create        Create the tables from ORM metadata (dev convenience).
    db seed          Insert the reference companies when the table is empty.
    companies list   Print every company as JSON lines.
    token            Mint a bearer token for the configured client.

Environment:
    DATABASE_URL           Async SQLAlchemy URL.
    AUTH_HS256_SECRET      Signing secret (required by ``token``).
"""

from __future__ import annotations

import asyncio
import json

import typer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from company_api.adapters.uow import SqlAlchemyUnitOfWork
from company_api.application.use_cases.companies.list_companies import ListCompaniesUseCase
from company_api.application.use_cases.companies.seed_companies import SeedCompaniesUseCase
from company_api.config.features.auth import get_auth_settings
from company_api.infrastructure.auth.token_service import TokenError, issue_access_token
from company_api.infrastructure.database.models.base import metadata
from company_api.infrastructure.database.session import build_engine
from company_api.infrastructure.logging.logger import configure_root_logging, get_json_logger

configure_root_logging()
log = get_json_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)
db_app = typer.Typer(no_args_is_help=True)
companies_app = typer.Typer(no_args_is_help=True)
app.add_typer(db_app, name="db")
app.add_typer(companies_app, name="companies")


def _engine_and_sessionmaker(
    database_url: str,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create an engine and a session factory bound to it."""
    engine = build_engine(database_url)
    return engine, async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@db_app.command("create")
def db_create(
    database_url: str = typer.Option(
        ..., envvar="DATABASE_URL", help="Async SQLAlchemy URL."
    ),  # noqa: B008
) -> None:
    """Create all tables (use Alembic migrations outside development)."""
    # Registers CompanyModel on the shared metadata.
    import company_api.infrastructure.database.models.company  # noqa: F401

    async def _run() -> None:
        engine = build_engine(database_url)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(metadata.create_all)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    log.info("db_create.done", extra={"extra": {"tables": sorted(metadata.tables)}})


@db_app.command("seed")
def db_seed(
    database_url: str = typer.Option(
        ..., envvar="DATABASE_URL", help="Async SQLAlchemy URL."
    ),  # noqa: B008
) -> None:
    """Seed the reference companies if the table is empty."""
    engine, Session = _engine_and_sessionmaker(database_url)

    async def _run() -> int:
        try:
            return await SeedCompaniesUseCase(SqlAlchemyUnitOfWork(session_factory=Session)).execute()
        finally:
            await engine.dispose()

    count = asyncio.run(_run())
    log.info("db_seed.done", extra={"extra": {"inserted": count}})
    typer.echo(f"Seeded {count} companies")


@companies_app.command("list")
def companies_list(
    database_url: str = typer.Option(
        ..., envvar="DATABASE_URL", help="Async SQLAlchemy URL."
    ),  # noqa: B008
) -> None:
    """Print all companies, one JSON object per line."""
    engine, Session = _engine_and_sessionmaker(database_url)

    async def _run() -> None:
        try:
            dtos = await ListCompaniesUseCase(SqlAlchemyUnitOfWork(session_factory=Session)).execute()
        finally:
            await engine.dispose()
        for dto in dtos:
            typer.echo(json.dumps(dto.model_dump(mode="json")))

    asyncio.run(_run())


@app.command("token")
def token(
    scope: str | None = typer.Option(None, help="Space-separated scopes."),  # noqa: B008
) -> None:
    """Mint an access token for the configured client and print it."""
    cfg = get_auth_settings()
    try:
        issued = issue_access_token(cfg, client_id=cfg.client_id, scope=scope)
    except TokenError as exc:
        typer.echo(f"{exc.error}: {exc.description}", err=True)
        raise typer.Exit(code=2) from exc
    except RuntimeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(issued.access_token)


if __name__ == "__main__":  # pragma: no cover
    app()
