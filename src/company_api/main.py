# src/company_api/main.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""ASGI entry point.

``create_app`` assembles the service: JSON logging, middleware stack, error
envelope handlers, API and metrics routers, and a lifespan that owns the
database engine. ``app`` is the eagerly built instance used by
``uvicorn company_api.main:app``.
"""

from __future__ import annotations

import os
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any, cast

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import Response

from company_api.adapters.routers import api_router, metrics_router
from company_api.config.settings import Environment, Settings, get_settings
from company_api.dependencies.core.bootstrap import bootstrap
from company_api.domain.exceptions.base import DomainError
from company_api.infrastructure.http.errors import (
    handle_domain_error,
    handle_http_exception,
    handle_unhandled_exception,
    handle_validation_error,
)
from company_api.infrastructure.logging.logger import configure_root_logging, get_json_logger
from company_api.infrastructure.middleware.access_log import AccessLogMiddleware
from company_api.infrastructure.middleware.correlation import RequestIdMiddleware, TraceIdMiddleware
from company_api.infrastructure.middleware.request_metrics import RequestLatencyMiddleware
from company_api.infrastructure.middleware.security_headers import SecurityHeadersMiddleware
from company_api.infrastructure.observability.metrics import get_readyz_db_latency_seconds

configure_root_logging()
logger = get_json_logger(__name__)

HSTS_MAX_AGE = 31_536_000

ExceptionHandler = Callable[[Request, Any], Awaitable[Response]]

_EXCEPTION_HANDLERS: tuple[tuple[type[Exception], ExceptionHandler], ...] = (
    (StarletteHTTPException, handle_http_exception),
    (RequestValidationError, handle_validation_error),
    (DomainError, handle_domain_error),
    (Exception, handle_unhandled_exception),
)


def _operation_id(route: APIRoute) -> str:
    """OpenAPI operationId from method and path, e.g. ``get__api_companies_company_id``."""
    methods = "_".join(sorted(m.lower() for m in route.methods or ()))
    path = route.path_format.replace("{", "").replace("}", "").replace("/", "_")
    return f"{methods}_{path.lower()}"


@asynccontextmanager
async def runtime_lifespan(app: FastAPI) -> AsyncIterator[None]:
    async with bootstrap(app) as state:
        app.state.settings = state.settings
        yield


def _attach_middlewares(app: FastAPI, settings: Settings) -> None:
    # Starlette puts the last added middleware outermost. Request order:
    # request id, trace id, access log, latency, security headers, CORS.
    origins = settings.cors_allow_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=bool(origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    production = settings.environment is Environment.PRODUCTION
    app.add_middleware(SecurityHeadersMiddleware, hsts_max_age=HSTS_MAX_AGE if production else 0)
    app.add_middleware(RequestLatencyMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(TraceIdMiddleware)
    app.add_middleware(RequestIdMiddleware)


def create_app() -> FastAPI:
    """Build a fully wired application from the current settings."""
    settings = get_settings()
    version = settings.service_version or "0.0.0"

    app = FastAPI(
        title="Company API",
        description="Company registry with ISIN validation.",
        version=version,
        lifespan=runtime_lifespan,
        docs_url=settings.docs_url,
        openapi_url=settings.openapi_url,
        generate_unique_id_function=_operation_id,
    )
    for exc_type, handler in _EXCEPTION_HANDLERS:
        app.add_exception_handler(exc_type, cast(Any, handler))

    _attach_middlewares(app, settings)
    app.include_router(api_router)
    app.include_router(metrics_router)

    # Registered up front so the first scrape already lists it.
    get_readyz_db_latency_seconds()

    logger.info(
        "service_startup",
        extra={
            "extra": {
                "service": settings.service_name,
                "env": settings.environment.value,
                "version": version,
            }
        },
    )
    return app


app: FastAPI = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(
        "company_api.main:create_app",
        factory=True,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
    )
