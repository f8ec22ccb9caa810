# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI Application Factory.

This module builds the FastAPI application for any Application identity:
shared state, middleware and routes first, then the application's own
``configure`` hook.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CollectorRegistry, Info

from mxy_ai.api.middleware import RequestContextMiddleware, RequestMetrics
from mxy_ai.api.routes import health, info, metrics
from mxy_ai.core.config.settings import Settings
from mxy_ai.core.runtime.arguments import ApplicationArguments
from mxy_ai.utils.logging import get_logger

if TYPE_CHECKING:
    from mxy_ai.core.runtime.application import Application

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Marks the application ready once startup completes and not ready as
    soon as shutdown begins.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings: Settings = app.state.settings
    started_in = (datetime.now(timezone.utc) - app.state.started_at).total_seconds()
    app.state.ready = True
    logger.info(
        "Application started",
        application=settings.application_name,
        host=settings.server.host,
        port=settings.server.port,
        started_in_seconds=round(started_in, 3),
    )

    yield

    app.state.ready = False
    logger.info("Shutting down application", application=settings.application_name)


def create_app(
    application: "type[Application]",
    settings: Settings,
    arguments: ApplicationArguments | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        application: The application identity being built.
        settings: Loaded application settings.
        arguments: Arguments the application was started with.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=application.title,
        description=application.description,
        version=application.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    # =========================================================================
    # State
    # =========================================================================
    app.state.application = application
    app.state.settings = settings
    app.state.arguments = arguments or ApplicationArguments.parse([])
    app.state.started_at = datetime.now(timezone.utc)
    app.state.ready = False

    registry = CollectorRegistry()
    Info("application", "Application identity", registry=registry).info({
        "name": settings.application_name,
        "version": application.version,
        "environment": settings.environment,
    })
    app.state.metrics_registry = registry

    # =========================================================================
    # Middleware (order matters - last added is first executed)
    # =========================================================================
    app.add_middleware(RequestContextMiddleware, metrics=RequestMetrics(registry))

    if settings.cors.origins_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors.origins_list,
            allow_credentials=settings.cors.allow_credentials,
            allow_methods=settings.cors.allow_methods,
            allow_headers=settings.cors.allow_headers,
        )

    # =========================================================================
    # Routes
    # =========================================================================
    app.include_router(health.router, tags=["Health"])
    app.include_router(info.router, tags=["Info"])
    if settings.metrics.enabled:
        app.include_router(metrics.router, tags=["Metrics"])

    application.configure(app, settings)

    return app
