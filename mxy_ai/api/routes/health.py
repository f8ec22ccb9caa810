# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Health check endpoints.

This module provides health and readiness endpoints for the API.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(description="Overall health status")
    application: str = Field(description="Application name")
    version: str = Field(description="Application version")
    environment: str = Field(description="Deployment environment")
    timestamp: datetime = Field(description="Current server timestamp")
    uptime_seconds: int = Field(description="Application uptime in seconds")


class ReadinessResponse(BaseModel):
    """Readiness check response model."""
    ready: bool = Field(description="Whether the service is ready")
    application: str = Field(description="Application name")


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Check that the application process is up.

    Returns:
        HealthResponse with uptime and identity details.
    """
    state = request.app.state
    now = datetime.now(timezone.utc)

    return HealthResponse(
        status="healthy",
        application=state.settings.application_name,
        version=state.application.version,
        environment=state.settings.environment,
        timestamp=now,
        uptime_seconds=int((now - state.started_at).total_seconds()),
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request, response: Response) -> ReadinessResponse:
    """Check if the API is ready to accept traffic.

    The application is ready once its lifespan startup has completed and
    until shutdown begins.

    Returns:
        ReadinessResponse, with status 503 while not ready.
    """
    state = request.app.state
    ready = bool(getattr(state, "ready", False))
    if not ready:
        logger.warning("Readiness check failed: startup not complete")
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessResponse(ready=ready, application=state.settings.application_name)
