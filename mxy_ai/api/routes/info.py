# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application info endpoint."""

import platform
from datetime import datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

router = APIRouter()


class InfoResponse(BaseModel):
    """Static facts about the running application."""
    application: str = Field(description="Application name")
    title: str = Field(description="Application title")
    description: str = Field(description="Application description")
    version: str = Field(description="Application version")
    environment: str = Field(description="Deployment environment")
    started_at: datetime = Field(description="When the application was built")
    python_version: str = Field(description="Interpreter version")
    arguments: list[str] = Field(
        default_factory=list,
        description="Non-option command-line arguments",
    )


@router.get("/info", response_model=InfoResponse)
async def application_info(request: Request) -> InfoResponse:
    """Describe the running application."""
    state = request.app.state
    application = state.application

    return InfoResponse(
        application=state.settings.application_name,
        title=application.title,
        description=application.description,
        version=application.version,
        environment=state.settings.environment,
        started_at=state.started_at,
        python_version=platform.python_version(),
        arguments=list(state.arguments.non_option_args),
    )
