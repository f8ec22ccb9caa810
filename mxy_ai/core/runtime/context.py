# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Running application state."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from fastapi import FastAPI

from mxy_ai.core.config.settings import Settings
from mxy_ai.core.runtime.application import Application
from mxy_ai.core.runtime.arguments import ApplicationArguments


@dataclass
class ApplicationContext:
    """Everything the runtime assembled for one application run.

    Attributes:
        application: The application identity that was started.
        arguments: Parsed command-line arguments.
        settings: Loaded settings.
        app: The FastAPI application.
        started_at: When the context was created (UTC).
    """

    application: type[Application]
    arguments: ApplicationArguments
    settings: Settings
    app: FastAPI
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def uptime_seconds(self) -> int:
        """Seconds elapsed since the context was created."""
        return int((datetime.now(timezone.utc) - self.started_at).total_seconds())
