# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application identity.

An application is declared by subclassing Application and filling in its
class attributes. The class itself is the identity the entry points hand to
the runtime; nothing is discovered implicitly. Components an application
needs are wired explicitly in ``configure``.

Example:
    >>> class ReportsApplication(Application):
    ...     name = "reports"
    ...     title = "Reports"
    ...     settings_class = ReportsSettings
    ...
    ...     @classmethod
    ...     def configure(cls, app, settings):
    ...         app.include_router(reports_router)
"""

from typing import TYPE_CHECKING, ClassVar

from fastapi import FastAPI

from mxy_ai import __version__
from mxy_ai.core.config.settings import Settings

if TYPE_CHECKING:
    from mxy_ai.core.runtime.arguments import ApplicationArguments


class Application:
    """Base class for runnable applications.

    Attributes:
        name: Application name, matching the packaged ``application_name``.
        title: Human-readable title shown in the API docs.
        description: Short description shown in the API docs.
        version: Version reported by the info and health endpoints.
        settings_class: Settings subclass holding the application's
            config file locations.
    """

    name: ClassVar[str] = "application"
    title: ClassVar[str] = "Application"
    description: ClassVar[str] = ""
    version: ClassVar[str] = __version__
    settings_class: ClassVar[type[Settings]] = Settings

    @classmethod
    def configure(cls, app: FastAPI, settings: Settings) -> None:
        """Wire application specific components into the app.

        Called once by create_app after the shared middleware and routes
        are installed. The default registers nothing.

        Args:
            app: The FastAPI instance being built.
            settings: Loaded application settings.
        """

    @classmethod
    def create_app(
        cls,
        settings: Settings,
        arguments: "ApplicationArguments | None" = None,
    ) -> FastAPI:
        """Build the FastAPI application for this identity.

        Args:
            settings: Loaded application settings.
            arguments: Arguments the application was started with.

        Returns:
            Configured FastAPI application instance.
        """
        from mxy_ai.api.app import create_app

        return create_app(cls, settings, arguments)
