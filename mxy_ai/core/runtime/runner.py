# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application runtime.

``run(application, args)`` is the single call an entry point makes. It is
the composition root for every application:

1. Parse the command-line arguments
2. Load settings (arguments > environment > .env > YAML files > defaults)
3. Configure logging
4. Build the FastAPI application
5. Serve it with uvicorn until shutdown

Failures are logged and re-raised. A server that exits before it is serving
surfaces as ServerStartupError; the process exit status is whatever the
interpreter makes of the propagated exception.

Example:
    >>> from mxy_ai.core.runtime import run
    >>> run(GraphExamplesApplication, ["--server.port=9000"])
"""

import os
from collections.abc import Sequence

import uvicorn

from mxy_ai.core.config.settings import load_settings
from mxy_ai.core.exceptions import ServerStartupError
from mxy_ai.core.runtime.application import Application
from mxy_ai.core.runtime.arguments import ApplicationArguments
from mxy_ai.core.runtime.context import ApplicationContext
from mxy_ai.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


class ApplicationRunner:
    """Starts one application.

    Attributes:
        application: The application identity to start.
    """

    def __init__(self, application: type[Application]) -> None:
        self.application = application

    def prepare(self, args: Sequence[str]) -> ApplicationContext:
        """Assemble the application without opening a listener.

        Args:
            args: Process arguments, as received by the entry point.

        Returns:
            Context holding the settings and the built FastAPI app.

        Raises:
            InvalidArgumentError: If an argument is malformed.
            ConfigurationError: If the settings fail validation.
            YAMLLoadError: If a config file exists but cannot be parsed.
        """
        arguments = ApplicationArguments.parse(args)
        settings = load_settings(
            self.application.settings_class, arguments.to_overrides()
        )
        setup_logging(settings)

        logger.info(
            "Starting application",
            application=settings.application_name,
            version=self.application.version,
            environment=settings.environment,
            pid=os.getpid(),
        )
        if arguments.non_option_args:
            logger.debug(
                "Non-option arguments",
                arguments=list(arguments.non_option_args),
            )

        app = self.application.create_app(settings, arguments)
        context = ApplicationContext(
            application=self.application,
            arguments=arguments,
            settings=settings,
            app=app,
            started_at=app.state.started_at,
        )
        app.state.context = context
        return context

    def serve(self, context: ApplicationContext) -> None:
        """Serve the application until the server shuts down.

        Does nothing when ``server.enabled`` is false.

        Args:
            context: Context returned by prepare().

        Raises:
            ServerStartupError: If the server could not bind its socket or
                the application's lifespan startup failed.
        """
        server_settings = context.settings.server
        if not server_settings.enabled:
            logger.info(
                "HTTP server disabled, not serving",
                application=context.settings.application_name,
            )
            return

        config = uvicorn.Config(
            context.app,
            host=server_settings.host,
            port=server_settings.port,
            root_path=server_settings.root_path,
            access_log=server_settings.access_log,
            timeout_graceful_shutdown=server_settings.graceful_timeout,
            log_config=None,
        )
        server = uvicorn.Server(config)
        application_name = context.settings.application_name
        # uvicorn reports bind failures with sys.exit()
        try:
            server.run()
        except SystemExit as e:
            raise ServerStartupError(
                application_name, f"server exited with status {e.code}"
            ) from e
        if not server.started:
            raise ServerStartupError(application_name, "lifespan startup failed")

        logger.info(
            "Application stopped",
            application=application_name,
            uptime_seconds=context.uptime_seconds,
        )

    def run(self, args: Sequence[str]) -> ApplicationContext:
        """Prepare and serve the application.

        Args:
            args: Process arguments, as received by the entry point.

        Returns:
            The context of the finished run.
        """
        try:
            context = self.prepare(args)
            self.serve(context)
        except Exception:
            logger.exception("Application run failed", application=self.application.name)
            raise
        return context


def run(application: type[Application], args: Sequence[str]) -> ApplicationContext:
    """Start an application with the given process arguments.

    Args:
        application: The application identity to start.
        args: Process arguments, forwarded as received.

    Returns:
        The context of the finished run.
    """
    return ApplicationRunner(application).run(args)
