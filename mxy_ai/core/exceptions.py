# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Exceptions raised by the application runtime.

This module defines the exception hierarchy used during startup:
- ApplicationError: Base exception for all runtime errors
- InvalidArgumentError: Malformed command-line option
- ConfigurationError: Settings failed validation
- ServerStartupError: HTTP server exited before it was serving
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application runtime errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict | None = None):
        """Initialize application error.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation with details if available."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class InvalidArgumentError(ApplicationError):
    """Raised when a command-line argument cannot be interpreted.

    Attributes:
        argument: The offending argument, as given on the command line.
        reason: Why the argument was rejected.
    """

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument syntax '{argument}': {reason}")


class ConfigurationError(ApplicationError):
    """Raised when application settings fail validation.

    Attributes:
        application: Name of the application being configured.
        errors: Validation errors as reported by pydantic.
    """

    def __init__(self, application: str, errors: list[dict[str, Any]]):
        self.application = application
        self.errors = errors
        locations = [
            ".".join(str(part) for part in error.get("loc", ())) or "<root>"
            for error in errors
        ]
        super().__init__(
            f"Invalid configuration for '{application}'",
            details={"fields": locations},
        )


class ServerStartupError(ApplicationError):
    """Raised when the HTTP server stops before it finished starting.

    Attributes:
        application: Name of the application being served.
        reason: Why the server did not start.
    """

    def __init__(self, application: str, reason: str):
        self.application = application
        self.reason = reason
        super().__init__(f"Server for '{application}' failed to start: {reason}")
