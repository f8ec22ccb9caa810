# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests
- Integration tests
"""

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

# Environment variables that would leak into Settings during tests
SETTINGS_ENV_VARS = (
    "APPLICATION_NAME",
    "ENVIRONMENT",
    "DEBUG",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "SERVER",
    "CORS",
    "METRICS",
)


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Run every test in an empty working directory with a clean environment.

    Keeps a developer's .env file, config/ directory or exported variables
    from changing the settings under test.

    Yields:
        The temporary working directory.
    """
    for name in list(os.environ):
        upper = name.upper()
        if upper in SETTINGS_ENV_VARS or upper.split("__")[0] in SETTINGS_ENV_VARS:
            monkeypatch.delenv(name, raising=False)

    monkeypatch.chdir(tmp_path)
    yield tmp_path

    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)


@pytest.fixture
def config_dir(isolated_environment: Path) -> Path:
    """Provide the external config/ directory of the working directory."""
    path = isolated_environment / "config"
    path.mkdir()
    return path


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def sample_arguments() -> list[str]:
    """Provide a mixed argument list as a process would receive it."""
    return ["--server.port=9100", "--debug", "lessons.csv", "--tag=a", "--tag=b"]
