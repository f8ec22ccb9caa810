# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Learning agent application entry point.

Progressive learning assistant service.

Run with: python -m mxy_ai.apps.learning_agent [--key=value ...]
"""

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar

from mxy_ai.core.config.settings import Settings
from mxy_ai.core.runtime import Application, run

APP_DIR = Path(__file__).parent


class LearningAgentSettings(Settings):
    """Settings for the learning agent application."""

    config_files: ClassVar[tuple[Path, ...]] = (
        APP_DIR / "application.yaml",
        Path("config") / "mxy-ai-learning-agent.yaml",
    )


class LearningAgentApplication(Application):
    """Progressive learning assistant service."""

    name = "mxy-ai-learning-agent"
    title = "MXY AI Learning Agent"
    description = "Progressive learning assistant service"
    settings_class = LearningAgentSettings


def main(argv: Sequence[str] | None = None) -> None:
    """Application entry point.

    Args:
        argv: Command-line arguments; defaults to ``sys.argv[1:]``.
    """
    run(LearningAgentApplication, sys.argv[1:] if argv is None else argv)
