# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Graph examples application entry point.

Run with: python -m mxy_ai.apps.graph_examples [--key=value ...]
"""

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar

from mxy_ai.core.config.settings import Settings
from mxy_ai.core.runtime import Application, run

APP_DIR = Path(__file__).parent


class GraphExamplesSettings(Settings):
    """Settings for the graph examples application.

    Packaged defaults come from ``application.yaml`` next to this module and
    can be overridden by ``config/mxy-ai-graph-examples.yaml`` in the working
    directory.
    """

    config_files: ClassVar[tuple[Path, ...]] = (
        APP_DIR / "application.yaml",
        Path("config") / "mxy-ai-graph-examples.yaml",
    )


class GraphExamplesApplication(Application):
    """Graph examples service."""

    name = "mxy-ai-graph-examples"
    title = "MXY AI Graph Examples"
    description = "Graph examples service"
    settings_class = GraphExamplesSettings


def main(argv: Sequence[str] | None = None) -> None:
    """Start the graph examples application.

    Args:
        argv: Process arguments; defaults to ``sys.argv[1:]``.
    """
    run(GraphExamplesApplication, sys.argv[1:] if argv is None else argv)
