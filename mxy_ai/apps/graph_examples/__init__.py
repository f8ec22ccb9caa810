# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Graph examples application."""

from mxy_ai.apps.graph_examples.application import (
    GraphExamplesApplication,
    GraphExamplesSettings,
    main,
)

__all__ = ["GraphExamplesApplication", "GraphExamplesSettings", "main"]
