# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Learning agent application."""

from mxy_ai.apps.learning_agent.application import (
    LearningAgentApplication,
    LearningAgentSettings,
    main,
)

__all__ = ["LearningAgentApplication", "LearningAgentSettings", "main"]
