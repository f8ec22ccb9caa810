# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API Routes package.

This module exports the route modules shared by every application.
"""

from mxy_ai.api.routes import health, info, metrics

__all__ = ["health", "info", "metrics"]
