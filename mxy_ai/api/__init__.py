# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API Layer.

This module provides the FastAPI application factory and the HTTP
endpoints shared by every application.
"""

from mxy_ai.api.app import create_app

__all__ = ["create_app"]
