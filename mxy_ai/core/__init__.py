# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Core package.

This package contains the shared runtime pieces both applications use:
- config: Application configuration and settings
- runtime: Argument parsing, application identity and the runner
- exceptions: Errors raised while starting an application
"""
