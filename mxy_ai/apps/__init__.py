# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Runnable applications.

- graph_examples: Graph examples service
- learning_agent: Progressive learning assistant service
"""
