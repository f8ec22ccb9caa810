# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application runtime.

This package turns an application identity plus process arguments into a
running HTTP service:
- arguments: Command-line option parsing and configuration overrides
- application: The Application base class entry points hand over
- context: State assembled for one run
- runner: The composition root behind run()
"""

from mxy_ai.core.runtime.application import Application
from mxy_ai.core.runtime.arguments import ApplicationArguments
from mxy_ai.core.runtime.context import ApplicationContext
from mxy_ai.core.runtime.runner import ApplicationRunner, run

__all__ = [
    "Application",
    "ApplicationArguments",
    "ApplicationContext",
    "ApplicationRunner",
    "run",
]
