"""MXY AI server examples.

Launchers for the graph examples application and the learning agent
application, together with the runtime they hand startup off to.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
