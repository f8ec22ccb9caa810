# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Allow running the learning agent application: python -m mxy_ai.apps.learning_agent."""

from mxy_ai.apps.learning_agent.application import main

if __name__ == "__main__":
    main()
