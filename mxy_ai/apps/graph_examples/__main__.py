# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Allow running the graph examples application: python -m mxy_ai.apps.graph_examples."""

from mxy_ai.apps.graph_examples.application import main

if __name__ == "__main__":
    main()
