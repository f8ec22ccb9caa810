# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package.

This package provides configuration management for the applications:
- Settings: Pydantic-based settings layered from arguments, environment
  variables and YAML config files
- YAML loader: Utilities for loading and merging YAML configuration files

Example:
    >>> from mxy_ai.core.config import Settings, load_settings
    >>> settings = load_settings(Settings)
    >>> print(settings.environment)
    'development'
"""

from mxy_ai.core.config.settings import (
    CORSSettings,
    MetricsSettings,
    ServerSettings,
    Settings,
    load_settings,
)
from mxy_ai.core.config.yaml_loader import (
    YAMLConfigSettingsSource,
    YAMLLoadError,
    deep_merge,
    load_yaml,
    load_yaml_files,
)

__all__ = [
    # Settings
    "Settings",
    "load_settings",
    # Subsettings
    "ServerSettings",
    "CORSSettings",
    "MetricsSettings",
    # YAML utilities
    "load_yaml",
    "load_yaml_files",
    "deep_merge",
    "YAMLConfigSettingsSource",
    "YAMLLoadError",
]
