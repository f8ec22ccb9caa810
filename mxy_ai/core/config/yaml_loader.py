# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""YAML configuration file loading.

This module loads the YAML files that hold an application's configuration
defaults and exposes them to pydantic-settings as a settings source.
Files are merged in declaration order, later files overriding earlier ones.

Example:
    >>> from pathlib import Path
    >>> from mxy_ai.core.config.yaml_loader import load_yaml, load_yaml_files
    >>> config = load_yaml(Path("config/mxy-ai-graph-examples.yaml"))
    >>> merged = load_yaml_files([Path("a.yaml"), Path("b.yaml")])
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class YAMLLoadError(Exception):
    """Raised when YAML file cannot be loaded or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize YAMLLoadError.

        Args:
            path: Path to the YAML file that failed to load.
            reason: Description of why the file failed to load.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load YAML file '{path}': {reason}")


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a single YAML file and return its contents as a dictionary.

    Args:
        path: Path to the YAML file to load.

    Returns:
        Dictionary containing the parsed YAML contents.
        Empty dict if file is empty.

    Raises:
        YAMLLoadError: If the file doesn't exist, cannot be read,
            or contains invalid YAML.
    """
    if not path.exists():
        raise YAMLLoadError(path, "File does not exist")

    if not path.is_file():
        raise YAMLLoadError(path, "Path is not a file")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise YAMLLoadError(path, f"Cannot read file: {e}") from e

    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise YAMLLoadError(path, f"Invalid YAML syntax: {e}") from e

    if parsed is None:
        return {}

    if not isinstance(parsed, dict):
        raise YAMLLoadError(
            path, f"YAML root must be a mapping, got {type(parsed).__name__}"
        )

    return normalize_keys(parsed)


def load_yaml_files(paths: Iterable[Path]) -> dict[str, Any]:
    """Load and deep merge several optional YAML files.

    Files that do not exist are skipped so that external override files
    can be declared without being required.

    Args:
        paths: Files to load, lowest precedence first.

    Returns:
        The merged configuration mapping.

    Raises:
        YAMLLoadError: If an existing file fails to load.
    """
    result: dict[str, Any] = {}
    for path in paths:
        if not path.exists():
            continue
        result = deep_merge(result, load_yaml(path))
    return result


def normalize_key(key: str) -> str:
    """Map a relaxed key such as ``root-path`` to its field name ``root_path``."""
    return key.strip().replace("-", "_").lower()


def normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Recursively normalize mapping keys with normalize_key."""
    return {
        normalize_key(str(key)): normalize_keys(value) if isinstance(value, dict) else value
        for key, value in data.items()
    }


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    Nested dictionaries are merged recursively. For non-dict values,
    the override value replaces the base value.

    Args:
        base: The base dictionary to merge into.
        override: The dictionary whose values take precedence.

    Returns:
        A new dictionary containing the merged result.
        Neither input dictionary is modified.

    Example:
        >>> base = {"a": 1, "b": {"c": 2, "d": 3}}
        >>> override = {"b": {"c": 10}, "e": 5}
        >>> deep_merge(base, override)
        {"a": 1, "b": {"c": 10, "d": 3}, "e": 5}
    """
    result: dict[str, Any] = base.copy()

    for key, override_value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(override_value, dict)
        ):
            result[key] = deep_merge(result[key], override_value)
        else:
            result[key] = override_value

    return result


class YAMLConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by the settings class' YAML config files.

    The files are read from the ``config_files`` class attribute of the
    settings class unless given explicitly.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_files: Iterable[Path] | None = None,
    ) -> None:
        super().__init__(settings_cls)
        if config_files is None:
            config_files = getattr(settings_cls, "config_files", ())
        self._data = load_yaml_files(config_files)

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        value = self._data.get(field_name)
        return value, field_name, isinstance(value, dict)

    def __call__(self) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            value, key, _ = self.get_field_value(field, field_name)
            if value is not None:
                values[key] = value
        return values
