# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Command-line argument model.

Arguments reach the runtime exactly as the process received them. They are
split into option arguments (``--name=value`` or ``--name``) and non-option
arguments (everything else), and option arguments can be turned into
configuration overrides.

Example:
    >>> args = ApplicationArguments.parse(["--server.port=9000", "--debug", "data.csv"])
    >>> args.get_option_values("server.port")
    ['9000']
    >>> args.non_option_args
    ('data.csv',)
    >>> args.to_overrides()
    {'server': {'port': '9000'}, 'debug': 'true'}
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from mxy_ai.core.config.yaml_loader import normalize_key
from mxy_ai.core.exceptions import InvalidArgumentError

OPTION_PREFIX = "--"

# Value given to options passed without "=value"
FLAG_VALUE = "true"


@dataclass(frozen=True)
class ApplicationArguments:
    """Parsed view over the arguments an application was started with.

    Attributes:
        source_args: The arguments as given, unmodified.
        non_option_args: Arguments not starting with ``--``, in order.
    """

    source_args: tuple[str, ...]
    non_option_args: tuple[str, ...] = ()
    _options: dict[str, list[str]] = field(default_factory=dict, repr=False)

    @classmethod
    def parse(cls, args: Sequence[str]) -> "ApplicationArguments":
        """Parse raw process arguments.

        Args:
            args: Arguments as received by the entry point.

        Returns:
            Parsed arguments.

        Raises:
            InvalidArgumentError: If an option has no name.
        """
        options: dict[str, list[str]] = {}
        non_option_args: list[str] = []

        for arg in args:
            if not arg.startswith(OPTION_PREFIX):
                non_option_args.append(arg)
                continue

            name, sep, value = arg[len(OPTION_PREFIX):].partition("=")
            if not name.strip():
                raise InvalidArgumentError(arg, "option name is empty")

            values = options.setdefault(name, [])
            if sep:
                values.append(value)

        return cls(
            source_args=tuple(args),
            non_option_args=tuple(non_option_args),
            _options=options,
        )

    @property
    def option_names(self) -> set[str]:
        """Names of all option arguments."""
        return set(self._options)

    def contains_option(self, name: str) -> bool:
        """Check whether an option was given, with or without a value."""
        return name in self._options

    def get_option_values(self, name: str) -> list[str] | None:
        """Get the values of an option.

        Returns:
            Values in the order given, an empty list for a bare ``--name``,
            or None if the option is absent.
        """
        values = self._options.get(name)
        return list(values) if values is not None else None

    def to_overrides(self) -> dict[str, Any]:
        """Convert option arguments into nested configuration overrides.

        Dots in an option name separate nesting levels and dashes map to
        underscores. The last value of a repeated option wins and bare
        options become ``"true"``.

        Raises:
            InvalidArgumentError: If an option name has an empty segment or
                is used both as a value and as a parent of other options.
        """
        overrides: dict[str, Any] = {}

        for name, values in self._options.items():
            argument = f"{OPTION_PREFIX}{name}"
            segments = [normalize_key(segment) for segment in name.split(".")]
            if not all(segments):
                raise InvalidArgumentError(argument, "option name has an empty segment")

            cursor = overrides
            for segment in segments[:-1]:
                child = cursor.setdefault(segment, {})
                if not isinstance(child, dict):
                    raise InvalidArgumentError(
                        argument, f"'{segment}' is already set to a value"
                    )
                cursor = child

            leaf = segments[-1]
            if isinstance(cursor.get(leaf), dict):
                raise InvalidArgumentError(argument, f"'{leaf}' has nested options")
            cursor[leaf] = values[-1] if values else FLAG_VALUE

        return overrides
