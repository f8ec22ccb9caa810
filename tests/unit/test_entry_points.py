# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the application entry points.

Both launchers must hand the process arguments to the runtime in a single
call, untouched.
"""

import importlib
import runpy
import sys
from types import ModuleType
from unittest.mock import call, patch

import pytest

from mxy_ai.apps.graph_examples import GraphExamplesApplication
from mxy_ai.apps.learning_agent import LearningAgentApplication
from mxy_ai.core.runtime import Application

ENTRY_POINTS = [
    pytest.param(
        "mxy_ai.apps.graph_examples",
        GraphExamplesApplication,
        "mxy-ai-graph-examples",
        id="graph_examples",
    ),
    pytest.param(
        "mxy_ai.apps.learning_agent",
        LearningAgentApplication,
        "mxy-ai-learning-agent",
        id="learning_agent",
    ),
]


def application_module(package: str) -> ModuleType:
    """Import the module that defines main() for an application package."""
    return importlib.import_module(f"{package}.application")


@pytest.mark.unit
@pytest.mark.parametrize("package, application, name", ENTRY_POINTS)
class TestEntryPoint:
    """Tests shared by both entry points."""

    def test_empty_arguments_forwarded(
        self, package: str, application: type[Application], name: str
    ) -> None:
        """Test that an empty argument list reaches the runtime once."""
        module = application_module(package)

        with patch.object(module, "run") as mock_run:
            module.main([])

        mock_run.assert_called_once_with(application, [])

    def test_arguments_forwarded_unmodified(
        self, package: str, application: type[Application], name: str
    ) -> None:
        """Test that arguments are forwarded in order, without copying."""
        module = application_module(package)
        args = ["--foo=1", "bar"]

        with patch.object(module, "run") as mock_run:
            module.main(args)

        mock_run.assert_called_once()
        forwarded_application, forwarded_args = mock_run.call_args.args
        assert forwarded_application is application
        assert forwarded_args is args
        assert args == ["--foo=1", "bar"]

    def test_no_other_calls_made(
        self, package: str, application: type[Application], name: str
    ) -> None:
        """Test that the runtime call is the only interaction."""
        module = application_module(package)

        with patch.object(module, "run") as mock_run:
            result = module.main(["x"])

        assert result is None
        assert mock_run.mock_calls == [call(application, ["x"])]

    def test_defaults_to_process_arguments(
        self, package: str, application: type[Application], name: str
    ) -> None:
        """Test that main() without arguments reads sys.argv[1:]."""
        module = application_module(package)

        with (
            patch.object(sys, "argv", ["launcher", "--server.port=9000", "input"]),
            patch.object(module, "run") as mock_run,
        ):
            module.main()

        mock_run.assert_called_once_with(application, ["--server.port=9000", "input"])

    def test_runtime_failure_propagates(
        self, package: str, application: type[Application], name: str
    ) -> None:
        """Test that the entry point does not catch runtime errors."""
        module = application_module(package)

        with patch.object(module, "run", side_effect=RuntimeError("startup failed")):
            with pytest.raises(RuntimeError, match="startup failed"):
                module.main([])

    def test_runs_as_module(
        self, package: str, application: type[Application], name: str
    ) -> None:
        """Test that python -m <package> calls main() with sys.argv."""
        module = application_module(package)

        with (
            patch.object(sys, "argv", ["launcher", "--debug"]),
            patch.object(module, "run") as mock_run,
        ):
            runpy.run_module(package, run_name="__main__")

        mock_run.assert_called_once_with(application, ["--debug"])

    def test_application_identity(
        self, package: str, application: type[Application], name: str
    ) -> None:
        """Test the declared identity and its packaged defaults file."""
        assert application.name == name
        assert issubclass(application, Application)

        packaged_defaults = application.settings_class.config_files[0]
        assert packaged_defaults.name == "application.yaml"
        assert packaged_defaults.is_file()

    def test_starts_without_listener(
        self, package: str, application: type[Application], name: str
    ) -> None:
        """Test a real start through the runtime with the server disabled."""
        module = application_module(package)

        result = module.main(["--server.enabled=false", "--log-format=json"])

        assert result is None
