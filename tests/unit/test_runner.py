# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the application runner."""

import socket
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI

from mxy_ai.apps.graph_examples import GraphExamplesApplication
from mxy_ai.apps.learning_agent import LearningAgentApplication
from mxy_ai.core.config.yaml_loader import YAMLLoadError
from mxy_ai.core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    ServerStartupError,
)
from mxy_ai.core.runtime import ApplicationContext, ApplicationRunner, run


@pytest.fixture
def mock_uvicorn():
    """Replace uvicorn in the runner so no socket is opened."""
    with patch("mxy_ai.core.runtime.runner.uvicorn") as mock:
        yield mock


class TestPrepare:
    """Tests for ApplicationRunner.prepare."""

    def test_builds_context(self) -> None:
        """Test that prepare wires arguments, settings and app together."""
        runner = ApplicationRunner(GraphExamplesApplication)

        context = runner.prepare(["--server.port=9001", "lessons.csv"])

        assert isinstance(context, ApplicationContext)
        assert context.application is GraphExamplesApplication
        assert context.settings.application_name == "mxy-ai-graph-examples"
        assert context.settings.server.port == 9001
        assert context.arguments.non_option_args == ("lessons.csv",)
        assert isinstance(context.app, FastAPI)
        assert context.app.state.context is context
        assert context.app.state.settings is context.settings
        assert context.started_at == context.app.state.started_at

    def test_uses_application_settings_class(self) -> None:
        """Test that each application gets its own packaged defaults."""
        context = ApplicationRunner(LearningAgentApplication).prepare([])

        assert context.settings.application_name == "mxy-ai-learning-agent"
        assert context.settings.server.port == 8081
        assert context.app.title == "MXY AI Learning Agent"

    def test_external_config_file_applies(self, config_dir: Path) -> None:
        """Test that config/<name>.yaml is picked up from the working directory."""
        (config_dir / "mxy-ai-graph-examples.yaml").write_text(
            "server:\n  root-path: /graphs\n"
        )

        context = ApplicationRunner(GraphExamplesApplication).prepare([])

        assert context.settings.server.root_path == "/graphs"

    def test_invalid_argument_raises_error(self) -> None:
        """Test that an option without a name stops startup."""
        with pytest.raises(InvalidArgumentError):
            ApplicationRunner(GraphExamplesApplication).prepare(["--=x"])

    def test_invalid_setting_raises_error(self) -> None:
        """Test that an out of range value stops startup."""
        with pytest.raises(ConfigurationError) as exc_info:
            ApplicationRunner(GraphExamplesApplication).prepare(["--server.port=0"])

        assert exc_info.value.details == {"fields": ["server.port"]}

    def test_broken_config_file_raises_error(self, config_dir: Path) -> None:
        """Test that an unparsable override file stops startup."""
        (config_dir / "mxy-ai-graph-examples.yaml").write_text("- just\n- a list\n")

        with pytest.raises(YAMLLoadError):
            ApplicationRunner(GraphExamplesApplication).prepare([])


class TestServe:
    """Tests for ApplicationRunner.serve."""

    def test_serves_with_uvicorn(self, mock_uvicorn: MagicMock) -> None:
        """Test that the server is configured from settings and run."""
        runner = ApplicationRunner(GraphExamplesApplication)
        context = runner.prepare(
            ["--server.host=127.0.0.1", "--server.port=9002", "--server.access-log"]
        )

        runner.serve(context)

        mock_uvicorn.Config.assert_called_once_with(
            context.app,
            host="127.0.0.1",
            port=9002,
            root_path="",
            access_log=True,
            timeout_graceful_shutdown=30,
            log_config=None,
        )
        mock_uvicorn.Server.assert_called_once_with(mock_uvicorn.Config.return_value)
        mock_uvicorn.Server.return_value.run.assert_called_once_with()

    def test_disabled_server_does_not_listen(self, mock_uvicorn: MagicMock) -> None:
        """Test that server.enabled=false skips uvicorn entirely."""
        runner = ApplicationRunner(GraphExamplesApplication)
        context = runner.prepare(["--server.enabled=false"])

        runner.serve(context)

        mock_uvicorn.Config.assert_not_called()
        mock_uvicorn.Server.assert_not_called()


class TestRun:
    """Tests for run()."""

    def test_run_returns_context(self, mock_uvicorn: MagicMock) -> None:
        """Test a full run with a stubbed server."""
        context = run(LearningAgentApplication, ["--server.port=9003"])

        assert context.settings.server.port == 9003
        assert mock_uvicorn.Config.call_args.kwargs["port"] == 9003
        mock_uvicorn.Server.return_value.run.assert_called_once_with()

    def test_argument_list_not_modified(self, mock_uvicorn: MagicMock) -> None:
        """Test that the caller's list is left untouched."""
        args = ["--debug", "input"]

        context = run(GraphExamplesApplication, args)

        assert args == ["--debug", "input"]
        assert context.arguments.source_args == ("--debug", "input")
        assert context.settings.debug is True

    def test_busy_port_raises_startup_error(self) -> None:
        """Test that a port already in use fails the run and is logged."""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
            busy.bind(("127.0.0.1", 0))
            busy.listen()
            port = busy.getsockname()[1]

            with patch("mxy_ai.core.runtime.runner.logger") as mock_logger:
                with pytest.raises(ServerStartupError) as exc_info:
                    run(
                        GraphExamplesApplication,
                        ["--server.host=127.0.0.1", f"--server.port={port}"],
                    )

        assert isinstance(exc_info.value.__cause__, SystemExit)
        mock_logger.exception.assert_called_once_with(
            "Application run failed", application="mxy-ai-graph-examples"
        )

    def test_failed_lifespan_raises_startup_error(self, mock_uvicorn: MagicMock) -> None:
        """Test that a server returning before startup completed is a failure."""
        mock_uvicorn.Server.return_value.started = False

        with pytest.raises(ServerStartupError, match="lifespan startup failed"):
            run(LearningAgentApplication, [])

    def test_run_logs_without_stubbed_logger(self) -> None:
        """Test a full run through real logging with the listener disabled."""
        context = run(GraphExamplesApplication, ["--server.enabled=false"])

        assert context.settings.server.enabled is False

    def test_failure_is_logged(self, mock_uvicorn: MagicMock) -> None:
        """Test that a failed run is logged before re-raising."""
        with patch("mxy_ai.core.runtime.runner.logger") as mock_logger:
            with pytest.raises(ConfigurationError):
                run(GraphExamplesApplication, ["--environment=production", "--debug"])

        mock_logger.exception.assert_called_once_with(
            "Application run failed", application="mxy-ai-graph-examples"
        )
        mock_uvicorn.Server.assert_not_called()
