"""Tests for process bootstrap: fatal exits and client wiring."""

import logging
from unittest.mock import AsyncMock, MagicMock, patch

import discord
import pytest
from docker.errors import DockerException

from dockerbot import launcher
from dockerbot.adapters.discord.adapter import DockerBotClient
from dockerbot.adapters.docker.engine import DockerEngine
from dockerbot.config import AppConfig


@pytest.fixture(autouse=True)
def _no_logging_reconfig(monkeypatch):
    """Keep pytest's log capture handlers in place."""
    monkeypatch.setattr(launcher, "setup_logging", lambda level="INFO": None)


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("TOKEN", "secret-token")
    monkeypatch.setenv("USER_ID", "42")
    monkeypatch.delenv("LOG_LEVEL", raising=False)


class TestFatalStartup:
    def test_missing_token_exits(self, monkeypatch, caplog):
        monkeypatch.delenv("TOKEN", raising=False)
        monkeypatch.setenv("USER_ID", "42")
        with caplog.at_level(logging.CRITICAL), pytest.raises(SystemExit) as exc:
            launcher.main()
        assert exc.value.code == 1
        assert "TOKEN environment variable is required" in caplog.text

    def test_invalid_user_id_exits(self, monkeypatch, caplog):
        monkeypatch.setenv("TOKEN", "t")
        monkeypatch.setenv("USER_ID", "not-a-number")
        with caplog.at_level(logging.CRITICAL), pytest.raises(SystemExit) as exc:
            launcher.main()
        assert exc.value.code == 1
        assert "Invalid USER_ID" in caplog.text

    def test_docker_client_failure_exits(self, env, caplog):
        with patch.object(launcher, "create_docker_client", side_effect=DockerException("no daemon")), \
                caplog.at_level(logging.CRITICAL), pytest.raises(SystemExit) as exc:
            launcher.main()
        assert exc.value.code == 1
        assert "Failed to create Docker client" in caplog.text

    def test_login_failure_exits_and_closes_docker(self, env, caplog):
        docker_client = MagicMock()
        run_bot = AsyncMock(side_effect=discord.LoginFailure("Improper token"))
        with patch.object(launcher, "create_docker_client", return_value=docker_client), \
                patch.object(launcher, "run_bot", run_bot), \
                caplog.at_level(logging.CRITICAL), pytest.raises(SystemExit) as exc:
            launcher.main()
        assert exc.value.code == 1
        assert "Failed to create Discord bot" in caplog.text
        docker_client.close.assert_called_once()


class TestWiring:
    def test_main_runs_bot_with_config(self, env):
        docker_client = MagicMock()
        run_bot = AsyncMock()
        with patch.object(launcher, "create_docker_client", return_value=docker_client), \
                patch.object(launcher, "run_bot", run_bot):
            launcher.main()
        config, passed_client = run_bot.call_args[0]
        assert config.token == "secret-token"
        assert config.user_id == 42
        assert passed_client is docker_client
        docker_client.close.assert_called_once()

    def test_build_client(self):
        docker_client = MagicMock()
        client = launcher.build_client(AppConfig(token="t", user_id=7), docker_client)
        assert isinstance(client, DockerBotClient)
        assert client.router.allowed_user_id == 7
        assert isinstance(client.router.gateway.engine, DockerEngine)


class TestSetupLogging:
    def test_installs_single_stderr_handler(self, monkeypatch):
        monkeypatch.undo()
        with patch.object(launcher.logging, "basicConfig") as basic_config:
            launcher.setup_logging("WARNING")
        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == "WARNING"
        assert kwargs["format"] == launcher.LOG_FORMAT
        assert kwargs["stream"] is launcher.sys.stderr
        assert kwargs["force"] is True
