"""
Tests for the rollcall CLI.

Covers parser flags, token resolution, and the exit codes of the run command.
"""

from unittest.mock import patch

import discord
import pytest

from rollcall.__main__ import cmd_run, create_parser, main
from rollcall.config.settings import BotSettings, Settings


@pytest.fixture(autouse=True)
def _no_logging_setup():
    """Keep CLI tests from rebinding the rollcall log handlers to captured stdout."""
    with patch("rollcall.__main__.setup_logging"):
        yield


def _settings(token: str = "") -> Settings:
    return Settings(_env_file=None, bot=BotSettings(token=token))


class TestParser:
    def test_run_accepts_short_token_flag(self):
        args = create_parser().parse_args(["run", "-t", "abc"])
        assert args.command == "run"
        assert args.token == "abc"

    def test_run_token_defaults_to_none(self):
        args = create_parser().parse_args(["run"])
        assert args.token is None

    def test_invalid_log_level_rejected(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--log-level", "LOUD", "config"])


class TestCmdRun:
    def test_missing_token_exits_nonzero(self):
        with patch("rollcall.bot.RollcallBot") as bot_cls:
            assert cmd_run(_settings(token="")) == 1
        bot_cls.assert_not_called()

    def test_clean_shutdown_exits_zero(self):
        with patch("rollcall.bot.RollcallBot") as bot_cls:
            assert cmd_run(_settings(token="abc")) == 0
        bot_cls.return_value.run.assert_called_once_with("abc", log_handler=None)

    def test_login_failure_exits_nonzero(self):
        with patch("rollcall.bot.RollcallBot") as bot_cls:
            bot_cls.return_value.run.side_effect = discord.LoginFailure("Improper token has been passed.")
            assert cmd_run(_settings(token="bad")) == 1

    def test_gateway_failure_exits_nonzero(self):
        with patch("rollcall.bot.RollcallBot") as bot_cls:
            bot_cls.return_value.run.side_effect = discord.GatewayNotFound()
            assert cmd_run(_settings(token="abc")) == 1


class TestMain:
    def test_cli_token_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("BOT__TOKEN", "from-env")
        with patch("rollcall.__main__.cmd_run", return_value=0) as run:
            assert main(["run", "-t", "from-cli"]) == 0
        settings = run.call_args[0][0]
        assert settings.bot.token == "from-cli"

    def test_environment_token_used_without_flag(self, monkeypatch):
        monkeypatch.setenv("BOT__TOKEN", "from-env")
        with patch("rollcall.__main__.cmd_run", return_value=0) as run:
            main(["run"])
        assert run.call_args[0][0].bot.token == "from-env"

    def test_config_command_succeeds(self, monkeypatch):
        monkeypatch.setenv("BOT__TOKEN", "secret")
        assert main(["config"]) == 0

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: rollcall" in capsys.readouterr().out
