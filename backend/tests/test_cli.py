"""Tests for the knbn-web command line."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from knbn_backend import cli
from knbn_backend.app.core.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("KNBN_CWD", str(tmp_path))
    monkeypatch.delenv("KNBN_PORT", raising=False)
    monkeypatch.delenv("KNBN_OPEN_BROWSER", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestParser:
    def test_defaults(self):
        args = cli.build_parser().parse_args([])

        assert args.command == "server"
        assert args.port is None
        assert args.host is None
        assert args.open_browser is None

    def test_options(self):
        args = cli.build_parser().parse_args(["server", "-p", "8080", "--no-open", "--host", "0.0.0.0"])

        assert args.port == 8080
        assert args.open_browser is False
        assert args.host == "0.0.0.0"

    @pytest.mark.parametrize("port", ["0", "70000", "http"])
    def test_invalid_port_exits(self, port: str, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.build_parser().parse_args(["-p", port])

        assert exc_info.value.code == 2
        assert "Port must be a number between 1 and 65535" in capsys.readouterr().err


class TestMain:
    def test_help_command(self, capsys):
        assert cli.main(["help"]) == 0
        assert "Usage: knbn-web" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        assert cli.main(["deploy"]) == 1
        assert "Unknown command: deploy" in capsys.readouterr().err

    def test_server_applies_overrides(self, capsys):
        with patch("uvicorn.run") as run, patch.object(cli.threading, "Timer") as timer:
            assert cli.main(["-p", "8123", "--no-open"]) == 0

        run.assert_called_once()
        assert run.call_args.kwargs["port"] == 8123
        assert run.call_args.kwargs["host"] == "127.0.0.1"
        timer.assert_not_called()
        assert "http://localhost:8123" in capsys.readouterr().out

    def test_server_schedules_browser(self):
        with patch("uvicorn.run"), patch.object(cli.threading, "Timer") as timer:
            cli.main([])

        timer.assert_called_once()
        assert timer.call_args.args[0] == cli.BROWSER_DELAY_SECONDS
        assert timer.call_args.kwargs["args"] == ("http://localhost:9000",)
        timer.return_value.start.assert_called_once()


class TestOpenBrowser:
    def test_prints_hint_when_no_browser(self, capsys):
        with patch.object(cli.webbrowser, "open", MagicMock(return_value=False)):
            cli.open_browser("http://localhost:9000")

        assert "Please visit http://localhost:9000 manually" in capsys.readouterr().out

    def test_silent_when_browser_opens(self, capsys):
        with patch.object(cli.webbrowser, "open", MagicMock(return_value=True)):
            cli.open_browser("http://localhost:9000")

        assert capsys.readouterr().out == ""
