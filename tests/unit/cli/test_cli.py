"""Tests for the inspection CLI and logging setup."""

import logging

import pytest

from cryptounit.cli import main
from cryptounit.logconfig import LOG_LEVEL_ENV, resolve_log_level


class TestInspect:
    def test_decimal_literal(self, capsys):
        assert main(["inspect", "1.5e5"]) == 0
        out = capsys.readouterr().out
        assert "raw      15000000000000" in out
        assert "decimal  150000.00000000" in out
        assert f"buffer   {(15000000000000).to_bytes(8, 'big').hex()}" in out

    def test_raw_value(self, capsys):
        assert main(["inspect", "--raw", "256"]) == 0
        out = capsys.readouterr().out
        assert "decimal  0.00000256" in out
        assert "buffer   0000000000000100" in out

    def test_negative_value_has_no_buffer(self, capsys):
        assert main(["inspect", "--raw", "-5"]) == 0
        assert "buffer   n/a" in capsys.readouterr().out

    def test_invalid_value(self, capsys):
        assert main(["inspect", "abc"]) == 2
        assert "error:" in capsys.readouterr().err

    def test_missing_command_exits(self):
        with pytest.raises(SystemExit):
            main([])


class TestLogLevel:
    def test_verbose_is_debug(self):
        assert resolve_log_level(verbose=True) == logging.DEBUG

    def test_default_is_warning(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert resolve_log_level() == logging.WARNING

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        assert resolve_log_level() == logging.INFO

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        assert resolve_log_level() == logging.WARNING
