"""Configuration and entry point."""

import logging
import sys

import pytest

from lookup_chain import DemoConfig
from lookup_chain.__main__ import cli, main
from lookup_chain.config import LOG_LEVEL_ENV


def test_defaults() -> None:
    config = DemoConfig()

    assert config.known_order_id == 1
    assert config.unknown_order_id == -1
    assert config.not_found_message == "Not found"
    assert config.fallback_message == "Lookup failed"
    assert config.log_level == "WARNING"


def test_from_env_without_override() -> None:
    assert DemoConfig.from_env({}) == DemoConfig()
    assert DemoConfig.from_env({LOG_LEVEL_ENV: ""}) == DemoConfig()


def test_from_env_reads_log_level() -> None:
    assert DemoConfig.from_env({LOG_LEVEL_ENV: " debug "}).log_level == "DEBUG"


def test_from_env_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match=LOG_LEVEL_ENV):
        DemoConfig.from_env({LOG_LEVEL_ENV: "chatty"})


def test_main_ignores_arguments_and_exits_zero(
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

    assert main(["--anything", "goes"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert len(out) == 7
    assert out[-1] == "Lookup failed"


def test_debug_logging_goes_to_log_records(
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    caplog.set_level(logging.DEBUG, logger="lookup_chain")

    main([])

    messages = [r.getMessage() for r in caplog.records]
    assert "find_order(1) -> hit" in messages
    assert "find_order(-1) -> miss" in messages
    assert "scenario: bind chain (order_id=1)" in messages
    assert "Not found" in capsys.readouterr().out


def test_cli_reports_bad_log_level_in_one_line(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    monkeypatch.setattr(sys, "argv", ["lookup-chain"])

    with pytest.raises(SystemExit) as info:
        cli()

    assert info.value.code == f"lookup-chain: {LOG_LEVEL_ENV}='chatty' is not a logging level"


def test_cli_exits_zero(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.setattr(sys, "argv", ["lookup-chain", "ignored"])

    with pytest.raises(SystemExit) as info:
        cli()

    assert info.value.code == 0
    assert len(capsys.readouterr().out.splitlines()) == 7
