from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

from create_interwoven_app.core.logs import ScaffoldLogger


def _logger(*, verbose: bool = False, max_entries: int = 200) -> tuple[ScaffoldLogger, io.StringIO]:
    buffer = io.StringIO()
    return ScaffoldLogger(Console(file=buffer, width=200), verbose=verbose, max_entries=max_entries), buffer


def test_messages_are_printed_with_markers() -> None:
    log, buffer = _logger()

    log.info("Fetching available networks...")
    log.success("Dependencies installed successfully")
    log.warn("Dependency installation failed.")
    log.error("Project name validation failed")
    log.step("Copying template files...")

    output = buffer.getvalue()
    assert "ℹ Fetching available networks..." in output
    assert "✓ Dependencies installed successfully" in output
    assert "⚠ Dependency installation failed." in output
    assert "✖ Project name validation failed" in output
    assert "▶ Copying template files..." in output


def test_debug_only_printed_when_verbose() -> None:
    quiet, quiet_buffer = _logger()
    loud, loud_buffer = _logger(verbose=True)

    quiet.debug("hidden detail")
    loud.debug("shown detail")

    assert quiet_buffer.getvalue() == ""
    assert "shown detail" in loud_buffer.getvalue()
    assert quiet.messages("debug") == ["hidden detail"]


def test_history_is_bounded() -> None:
    log, _ = _logger(max_entries=3)
    for index in range(5):
        log.info(f"message {index}")

    assert log.messages() == ["message 2", "message 3", "message 4"]
    assert [entry.level for entry in log.recent(limit=2)] == ["info", "info"]
    assert log.recent(limit=0) == []
    assert log.recent()[-1].message == "message 4"


def test_messages_are_mirrored_to_stdlib_logging(caplog: pytest.LogCaptureFixture) -> None:
    log, _ = _logger()

    with caplog.at_level(logging.DEBUG, logger="create_interwoven_app"):
        log.warn("careful")

    assert "[warning] careful" in caplog.text
