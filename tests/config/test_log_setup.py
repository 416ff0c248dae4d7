"""Tests for the loguru setup in factcheck_system.config.logging."""

import io
import json

import pytest

from factcheck_system.config.logging import (
    DEFAULT_COMPONENT,
    configure_logging,
    get_logger,
    logger,
)


class TtyBuffer(io.StringIO):
    def isatty(self) -> bool:
        return True


def records(buffer: io.StringIO) -> list[dict]:
    return [json.loads(line)["record"] for line in buffer.getvalue().splitlines() if line]


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure_logging()


class TestJsonOutput:
    def test_level_override_filters_records(self):
        buffer = io.StringIO()
        configure_logging(level="warning", log_format="json", stream=buffer)

        log = get_logger("ClaimVerifier")
        log.info("hidden")
        log.warning("shown", claim_length=12)

        [record] = records(buffer)
        assert record["message"] == "shown"
        assert record["level"]["name"] == "WARNING"
        assert record["extra"]["component"] == "ClaimVerifier"
        assert record["extra"]["claim_length"] == 12

    def test_unbound_logger_gets_default_component(self):
        buffer = io.StringIO()
        configure_logging(level="DEBUG", log_format="json", stream=buffer)

        logger.info("plain")

        [record] = records(buffer)
        assert record["extra"]["component"] == DEFAULT_COMPONENT

    def test_console_format_needs_a_tty(self):
        buffer = io.StringIO()
        configure_logging(level="INFO", log_format="console", stream=buffer)

        get_logger("cli").info("not a terminal")

        [record] = records(buffer)
        assert record["message"] == "not a terminal"


class TestConsoleOutput:
    def test_console_line_on_tty(self):
        buffer = TtyBuffer()
        configure_logging(level="INFO", log_format="console", stream=buffer)

        get_logger("cli").info("Displaying system status")

        output = buffer.getvalue()
        assert "Displaying system status" in output
        assert "cli" in output
        assert not output.startswith("{")

    def test_unbound_logger_renders_on_console(self):
        buffer = TtyBuffer()
        configure_logging(level="INFO", log_format="console", stream=buffer)

        logger.info("no component bound")

        assert DEFAULT_COMPONENT in buffer.getvalue()
