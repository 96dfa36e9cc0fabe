"""Unit tests for ConsoleAdapter.

Tests cover:
- JSON output with structured context
- Error helper adds error_type/error_message
- bind() carries context into later lines
- Level filtering
"""

import json

import pytest

from src.infrastructure.logging import ConsoleAdapter


def _lines(capsys) -> list[dict]:
    out = capsys.readouterr().out
    return [json.loads(line) for line in out.splitlines() if line.strip()]


@pytest.mark.unit
class TestConsoleAdapterJson:
    def test_info_renders_event_and_context(self, capsys):
        # Arrange
        logger = ConsoleAdapter(use_json=True)

        # Act
        logger.info("event_bus_configured", proposal_handlers=3)

        # Assert
        (line,) = _lines(capsys)
        assert line["event"] == "event_bus_configured"
        assert line["level"] == "info"
        assert line["proposal_handlers"] == 3
        assert "timestamp" in line

    def test_error_includes_exception_details(self, capsys):
        # Arrange
        logger = ConsoleAdapter(use_json=True)

        # Act
        logger.error("signature_activity_log_failed", error=RuntimeError("boom"))

        # Assert
        (line,) = _lines(capsys)
        assert line["error_type"] == "RuntimeError"
        assert line["error_message"] == "boom"

    def test_bind_carries_context(self, capsys):
        # Arrange
        logger = ConsoleAdapter(use_json=True).bind(agreement_id="agr-1")

        # Act
        logger.warning("agreement_contract_not_found")

        # Assert
        (line,) = _lines(capsys)
        assert line["agreement_id"] == "agr-1"

    def test_level_filtering(self, capsys):
        # Arrange
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        # Act
        logger.info("dropped")
        logger.warning("kept")

        # Assert
        assert [line["event"] for line in _lines(capsys)] == ["kept"]
