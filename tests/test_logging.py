"""Tests for loguru configuration."""

from __future__ import annotations

import json
from collections.abc import Iterator

import pytest
from loguru import logger

from extratext.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    yield
    logger.remove()


class TestSetupLogging:
    def test_json_lines_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(json_logs=True, log_level="INFO")

        logger.bind(document_id="doc1").info("Formatted {text!r}", text="{curly}")

        captured = capsys.readouterr()
        assert captured.out == ""
        entry = json.loads(captured.err.strip())
        assert entry["severity"] == "INFO"
        assert entry["message"] == "Formatted '{curly}'"
        assert entry["document_id"] == "doc1"

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(json_logs=True, log_level="WARNING")

        logger.info("hidden")
        logger.warning("shown")

        lines = capsys.readouterr().err.strip().splitlines()
        assert [json.loads(line)["message"] for line in lines] == ["shown"]

    def test_dev_format_shows_document(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(json_logs=False, log_level="DEBUG")

        logger.bind(document_id="doc1").debug("Submitting batch")

        err = capsys.readouterr().err
        assert "[doc=doc1]" in err
        assert "Submitting batch" in err
