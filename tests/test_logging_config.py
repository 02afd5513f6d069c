"""Tests for logging setup."""

import io
import sys

import pytest

from relay.logging_config import FILE_SINKS, get_logger, preview_text, setup_logging


@pytest.fixture
def reset_logging():
    """Put the console-only configuration back after a test."""
    yield
    setup_logging(level="INFO", enable_file=False)


class TestSetupLogging:
    def test_file_sinks_created(self, tmp_path, reset_logging) -> None:
        log_dir = tmp_path / "nested" / "logs"

        setup_logging(level="INFO", log_dir=str(log_dir), enable_file=True)
        get_logger("relay.test").error("call c1 failed")

        for sink in FILE_SINKS:
            assert list(log_dir.glob(f"{sink.stem}_*.log")), sink.stem

        setup_logging(level="INFO", enable_file=False)
        errors = next(log_dir.glob("errors_*.log")).read_text()
        assert "call c1 failed" in errors
        assert "Logging initialized" not in errors

    def test_level_filters_debug(self, monkeypatch, reset_logging) -> None:
        stream = io.StringIO()
        monkeypatch.setattr(sys, "stderr", stream)

        setup_logging(level="INFO", enable_file=False)
        get_logger("relay.test").debug("hola doctor")
        monkeypatch.undo()

        assert "hola doctor" not in stream.getvalue()


class TestPreviewText:
    def test_short_text_unchanged(self) -> None:
        assert preview_text("hola doctor") == "hola doctor"

    def test_whitespace_collapsed(self) -> None:
        assert preview_text("  hola \n doctor  ") == "hola doctor"

    def test_long_text_truncated(self) -> None:
        text = "a" * 200

        preview = preview_text(text, limit=10)

        assert preview == "aaaaaaaaaa... (200 chars)"

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty(self, text) -> None:
        assert preview_text(text) == ""
