"""Tests for error handling utilities."""

import logging
import pytest
from unittest.mock import patch

from utils import error_handling
from utils.error_handling import (
    format_error_message,
    log_exception,
    safe_operation,
    timed,
)


class TestFormatErrorMessage:
    """Tests for format_error_message function."""

    def test_basic_error_message(self):
        error = ValueError("Invalid value")
        assert format_error_message(error) == "ValueError: Invalid value"

    def test_with_context(self):
        error = ValueError("Invalid value")
        result = format_error_message(error, context="Exporting proctors")
        assert result == "Exporting proctors - ValueError: Invalid value"

    def test_without_type(self):
        error = ValueError("Invalid value")
        assert format_error_message(error, include_type=False) == "Invalid value"

    def test_context_and_no_type(self):
        error = ValueError("Invalid value")
        result = format_error_message(error, context="Error loading proctor", include_type=False)
        assert result == "Error loading proctor - Invalid value"

    def test_empty_error_message(self):
        assert format_error_message(ValueError("")) == "ValueError"

    def test_none_error_message(self):
        assert format_error_message(Exception("None")) == "Exception"


class TestLogException:
    """Tests for log_exception function."""

    def test_logs_error_with_context(self):
        error = ValueError("Test error")

        with patch("utils.error_handling.logger") as mock_logger:
            log_exception(error, "Test context")

            mock_logger.log.assert_called_once()
            call_args = mock_logger.log.call_args
            assert call_args[0][0] == logging.ERROR
            assert "Test context" in call_args[0][1]
            assert "Test error" in call_args[0][1]
            assert call_args[1]["exc_info"] is True

    def test_logs_with_extra_context(self):
        error = ValueError("Test error")

        with patch("utils.error_handling.logger") as mock_logger:
            log_exception(error, "Test context", extra={"file_path": "/tmp/out.xlsx"})

            extra = mock_logger.log.call_args[1]["extra"]
            assert extra["file_path"] == "/tmp/out.xlsx"
            assert extra["event"] == "error"

    def test_logs_with_custom_level(self):
        with patch("utils.error_handling.logger") as mock_logger:
            log_exception(ValueError("x"), "Test context", level=logging.WARNING)

            assert mock_logger.log.call_args[0][0] == logging.WARNING

    def test_includes_error_type_in_extra(self):
        with patch("utils.error_handling.logger") as mock_logger:
            log_exception(KeyError("missing_key"), "Test context")

            assert mock_logger.log.call_args[1]["extra"]["error_type"] == "KeyError"


class TestSafeOperation:
    """Tests for safe_operation function."""

    def test_returns_operation_result_on_success(self):
        assert safe_operation(lambda: 42, "Test operation") == 42

    def test_returns_default_on_error(self):
        assert safe_operation(lambda: 1 / 0, "Division operation", default="error") == "error"

    def test_returns_none_by_default_on_error(self):
        assert safe_operation(lambda: 1 / 0, "Division operation") is None

    def test_logs_at_warning_level(self):
        with patch("utils.error_handling.log_exception") as mock_log:
            safe_operation(lambda: 1 / 0, "Division operation")

            mock_log.assert_called_once()
            assert mock_log.call_args[1]["level"] == logging.WARNING

    def test_reraises_exception_when_requested(self):
        with patch("utils.error_handling.log_exception") as mock_log:
            with pytest.raises(ZeroDivisionError):
                safe_operation(lambda: 1 / 0, "Division operation", reraise=True)
            mock_log.assert_called_once()


class TestTimed:
    """Tests for the timed decorator."""

    def test_passthrough_when_disabled(self, monkeypatch):
        monkeypatch.setattr(error_handling, "PERF_DEBUG", False)

        @timed
        def add(a, b):
            return a + b

        with patch("utils.error_handling.logger") as mock_logger:
            assert add(2, 3) == 5
            mock_logger.debug.assert_not_called()

    def test_logs_duration_when_enabled(self, monkeypatch):
        monkeypatch.setattr(error_handling, "PERF_DEBUG", True)

        @timed
        def add(a, b):
            return a + b

        with patch("utils.error_handling.logger") as mock_logger:
            assert add(2, 3) == 5
            message = mock_logger.debug.call_args[0][0]
            assert message.startswith("PERF:")
            assert "add took" in message

    def test_logs_failure_and_reraises(self, monkeypatch):
        monkeypatch.setattr(error_handling, "PERF_DEBUG", True)

        @timed
        def fail():
            raise RuntimeError("boom")

        with patch("utils.error_handling.logger") as mock_logger:
            with pytest.raises(RuntimeError):
                fail()
            assert "failed after" in mock_logger.debug.call_args[0][0]

    def test_preserves_function_name(self):
        @timed
        def seed_samples():
            return 0

        assert seed_samples.__name__ == "seed_samples"
