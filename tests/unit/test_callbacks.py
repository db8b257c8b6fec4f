r"""Unit tests for callback data structures and invocation helpers."""

from __future__ import annotations

from unittest.mock import Mock, patch

from tryagain.callbacks import (
    AttemptInfo,
    FailureInfo,
    RetryInfo,
    SuccessInfo,
    invoke_on_attempt,
    invoke_on_failure,
    invoke_on_retry,
    invoke_on_success,
)


def test_invoke_on_attempt(mock_callback: Mock) -> None:
    """Test that attempts are forwarded 1-indexed."""
    invoke_on_attempt(mock_callback, attempt=0)
    mock_callback.assert_called_once_with(AttemptInfo(attempt=1))


def test_invoke_on_attempt_none() -> None:
    invoke_on_attempt(None, attempt=0)


def test_invoke_on_retry(mock_callback: Mock) -> None:
    error = ValueError()
    invoke_on_retry(mock_callback, attempt=1, sleep_time=0.5, error=error)
    mock_callback.assert_called_once_with(RetryInfo(attempt=2, wait_time=0.5, error=error))


def test_invoke_on_retry_none() -> None:
    invoke_on_retry(None, attempt=1, sleep_time=0.5, error=ValueError())


def test_invoke_on_success(mock_callback: Mock) -> None:
    with patch("tryagain.callbacks.time.monotonic", return_value=12.0):
        invoke_on_success(mock_callback, attempt=2, value="ok", start_time=10.0)
    mock_callback.assert_called_once_with(SuccessInfo(attempt=3, value="ok", total_time=2.0))


def test_invoke_on_success_none() -> None:
    invoke_on_success(None, attempt=0, value=None, start_time=0.0)


def test_invoke_on_failure(mock_callback: Mock) -> None:
    error = OSError()
    with patch("tryagain.callbacks.time.monotonic", return_value=5.5):
        invoke_on_failure(mock_callback, attempt=0, error=error, start_time=5.0)
    mock_callback.assert_called_once_with(FailureInfo(attempt=1, error=error, total_time=0.5))


def test_invoke_on_failure_none() -> None:
    invoke_on_failure(None, attempt=0, error=OSError(), start_time=0.0)
