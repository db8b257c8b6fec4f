r"""Callback manager for orchestrating retry lifecycle events."""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING, Any

from tryagain.callbacks import (
    invoke_on_attempt,
    invoke_on_failure,
    invoke_on_retry,
    invoke_on_success,
)

if TYPE_CHECKING:
    from tryagain.core.config import RetryConfig


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Attempt numbers are received 0-indexed and forwarded 1-indexed to
    the user callbacks.

    Args:
        config: Retry configuration holding the callback functions.
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config

    def on_attempt(self, attempt: int) -> None:
        """Invoke on_attempt callback.

        Args:
            attempt: Current attempt number (0-indexed).
        """
        invoke_on_attempt(self.config.on_attempt, attempt=attempt)

    def on_retry(self, attempt: int, sleep_time: float, error: BaseException) -> None:
        """Invoke on_retry callback.

        Args:
            attempt: Failed attempt number (0-indexed).
            sleep_time: Delay before the next attempt.
            error: Exception raised by the failed attempt.
        """
        invoke_on_retry(self.config.on_retry, attempt=attempt, sleep_time=sleep_time, error=error)

    def on_success(self, attempt: int, value: Any, start_time: float) -> None:
        """Invoke on_success callback.

        Args:
            attempt: Successful attempt number (0-indexed).
            value: Value returned by the operation.
            start_time: Monotonic timestamp of the session start.
        """
        invoke_on_success(
            self.config.on_success, attempt=attempt, value=value, start_time=start_time
        )

    def on_failure(self, attempt: int, error: BaseException, start_time: float) -> None:
        """Invoke on_failure callback.

        Args:
            attempt: Final attempt number (0-indexed).
            error: Exception raised by the final attempt.
            start_time: Monotonic timestamp of the session start.
        """
        invoke_on_failure(
            self.config.on_failure, attempt=attempt, error=error, start_time=start_time
        )
