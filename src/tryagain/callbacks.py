r"""Callback types and data structures for observability.

This module lets users hook into the retry lifecycle for logging,
metrics, or alerting.

The callback system provides four lifecycle hooks:
- on_attempt: Called before each attempt
- on_retry: Called after a failed attempt, before the backoff delay
- on_success: Called when an attempt succeeds
- on_failure: Called when the retry session halts

Example:
    ```pycon
    >>> from tryagain import retry
    >>> from tryagain.backoff import ImmediateBackoff
    >>> from tryagain.callbacks import RetryInfo
    >>> from tryagain.core import RetryConfig
    >>> def log_retry(retry_info: RetryInfo) -> None:
    ...     print(f"Attempt {retry_info.attempt} failed, retrying in {retry_info.wait_time}s")
    ...
    >>> calls = iter([ValueError("boom"), None])
    >>> def operation() -> str:
    ...     error = next(calls)
    ...     if error is not None:
    ...         raise error
    ...     return "done"
    ...
    >>> retry(ImmediateBackoff(), operation, config=RetryConfig(on_retry=log_retry))
    Attempt 1 failed, retrying in 0.0s
    'done'

    ```
"""

from __future__ import annotations

__all__ = [
    "AttemptInfo",
    "FailureInfo",
    "RetryInfo",
    "SuccessInfo",
    "invoke_on_attempt",
    "invoke_on_failure",
    "invoke_on_retry",
    "invoke_on_success",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class AttemptInfo:
    """Information passed to on_attempt callback.

    Attributes:
        attempt: The attempt about to start (1-indexed). First attempt is 1.
    """

    attempt: int


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        attempt: The attempt that just failed (1-indexed).
        wait_time: The delay in seconds before the next attempt.
        error: The exception raised by the failed attempt.
    """

    attempt: int
    wait_time: float
    error: BaseException


@dataclass
class SuccessInfo:
    """Information passed to on_success callback.

    Attributes:
        attempt: The attempt that succeeded (1-indexed).
        value: The value returned by the operation.
        total_time: Total time spent on all attempts including delays (seconds).
    """

    attempt: int
    value: Any
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        attempt: The final attempt number (1-indexed).
        error: The exception raised by the final attempt.
        total_time: Total time spent on all attempts including delays (seconds).
    """

    attempt: int
    error: BaseException
    total_time: float


def invoke_on_attempt(
    on_attempt: Callable[[AttemptInfo], None] | None,
    *,
    attempt: int,
) -> None:
    """Invoke on_attempt callback if provided.

    Args:
        on_attempt: Optional callback to invoke before each attempt.
        attempt: The current attempt number (0-indexed internally). The
            callback receives this as a 1-indexed value (attempt + 1).
    """
    if on_attempt is not None:
        on_attempt(AttemptInfo(attempt=attempt + 1))


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    attempt: int,
    sleep_time: float,
    error: BaseException,
) -> None:
    """Invoke on_retry callback if provided.

    Args:
        on_retry: Optional callback to invoke before each delay.
        attempt: The failed attempt number (0-indexed internally). The
            callback receives this as a 1-indexed value (attempt + 1).
        sleep_time: The delay in seconds before the next attempt.
        error: The exception raised by the failed attempt.
    """
    if on_retry is not None:
        on_retry(RetryInfo(attempt=attempt + 1, wait_time=sleep_time, error=error))


def invoke_on_success(
    on_success: Callable[[SuccessInfo], None] | None,
    *,
    attempt: int,
    value: Any,
    start_time: float,
) -> None:
    """Invoke on_success callback if provided.

    Args:
        on_success: Optional callback to invoke when an attempt succeeds.
        attempt: The successful attempt number (0-indexed internally).
        value: The value returned by the operation.
        start_time: The ``time.monotonic()`` timestamp of the session start.
    """
    if on_success is not None:
        on_success(
            SuccessInfo(
                attempt=attempt + 1,
                value=value,
                total_time=time.monotonic() - start_time,
            )
        )


def invoke_on_failure(
    on_failure: Callable[[FailureInfo], None] | None,
    *,
    attempt: int,
    error: BaseException,
    start_time: float,
) -> None:
    """Invoke on_failure callback if provided.

    Args:
        on_failure: Optional callback to invoke when the session halts.
        attempt: The final attempt number (0-indexed internally).
        error: The exception raised by the final attempt.
        start_time: The ``time.monotonic()`` timestamp of the session start.
    """
    if on_failure is not None:
        on_failure(
            FailureInfo(
                attempt=attempt + 1,
                error=error,
                total_time=time.monotonic() - start_time,
            )
        )
