r"""Shared core logic for retry executors.

Both executors run the same loop and differ only in how they call the
operation and how they wait. The steps that follow an attempt live here
so the two loops stay identical.
"""

from __future__ import annotations

__all__ = ["handle_failure", "handle_success"]

import logging
from typing import TYPE_CHECKING, Any

from tryagain.core.retry_logic import decide
from tryagain.decision import Halt
from tryagain.exceptions import RetryExhaustedError
from tryagain.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from tryagain.backoff.base import BaseBackoffStrategy
    from tryagain.core.config import RetryConfig
    from tryagain.engine.manager import CallbackManager

logger: logging.Logger = logging.getLogger(__name__)


def handle_success(
    callbacks: CallbackManager,
    attempt: int,
    value: Any,
    start_time: float,
) -> None:
    """Record a successful attempt.

    Args:
        callbacks: Callback manager for invoking on_success.
        attempt: The successful attempt number (0-indexed).
        value: The value returned by the operation.
        start_time: Monotonic timestamp of the session start.
    """
    log_structured(
        logger, logging.DEBUG, f"Attempt {attempt + 1} succeeded", attempt=attempt + 1
    )
    callbacks.on_success(attempt, value, start_time)


def handle_failure(
    strategy: BaseBackoffStrategy,
    config: RetryConfig,
    callbacks: CallbackManager,
    error: BaseException,
    attempt: int,
    start_time: float,
) -> float:
    """Process a failed attempt and return the delay before the next one.

    Args:
        strategy: The backoff strategy of the retry session.
        config: Retry configuration containing the retry_if predicate.
        callbacks: Callback manager for invoking on_retry and on_failure.
        error: The exception raised by the failed attempt.
        attempt: The failed attempt number (0-indexed).
        start_time: Monotonic timestamp of the session start.

    Returns:
        The delay in seconds to wait before the next attempt.

    Raises:
        RetryExhaustedError: If the session halts. ``error`` is attached
            and chained as the cause.
    """
    decision = decide(strategy, error, attempt, config.retry_if)
    if isinstance(decision, Halt):
        log_structured(
            logger,
            logging.DEBUG,
            f"Attempt {attempt + 1} failed with {type(error).__name__}, giving up",
            attempt=attempt + 1,
            error_type=type(error).__name__,
        )
        callbacks.on_failure(attempt, error, start_time)
        raise RetryExhaustedError(error) from error

    log_structured(
        logger,
        logging.DEBUG,
        f"Attempt {attempt + 1} failed with {type(error).__name__}, "
        f"retrying in {decision.delay:.2f}s",
        attempt=attempt + 1,
        delay=decision.delay,
        error_type=type(error).__name__,
    )
    callbacks.on_retry(attempt, decision.delay, error)
    return decision.delay
