r"""Shared retry decision logic for sync and async operations.

This module contains the decision step shared by the blocking and
asynchronous retry executors. It never sleeps and never invokes the
operation: it only consults the retry_if predicate and the backoff
strategy.
"""

from __future__ import annotations

__all__ = ["decide"]

import logging
from typing import TYPE_CHECKING

from tryagain.decision import HALT, Decision, is_decision

if TYPE_CHECKING:
    from collections.abc import Callable

    from tryagain.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


def decide(
    strategy: BaseBackoffStrategy,
    error: BaseException,
    attempt: int,
    retry_if: Callable[[BaseException, int], bool] | None = None,
) -> Decision:
    """Decide what follows a failed attempt.

    The predicate is evaluated first. If it rejects the error, the
    session halts and the strategy is not consulted. Otherwise the
    strategy is consulted exactly once.

    Args:
        strategy: The backoff strategy of the retry session.
        error: The exception raised by the failed attempt.
        attempt: The failed attempt number (0-indexed).
        retry_if: Optional predicate ``(error, attempt) -> bool``. It
            receives the 1-indexed attempt number.

    Returns:
        The decision: ``Retry(delay)`` or ``HALT``.

    Raises:
        TypeError: If the strategy returns something other than a
            ``Retry`` or ``Halt`` instance.

    Example:
        ```pycon
        >>> from tryagain.backoff import ConstantBackoff
        >>> from tryagain.core.retry_logic import decide
        >>> strategy = ConstantBackoff(delay=1.0, max_attempts=2)
        >>> decide(strategy, ValueError(), attempt=0)
        Retry(delay=1.0)
        >>> decide(strategy, ValueError(), attempt=1)
        Halt()
        >>> decide(ConstantBackoff(), ValueError(), attempt=0, retry_if=lambda e, n: False)
        Halt()

        ```
    """
    if retry_if is not None and not retry_if(error, attempt + 1):
        logger.debug(f"Attempt {attempt + 1} failed with {type(error).__name__} (retry_if returned False)")
        return HALT

    decision = strategy.next(error)
    if not is_decision(decision):
        msg = (
            f"{type(strategy).__name__}.next() must return Retry or Halt, "
            f"got {type(decision).__name__}"
        )
        raise TypeError(msg)
    logger.debug(f"Attempt {attempt + 1} failed with {type(error).__name__}: {decision}")
    return decision
