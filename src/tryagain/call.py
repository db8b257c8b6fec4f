r"""Contains the blocking retry entry points."""

from __future__ import annotations

__all__ = ["retry", "retry_if"]

from typing import TYPE_CHECKING, TypeVar

from tryagain.core.config import RetryConfig
from tryagain.engine.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from tryagain.backoff.base import BaseBackoffStrategy

T = TypeVar("T")


def retry(
    strategy: BaseBackoffStrategy,
    operation: Callable[[], T],
    *,
    config: RetryConfig | None = None,
    sleep: Callable[[float], None] | None = None,
) -> T:
    """Call an operation until it succeeds or the backoff strategy halts.

    The first successful attempt has its value returned to the caller.
    After every failed attempt the strategy decides between waiting and
    retrying, or giving up. The calling thread is blocked while waiting.

    With a strategy that never halts, an operation that never succeeds is
    retried forever. Impose a deadline or an attempt cap in the strategy
    if that is not wanted.

    Args:
        strategy: The backoff strategy. A strategy is stateful: use a new
            instance for every call.
        operation: Zero-argument callable. Use ``functools.partial`` or a
            lambda to bind arguments.
        config: Optional retry configuration (retryable exception classes,
            retry_if predicate, callbacks).
        sleep: Optional blocking sleep function. Defaults to ``time.sleep``.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        RetryExhaustedError: If the strategy halts. The ``error``
            attribute holds the exception of the last attempt.

    Example:
        ```pycon
        >>> from tryagain import retry
        >>> from tryagain.backoff import ConstantBackoff, ImmediateBackoff
        >>> failures = [ConnectionError("down"), ConnectionError("down")]
        >>> def fetch() -> str:
        ...     if failures:
        ...         raise failures.pop()
        ...     return "payload"
        ...
        >>> retry(ImmediateBackoff(), fetch)
        'payload'
        >>> retry(ConstantBackoff(delay=0.0, max_attempts=2), lambda: 1 / 0)
        Traceback (most recent call last):
        ...
        tryagain.exceptions.RetryExhaustedError: operation failed and the backoff strategy halted: ZeroDivisionError: division by zero

        ```
    """
    return RetryExecutor(config=config, sleep=sleep).execute(strategy, operation)


def retry_if(
    strategy: BaseBackoffStrategy,
    operation: Callable[[], T],
    predicate: Callable[[BaseException, int], bool],
    *,
    config: RetryConfig | None = None,
    sleep: Callable[[float], None] | None = None,
) -> T:
    """Call an operation and retry only the errors accepted by a
    predicate.

    Every error of a failed attempt is first passed to ``predicate``
    together with the 1-indexed attempt number. If the predicate returns
    ``False`` the session ends without consulting the strategy;
    otherwise the strategy decides as in ``retry``.

    Args:
        strategy: The backoff strategy. Use a new instance for every call.
        operation: Zero-argument callable.
        predicate: Callable ``(error, attempt) -> bool``.
        config: Optional retry configuration. Its ``retry_if`` field is
            replaced by ``predicate``.
        sleep: Optional blocking sleep function. Defaults to ``time.sleep``.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        RetryExhaustedError: If the predicate rejects an error or the
            strategy halts.

    Example:
        ```pycon
        >>> from tryagain import RetryExhaustedError, retry_if
        >>> from tryagain.backoff import ImmediateBackoff
        >>> class FatalError(Exception):
        ...     pass
        ...
        >>> def operation() -> None:
        ...     raise FatalError("unrecoverable")
        ...
        >>> try:
        ...     retry_if(
        ...         ImmediateBackoff(),
        ...         operation,
        ...         lambda error, attempt: not isinstance(error, FatalError),
        ...     )
        ... except RetryExhaustedError as exc:
        ...     print(repr(exc.error))
        ...
        FatalError('unrecoverable')

        ```
    """
    config = (config or RetryConfig()).merge(retry_if=predicate)
    return RetryExecutor(config=config, sleep=sleep).execute(strategy, operation)
