r"""Contains the asynchronous retry entry points."""

from __future__ import annotations

__all__ = ["retry_async", "retry_if_async"]

from typing import TYPE_CHECKING, TypeVar

from tryagain.core.config import RetryConfig
from tryagain.engine.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from tryagain.backoff.base import BaseBackoffStrategy

T = TypeVar("T")


async def retry_async(
    strategy: BaseBackoffStrategy,
    operation: Callable[[], Awaitable[T]],
    *,
    config: RetryConfig | None = None,
    sleep: Callable[[float], Awaitable[None]] | None = None,
) -> T:
    """Await an operation until it succeeds or the backoff strategy
    halts.

    This is the asynchronous counterpart of ``retry``. The operation is
    called again for every attempt and the resulting awaitable is
    awaited; delays are awaited with ``asyncio.sleep``, so the event loop
    keeps running other tasks.

    The engine imposes no deadline. Wrap the call in
    ``asyncio.wait_for`` (or ``asyncio.timeout``) to bound it; the
    cancellation stops the session at its current suspension point.

    Args:
        strategy: The backoff strategy. Use a new instance for every call.
        operation: Zero-argument callable returning an awaitable, usually
            a coroutine function.
        config: Optional retry configuration (retryable exception classes,
            retry_if predicate, callbacks).
        sleep: Optional coroutine function used to wait. Defaults to
            ``asyncio.sleep``.

    Returns:
        The value produced by the first successful attempt.

    Raises:
        RetryExhaustedError: If the strategy halts. The ``error``
            attribute holds the exception of the last attempt.

    Example:
        ```pycon
        >>> import asyncio
        >>> from tryagain import retry_async
        >>> from tryagain.backoff import ImmediateBackoff
        >>> failures = [TimeoutError(), TimeoutError()]
        >>> async def fetch() -> str:
        ...     if failures:
        ...         raise failures.pop()
        ...     return "payload"
        ...
        >>> asyncio.run(retry_async(ImmediateBackoff(), fetch))
        'payload'

        ```
    """
    return await AsyncRetryExecutor(config=config, sleep=sleep).execute(strategy, operation)


async def retry_if_async(
    strategy: BaseBackoffStrategy,
    operation: Callable[[], Awaitable[T]],
    predicate: Callable[[BaseException, int], bool],
    *,
    config: RetryConfig | None = None,
    sleep: Callable[[float], Awaitable[None]] | None = None,
) -> T:
    """Await an operation and retry only the errors accepted by a
    predicate.

    This is the asynchronous counterpart of ``retry_if``. The predicate
    is a plain synchronous callable ``(error, attempt) -> bool``.

    Args:
        strategy: The backoff strategy. Use a new instance for every call.
        operation: Zero-argument callable returning an awaitable.
        predicate: Callable ``(error, attempt) -> bool``.
        config: Optional retry configuration. Its ``retry_if`` field is
            replaced by ``predicate``.
        sleep: Optional coroutine function used to wait. Defaults to
            ``asyncio.sleep``.

    Returns:
        The value produced by the first successful attempt.

    Raises:
        RetryExhaustedError: If the predicate rejects an error or the
            strategy halts.
    """
    config = (config or RetryConfig()).merge(retry_if=predicate)
    return await AsyncRetryExecutor(config=config, sleep=sleep).execute(strategy, operation)
