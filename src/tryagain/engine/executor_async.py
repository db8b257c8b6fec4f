r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that awaits an
operation until it succeeds or its backoff strategy halts, without
blocking the event loop.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import time
from typing import TYPE_CHECKING, TypeVar

from tryagain.core.config import RetryConfig
from tryagain.engine.executor_core import handle_failure, handle_success
from tryagain.engine.manager import CallbackManager

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from tryagain.backoff.base import BaseBackoffStrategy

T = TypeVar("T")


class AsyncRetryExecutor:
    """Executes an asynchronous operation with automatic retry logic.

    Each session runs inside the awaiting task. Attempts are strictly
    sequential and no other task is created, so the strategy and the
    operation are never used concurrently.

    There are two suspension points per attempt: awaiting the operation
    and awaiting the delay. Cancelling the awaiting task at either point
    raises ``asyncio.CancelledError`` out of ``execute`` and no further
    attempt is made.

    Args:
        config: Optional retry configuration. Defaults to ``RetryConfig()``.
        sleep: Optional coroutine function receiving a delay in seconds.
            Defaults to ``asyncio.sleep``.

    Attributes:
        config: Retry configuration.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from tryagain.backoff import ImmediateBackoff
        >>> from tryagain.engine import AsyncRetryExecutor
        >>> async def fetch() -> int:
        ...     return 42
        ...
        >>> asyncio.run(AsyncRetryExecutor().execute(ImmediateBackoff(), fetch))
        42

        ```
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self.config: RetryConfig = config or RetryConfig()
        self.callbacks: CallbackManager = CallbackManager(self.config)
        self._sleep = sleep

    async def execute(
        self, strategy: BaseBackoffStrategy, operation: Callable[[], Awaitable[T]]
    ) -> T:
        """Run a retry session.

        Note:
            The delay is awaited even when it is zero. An operation that
            fails without ever suspending still yields to the event loop
            between attempts, so the session stays cancellable.

        Args:
            strategy: The backoff strategy, used for this session only.
            operation: Zero-argument callable returning an awaitable.

        Returns:
            The value produced by the first successful attempt.

        Raises:
            RetryExhaustedError: If the strategy halts or the retry_if
                predicate rejects an error.
            asyncio.CancelledError: If the awaiting task is cancelled.
            Exception: Any exception not listed in ``config.retry_on``
                propagates unchanged.
        """
        start_time = time.monotonic()
        attempt = 0
        while True:
            self.callbacks.on_attempt(attempt)
            try:
                value = await operation()
            except self.config.retry_on as exc:
                if isinstance(exc, asyncio.CancelledError):
                    raise
                error = exc
            else:
                handle_success(self.callbacks, attempt, value, start_time)
                return value

            delay = handle_failure(
                strategy, self.config, self.callbacks, error, attempt, start_time
            )
            await self._wait(delay)
            attempt += 1

    async def _wait(self, delay: float) -> None:
        if self._sleep is not None:
            await self._sleep(delay)
        else:
            await asyncio.sleep(delay)
