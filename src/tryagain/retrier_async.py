r"""Reusable retrier for asynchronous operations."""

from __future__ import annotations

__all__ = ["AsyncRetrier"]

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from tryagain.core.config import RetryConfig
from tryagain.engine.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from tryagain.backoff.base import BaseBackoffStrategy

T = TypeVar("T")


class AsyncRetrier:
    r"""Run asynchronous operations with a shared retry policy.

    This is the asynchronous counterpart of ``Retrier``. Every call builds
    a fresh strategy with ``strategy_factory``, so concurrent tasks using
    the same retrier never share strategy state.

    Args:
        strategy_factory: Zero-argument callable building a new backoff
            strategy.
        config: Optional RetryConfig instance shared by all sessions.
        sleep: Optional coroutine function used to wait. Defaults to
            ``asyncio.sleep``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from tryagain import AsyncRetrier
        >>> from tryagain.backoff import ExponentialBackoff
        >>> retrier = AsyncRetrier(lambda: ExponentialBackoff(max_attempts=5))
        >>> @retrier
        ... async def double(value: int) -> int:
        ...     return value * 2
        ...
        >>> asyncio.run(double(21))
        42

        ```
    """

    def __init__(
        self,
        strategy_factory: Callable[[], BaseBackoffStrategy],
        *,
        config: RetryConfig | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self._strategy_factory = strategy_factory
        self._config: RetryConfig = config or RetryConfig()
        self._executor = AsyncRetryExecutor(config=self._config, sleep=sleep)

    @property
    def config(self) -> RetryConfig:
        """The configuration shared by all sessions."""
        return self._config

    def new_strategy(self) -> BaseBackoffStrategy:
        """Build the backoff strategy of a new session."""
        return self._strategy_factory()

    async def call(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run one retry session.

        Args:
            operation: Zero-argument callable returning an awaitable.

        Returns:
            The value produced by the first successful attempt.

        Raises:
            RetryExhaustedError: If the session's strategy halts.
        """
        return await self._executor.execute(self.new_strategy(), operation)

    def __call__(self, func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        """Decorate a coroutine function so that every call is retried.

        Args:
            func: The coroutine function to decorate.

        Returns:
            The decorated coroutine function.
        """

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            return await self.call(functools.partial(func, *args, **kwargs))

        return wrapper
