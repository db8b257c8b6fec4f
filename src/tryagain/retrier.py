r"""Reusable retrier for blocking operations.

A ``Retrier`` keeps a strategy factory and a shared configuration, and
runs a fresh retry session for every call. It is the convenient way to
retry many operations with the same policy, or to decorate a function.
"""

from __future__ import annotations

__all__ = ["Retrier"]

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from tryagain.core.config import RetryConfig
from tryagain.engine.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from tryagain.backoff.base import BaseBackoffStrategy

T = TypeVar("T")


class Retrier:
    r"""Run blocking operations with a shared retry policy.

    A backoff strategy is stateful, so the retrier does not hold one:
    it calls ``strategy_factory`` at the start of every session. Two
    sessions never share a strategy instance, even when they run in
    parallel threads.

    Args:
        strategy_factory: Zero-argument callable building a new backoff
            strategy, for example a strategy class or a
            ``functools.partial`` of one.
        config: Optional RetryConfig instance shared by all sessions.
            If ``None``, a default RetryConfig is used.
        sleep: Optional blocking sleep function. Defaults to ``time.sleep``.

    Example:
        ```pycon
        >>> from functools import partial
        >>> from tryagain import Retrier
        >>> from tryagain.backoff import ConstantBackoff
        >>> retrier = Retrier(partial(ConstantBackoff, delay=0.0, max_attempts=3))
        >>> retrier.call(lambda: "ok")
        'ok'
        >>> @retrier
        ... def add(a: int, b: int) -> int:
        ...     return a + b
        ...
        >>> add(1, 2)
        3

        ```
    """

    def __init__(
        self,
        strategy_factory: Callable[[], BaseBackoffStrategy],
        *,
        config: RetryConfig | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._strategy_factory = strategy_factory
        self._config: RetryConfig = config or RetryConfig()
        self._executor = RetryExecutor(config=self._config, sleep=sleep)

    @property
    def config(self) -> RetryConfig:
        """The configuration shared by all sessions."""
        return self._config

    def new_strategy(self) -> BaseBackoffStrategy:
        """Build the backoff strategy of a new session."""
        return self._strategy_factory()

    def call(self, operation: Callable[[], T]) -> T:
        """Run one retry session.

        Args:
            operation: Zero-argument callable to invoke.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            RetryExhaustedError: If the session's strategy halts.
        """
        return self._executor.execute(self.new_strategy(), operation)

    def __call__(self, func: Callable[..., T]) -> Callable[..., T]:
        """Decorate a function so that every call is retried.

        Args:
            func: The function to decorate. Its arguments are bound once
                per call and reused for every attempt.

        Returns:
            The decorated function.
        """

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return self.call(functools.partial(func, *args, **kwargs))

        return wrapper
