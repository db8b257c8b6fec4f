r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a blocking
operation until it succeeds or its backoff strategy halts.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import time
from typing import TYPE_CHECKING, TypeVar

from tryagain.core.config import RetryConfig
from tryagain.engine.executor_core import handle_failure, handle_success
from tryagain.engine.manager import CallbackManager

if TYPE_CHECKING:
    from collections.abc import Callable

    from tryagain.backoff.base import BaseBackoffStrategy

T = TypeVar("T")


class RetryExecutor:
    """Executes a blocking operation with automatic retry logic.

    The executor holds no per-session state: the same executor can run
    many sessions, each with its own strategy instance.

    Args:
        config: Optional retry configuration. Defaults to ``RetryConfig()``.
        sleep: Optional blocking sleep function receiving a delay in
            seconds. Defaults to ``time.sleep``.

    Attributes:
        config: Retry configuration.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> from tryagain.backoff import ImmediateBackoff
        >>> from tryagain.engine import RetryExecutor
        >>> executor = RetryExecutor()
        >>> executor.execute(ImmediateBackoff(), lambda: 42)
        42

        ```
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.config: RetryConfig = config or RetryConfig()
        self.callbacks: CallbackManager = CallbackManager(self.config)
        self._sleep = sleep

    def execute(self, strategy: BaseBackoffStrategy, operation: Callable[[], T]) -> T:
        """Run a retry session.

        The operation is invoked until it returns. After every failure
        the strategy is consulted once; the calling thread then sleeps
        for the returned delay (no sleep for a zero delay) or the session
        ends. A strategy that never halts retries an always-failing
        operation forever.

        Args:
            strategy: The backoff strategy, used for this session only.
            operation: Zero-argument callable to invoke.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            RetryExhaustedError: If the strategy halts or the retry_if
                predicate rejects an error.
            Exception: Any exception not listed in ``config.retry_on``
                propagates unchanged.
        """
        start_time = time.monotonic()
        attempt = 0
        while True:
            self.callbacks.on_attempt(attempt)
            try:
                value = operation()
            except self.config.retry_on as exc:
                error = exc
            else:
                handle_success(self.callbacks, attempt, value, start_time)
                return value

            delay = handle_failure(
                strategy, self.config, self.callbacks, error, attempt, start_time
            )
            self._wait(delay)
            attempt += 1

    def _wait(self, delay: float) -> None:
        if delay <= 0:
            return
        if self._sleep is not None:
            self._sleep(delay)
        else:
            time.sleep(delay)
