r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

from tryagain.backoff.base import MAX_BACKOFF_DELAY, AttemptBackoffStrategy
from tryagain.core.validation import validate_delay, validate_max_delay


class FibonacciBackoff(AttemptBackoffStrategy):
    """Fibonacci backoff strategy.

    Calculates delay as: base_delay * fibonacci(attempt + 1), with optional
    max_delay cap. The sequence (1, 1, 2, 3, 5, 8, 13, ...) grows more
    gradually than exponential backoff. Without a cap the delay saturates
    at ``MAX_BACKOFF_DELAY``.

    The last two terms of the sequence are kept between calls, so
    consecutive attempts cost constant time. The terms stop growing once
    the delay reaches its cap.

    Args:
        base_delay: The base delay in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.
        max_attempts: Optional number of failed attempts after which the
            strategy halts.

    Example:
        ```pycon
        >>> from tryagain.backoff import FibonacciBackoff
        >>> backoff = FibonacciBackoff(base_delay=1.0)
        >>> [backoff.calculate(i) for i in range(6)]
        [1.0, 1.0, 2.0, 3.0, 5.0, 8.0]
        >>> FibonacciBackoff(base_delay=1.0, max_delay=10.0).calculate(10)
        10.0

        ```
    """

    def __init__(
        self,
        base_delay: float = 1.0,
        max_delay: float | None = None,
        max_attempts: int | None = None,
    ) -> None:
        validate_delay(base_delay, name="base_delay")
        validate_max_delay(max_delay)
        super().__init__(max_attempts=max_attempts)
        self.base_delay = base_delay
        self.max_delay = max_delay
        self._reset_terms()

    def _reset_terms(self) -> None:
        # fibonacci(index + 1) and fibonacci(index + 2)
        self._index = 0
        self._current = 1
        self._following = 1

    def calculate(self, attempt: int) -> float:
        if self.base_delay == 0:
            return 0.0
        limit = MAX_BACKOFF_DELAY if self.max_delay is None else self.max_delay
        if attempt < self._index:
            self._reset_terms()
        while self._index < attempt and self.base_delay * self._current < limit:
            self._current, self._following = self._following, self._current + self._following
            self._index += 1
        return min(self.base_delay * self._current, limit)
