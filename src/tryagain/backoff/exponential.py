r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import math

from tryagain.backoff.base import MAX_BACKOFF_DELAY, AttemptBackoffStrategy
from tryagain.core.validation import (
    validate_delay,
    validate_max_delay,
    validate_multiplier,
)


class ExponentialBackoff(AttemptBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (multiplier ** attempt), with optional
    max_delay cap. Without a cap the delay saturates at
    ``MAX_BACKOFF_DELAY``, so a session that never halts keeps a finite
    delay however many attempts it makes.

    The strategy halts when ``max_attempts`` failed attempts have been
    seen, or, if ``halt_on_max_delay`` is set, as soon as the uncapped
    delay would exceed ``max_delay``.

    Args:
        base_delay: The base delay factor in seconds (default: 0.3).
        multiplier: The growth factor between consecutive delays
            (default: 2.0). Must be >= 1.
        max_delay: Optional maximum delay cap in seconds.
        max_attempts: Optional number of failed attempts after which the
            strategy halts.
        halt_on_max_delay: If ``True``, halt instead of capping once the
            delay grows past ``max_delay``. Requires ``max_delay``.

    Example:
        ```pycon
        >>> from tryagain.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.5)
        >>> backoff.next(ValueError())
        Retry(delay=0.5)
        >>> backoff.next(ValueError())
        Retry(delay=1.0)
        >>> backoff.next(ValueError())
        Retry(delay=2.0)
        >>> # With max_delay cap
        >>> ExponentialBackoff(base_delay=1.0, max_delay=5.0).calculate(10)
        5.0
        >>> # Halting once the cap is reached
        >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=2.0, halt_on_max_delay=True)
        >>> [backoff.next(ValueError()) for _ in range(3)]
        [Retry(delay=1.0), Retry(delay=2.0), Halt()]

        ```
    """

    def __init__(
        self,
        base_delay: float = 0.3,
        multiplier: float = 2.0,
        max_delay: float | None = None,
        max_attempts: int | None = None,
        halt_on_max_delay: bool = False,
    ) -> None:
        validate_delay(base_delay, name="base_delay")
        validate_multiplier(multiplier)
        validate_max_delay(max_delay)
        if halt_on_max_delay and max_delay is None:
            msg = "halt_on_max_delay requires max_delay to be set"
            raise ValueError(msg)
        super().__init__(max_attempts=max_attempts)
        self.base_delay = base_delay
        self.multiplier = multiplier
        self.max_delay = max_delay
        self.halt_on_max_delay = halt_on_max_delay

    def _uncapped(self, attempt: int) -> float:
        if self.base_delay == 0:
            return 0.0
        try:
            return self.base_delay * (self.multiplier**attempt)
        except OverflowError:
            return math.inf

    def _should_halt(self, attempt: int) -> bool:
        if super()._should_halt(attempt):
            return True
        return (
            self.halt_on_max_delay
            and self.max_delay is not None
            and self._uncapped(attempt) > self.max_delay
        )

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The consultation number (0-indexed).

        Returns:
            The calculated delay: base_delay * (multiplier ** attempt),
            capped at max_delay if set, or at MAX_BACKOFF_DELAY otherwise.
        """
        limit = MAX_BACKOFF_DELAY if self.max_delay is None else self.max_delay
        return min(self._uncapped(attempt), limit)
