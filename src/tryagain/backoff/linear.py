r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from tryagain.backoff.base import AttemptBackoffStrategy
from tryagain.core.validation import validate_delay, validate_max_delay


class LinearBackoff(AttemptBackoffStrategy):
    """Linear backoff strategy.

    Calculates delay as: base_delay * (attempt + 1), with optional max_delay cap.

    Args:
        base_delay: The base delay in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.
        max_attempts: Optional number of failed attempts after which the
            strategy halts.

    Example:
        ```pycon
        >>> from tryagain.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=1.0)
        >>> backoff.calculate(0)
        1.0
        >>> backoff.calculate(2)
        3.0
        >>> LinearBackoff(base_delay=2.0, max_delay=5.0).calculate(5)
        5.0

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

    def calculate(self, attempt: int) -> float:
        delay = self.base_delay * (attempt + 1)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
