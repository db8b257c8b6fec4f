r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from tryagain.backoff.base import AttemptBackoffStrategy
from tryagain.core.validation import validate_delay


class ConstantBackoff(AttemptBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay for every retry attempt, regardless of the attempt number.

    Args:
        delay: The fixed delay in seconds to use for all retry attempts (default: 1.0).
        max_attempts: Optional number of failed attempts after which the
            strategy halts.

    Example:
        ```pycon
        >>> from tryagain.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=2.5, max_attempts=3)
        >>> backoff.next(ValueError())
        Retry(delay=2.5)
        >>> backoff.next(ValueError())
        Retry(delay=2.5)
        >>> backoff.next(ValueError())
        Halt()

        ```
    """

    def __init__(self, delay: float = 1.0, max_attempts: int | None = None) -> None:
        validate_delay(delay)
        super().__init__(max_attempts=max_attempts)
        self.delay = delay

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        """Calculate constant backoff delay.

        Args:
            attempt: The consultation number (0-indexed, unused).

        Returns:
            The fixed delay value.
        """
        return self.delay
