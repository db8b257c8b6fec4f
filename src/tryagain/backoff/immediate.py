r"""Immediate backoff strategy."""

from __future__ import annotations

__all__ = ["ImmediateBackoff"]

from tryagain.backoff.base import AttemptBackoffStrategy


class ImmediateBackoff(AttemptBackoffStrategy):
    """Immediate backoff strategy.

    Retries right away after every failure, without any delay.

    Without ``max_attempts`` this strategy never halts: retrying an
    operation that always fails loops forever unless the caller imposes
    a deadline.

    Args:
        max_attempts: Optional number of failed attempts after which the
            strategy halts.

    Example:
        ```pycon
        >>> from tryagain.backoff import ImmediateBackoff
        >>> backoff = ImmediateBackoff()
        >>> backoff.next(ValueError())
        Retry(delay=0.0)
        >>> backoff = ImmediateBackoff(max_attempts=1)
        >>> backoff.next(ValueError())
        Halt()

        ```
    """

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        """Return a zero delay.

        Args:
            attempt: The consultation number (0-indexed, unused).

        Returns:
            ``0.0``.
        """
        return 0.0
