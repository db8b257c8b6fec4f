r"""Abstract base classes for backoff strategies."""

from __future__ import annotations

__all__ = ["MAX_BACKOFF_DELAY", "AttemptBackoffStrategy", "BaseBackoffStrategy"]

from abc import ABC, abstractmethod

from tryagain.core.validation import validate_max_attempts
from tryagain.decision import HALT, Decision, Retry

# Growing strategies without max_delay saturate at one year.
MAX_BACKOFF_DELAY: float = 365 * 24 * 3600.0


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy is a stateful policy consulted once after every
    failed attempt. It decides whether the operation should be retried,
    and after which delay, or whether the retry session should stop.

    A strategy instance belongs to a single retry session. Create a new
    instance for every session.
    """

    @abstractmethod
    def next(self, error: BaseException) -> Decision:
        """Decide what to do after a failed attempt.

        Args:
            error: The exception raised by the attempt that just failed.

        Returns:
            ``Retry(delay)`` to try again after ``delay`` seconds, or
            ``HALT`` to give up.
        """


class AttemptBackoffStrategy(BaseBackoffStrategy):
    """Base class for strategies whose delay only depends on the number
    of failed attempts.

    Subclasses implement ``calculate``. This class counts the
    consultations, applies the optional attempt cap, and wraps the
    computed delay in a ``Retry`` decision. Once the strategy has halted,
    it keeps returning ``HALT``.

    Args:
        max_attempts: Optional number of failed attempts after which the
            strategy halts. For example, ``max_attempts=3`` returns
            ``HALT`` on the third consultation. ``None`` never halts.
    """

    def __init__(self, max_attempts: int | None = None) -> None:
        validate_max_attempts(max_attempts)
        self.max_attempts = max_attempts
        self._attempts = 0
        self._halted = False

    @property
    def attempts(self) -> int:
        """The number of times the strategy has been consulted."""
        return self._attempts

    @property
    def halted(self) -> bool:
        """``True`` once the strategy has returned ``HALT``."""
        return self._halted

    def next(self, error: BaseException) -> Decision:  # noqa: ARG002
        attempt = self._attempts
        self._attempts += 1
        if self._halted or self._should_halt(attempt):
            self._halted = True
            return HALT
        return Retry(self.calculate(attempt))

    def _should_halt(self, attempt: int) -> bool:
        """Indicate if the strategy halts on this consultation.

        Args:
            attempt: The consultation number (0-indexed).

        Returns:
            ``True`` if the strategy must return ``HALT``.
        """
        return self.max_attempts is not None and attempt + 1 >= self.max_attempts

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay for a given retry attempt.

        Args:
            attempt: The consultation number (0-indexed). For example,
                attempt=0 follows the first failure, attempt=1 the second
                failure, etc.

        Returns:
            The calculated delay in seconds before the next attempt.
        """
