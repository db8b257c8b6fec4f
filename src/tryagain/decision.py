r"""Decision values returned by backoff strategies.

A backoff strategy answers every failed attempt with either
``Retry(delay)`` (wait ``delay`` seconds, then try again) or ``Halt``
(give up permanently).
"""

from __future__ import annotations

__all__ = ["HALT", "Decision", "Halt", "Retry", "is_decision"]

import math
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Retry:
    """Wait ``delay`` seconds and invoke the operation again.

    Args:
        delay: The delay in seconds. Must be finite and non-negative. A delay of
            zero means the next attempt starts without waiting.

    Example:
        ```pycon
        >>> from tryagain.decision import Retry
        >>> Retry(1.5)
        Retry(delay=1.5)
        >>> Retry(0.0).delay
        0.0

        ```
    """

    delay: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.delay):
            msg = f"delay must be finite, got {self.delay}"
            raise ValueError(msg)
        if self.delay < 0:
            msg = f"delay must be non-negative, got {self.delay}"
            raise ValueError(msg)


@dataclass(frozen=True)
class Halt:
    """Stop retrying and surface the last error.

    ``HALT`` is the shared instance; all ``Halt`` instances compare equal.
    """


HALT = Halt()

Decision = Union[Retry, Halt]


def is_decision(value: Any) -> bool:
    """Indicate if a value is a valid backoff decision.

    Args:
        value: The value to check.

    Returns:
        ``True`` if ``value`` is a ``Retry`` or ``Halt`` instance.

    Example:
        ```pycon
        >>> from tryagain.decision import HALT, Retry, is_decision
        >>> is_decision(Retry(1.0))
        True
        >>> is_decision(HALT)
        True
        >>> is_decision(1.0)
        False

        ```
    """
    return isinstance(value, (Retry, Halt))
