r"""Parameter validation utilities for backoff strategies and retry
configuration.

This module provides validation functions to ensure parameters meet the
required constraints before being used by the retry engine.
"""

from __future__ import annotations

__all__ = [
    "validate_delay",
    "validate_max_attempts",
    "validate_max_delay",
    "validate_multiplier",
    "validate_retry_on",
]

import math
from typing import Any


def validate_delay(delay: float, name: str = "delay") -> None:
    """Validate a delay expressed in seconds.

    Args:
        delay: The delay to validate. Must be finite and >= 0.
        name: The parameter name used in the error message.

    Raises:
        ValueError: If ``delay`` is negative or not finite.

    Example:
        ```pycon
        >>> from tryagain.core.validation import validate_delay
        >>> validate_delay(0.0)
        >>> validate_delay(2.5, name="base_delay")
        >>> validate_delay(-1.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: delay must be non-negative, got -1.0

        ```
    """
    if not math.isfinite(delay):
        msg = f"{name} must be finite, got {delay}"
        raise ValueError(msg)
    if delay < 0:
        msg = f"{name} must be non-negative, got {delay}"
        raise ValueError(msg)


def validate_max_delay(max_delay: float | None) -> None:
    """Validate an optional maximum delay cap.

    Args:
        max_delay: The delay cap in seconds, or ``None`` for no cap.
            Must be finite and > 0 if provided.

    Raises:
        ValueError: If ``max_delay`` is non-positive or not finite.
    """
    if max_delay is not None and not math.isfinite(max_delay):
        msg = f"max_delay must be finite if specified, got {max_delay}"
        raise ValueError(msg)
    if max_delay is not None and max_delay <= 0:
        msg = f"max_delay must be positive if specified, got {max_delay}"
        raise ValueError(msg)


def validate_max_attempts(max_attempts: int | None) -> None:
    """Validate an optional attempt cap.

    Args:
        max_attempts: The number of failed attempts after which a
            strategy halts, or ``None`` to never halt. Must be >= 1 if
            provided.

    Raises:
        ValueError: If ``max_attempts`` is lower than 1.

    Example:
        ```pycon
        >>> from tryagain.core.validation import validate_max_attempts
        >>> validate_max_attempts(None)
        >>> validate_max_attempts(3)

        ```
    """
    if max_attempts is not None and max_attempts < 1:
        msg = f"max_attempts must be >= 1 if specified, got {max_attempts}"
        raise ValueError(msg)


def validate_multiplier(multiplier: float) -> None:
    """Validate the growth factor of an exponential strategy.

    Args:
        multiplier: The growth factor. Must be >= 1.

    Raises:
        ValueError: If ``multiplier`` is lower than 1.
    """
    if multiplier < 1:
        msg = f"multiplier must be >= 1, got {multiplier}"
        raise ValueError(msg)


def validate_retry_on(retry_on: Any) -> None:
    """Validate the exception classes that count as failed attempts.

    Args:
        retry_on: A non-empty tuple of exception classes.

    Raises:
        ValueError: If ``retry_on`` is not a non-empty tuple of
            ``BaseException`` subclasses.

    Example:
        ```pycon
        >>> from tryagain.core.validation import validate_retry_on
        >>> validate_retry_on((ValueError, OSError))
        >>> validate_retry_on(())  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: retry_on must contain at least one exception class

        ```
    """
    if not isinstance(retry_on, tuple):
        msg = f"retry_on must be a tuple of exception classes, got {type(retry_on).__name__}"
        raise ValueError(msg)
    if not retry_on:
        msg = "retry_on must contain at least one exception class"
        raise ValueError(msg)
    for cls in retry_on:
        if not (isinstance(cls, type) and issubclass(cls, BaseException)):
            msg = f"retry_on must only contain exception classes, got {cls!r}"
            raise ValueError(msg)
