r"""Define the exceptions raised by the retry engine."""

from __future__ import annotations

__all__ = ["RetryError", "RetryExhaustedError"]


class RetryError(Exception):
    """Base class for errors raised by ``tryagain``."""


class RetryExhaustedError(RetryError):
    """Raised when the backoff strategy halts a retry session.

    Only the error of the attempt that triggered the halt is kept; no
    history of earlier attempts is aggregated. The same error is also
    chained as ``__cause__``.

    Args:
        error: The exception raised by the last failed attempt.
        message: Optional error message. A default message derived from
            ``error`` is used if omitted.

    Attributes:
        error: The exception raised by the last failed attempt.

    Example:
        ```pycon
        >>> from tryagain.exceptions import RetryExhaustedError
        >>> exc = RetryExhaustedError(ValueError("boom"))
        >>> exc.error
        ValueError('boom')
        >>> str(exc)
        'operation failed and the backoff strategy halted: ValueError: boom'

        ```
    """

    def __init__(self, error: BaseException, message: str | None = None) -> None:
        if message is None:
            message = (
                f"operation failed and the backoff strategy halted: "
                f"{type(error).__name__}: {error}"
            )
        super().__init__(message)
        self.error = error
