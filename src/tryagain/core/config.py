r"""Configuration dataclass and defaults for retry sessions.

This module provides the default configuration constants and a
dataclass-based configuration object shared by the blocking and
asynchronous retry engines.
"""

from __future__ import annotations

__all__ = ["DEFAULT_RETRY_ON", "RetryConfig"]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from tryagain.core.validation import validate_retry_on

if TYPE_CHECKING:
    from collections.abc import Callable

    from tryagain.callbacks import AttemptInfo, FailureInfo, RetryInfo, SuccessInfo


# Exception classes that count as failed attempts by default
# BaseException subclasses such as KeyboardInterrupt, SystemExit and
# asyncio.CancelledError always propagate
DEFAULT_RETRY_ON: tuple[type[BaseException], ...] = (Exception,)


@dataclass
class RetryConfig:
    """Configuration for retry session behavior.

    The backoff strategy is not part of the configuration: a strategy is
    stateful and belongs to exactly one retry session, while a
    configuration can be shared by many sessions.

    Args:
        retry_on: Tuple of exception classes treated as failed attempts.
            Other exceptions propagate without consulting the strategy.
        retry_if: Optional predicate ``(error, attempt) -> bool`` evaluated
            before the strategy. ``attempt`` is the 1-indexed number of
            the failed attempt. Returning ``False`` ends the session.
        on_attempt: Optional callback called before each attempt.
        on_retry: Optional callback called before each backoff delay.
        on_success: Optional callback called when an attempt succeeds.
        on_failure: Optional callback called when the session halts.

    Example:
        ```pycon
        >>> from tryagain.core.config import RetryConfig
        >>> config = RetryConfig()  # Use defaults
        >>> config.retry_on
        (<class 'Exception'>,)
        >>> config = RetryConfig(retry_on=(OSError,))
        >>> merged = config.merge(retry_on=(OSError, TimeoutError))
        >>> merged.retry_on
        (<class 'OSError'>, <class 'TimeoutError'>)
        >>> config.retry_on  # Original unchanged
        (<class 'OSError'>,)

        ```
    """

    retry_on: tuple[type[BaseException], ...] = field(default_factory=lambda: DEFAULT_RETRY_ON)
    retry_if: Callable[[BaseException, int], bool] | None = None
    on_attempt: Callable[[AttemptInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[SuccessInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_retry_on(self.retry_on)

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the retry configuration parameters.

        Example:
            ```pycon
            >>> from tryagain.core.config import RetryConfig
            >>> params = RetryConfig().to_dict()
            >>> sorted(params)
            ['on_attempt', 'on_failure', 'on_retry', 'on_success', 'retry_if', 'retry_on']

            ```
        """
        return {
            "retry_on": self.retry_on,
            "retry_if": self.retry_if,
            "on_attempt": self.on_attempt,
            "on_retry": self.on_retry,
            "on_success": self.on_success,
            "on_failure": self.on_failure,
        }
