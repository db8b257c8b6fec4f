r"""tryagain - Retry fallible operations with pluggable backoff
strategies.

This package repeatedly invokes an operation until it succeeds, its
backoff strategy gives up, or the caller cancels. The same algorithm is
available for blocking code and for asyncio code.

Key Features:
    - Blocking (``retry``) and asyncio (``retry_async``) entry points
    - Backoff strategies: Immediate, Constant, Linear, Fibonacci, Exponential, and custom
    - Strategies decide per failure: ``Retry(delay)`` or ``Halt``
    - Optional ``retry_if`` predicate and retryable exception classes
    - Callback system for observability (logging, metrics, alerting)
    - Reusable retriers and decorators running one fresh session per call

Example:
    ```pycon
    >>> from tryagain import retry
    >>> from tryagain.backoff import ExponentialBackoff
    >>> def fetch() -> str:
    ...     return "payload"
    ...
    >>> retry(ExponentialBackoff(base_delay=0.1, max_attempts=5), fetch)
    'payload'

    ```
"""

from __future__ import annotations

__all__ = [
    "HALT",
    "AsyncRetrier",
    "BaseBackoffStrategy",
    "Decision",
    "Halt",
    "Retrier",
    "Retry",
    "RetryConfig",
    "RetryError",
    "RetryExhaustedError",
    "__version__",
    "retry",
    "retry_async",
    "retry_if",
    "retry_if_async",
]

from importlib.metadata import PackageNotFoundError, version

from tryagain.backoff import BaseBackoffStrategy
from tryagain.call import retry, retry_if
from tryagain.call_async import retry_async, retry_if_async
from tryagain.core.config import RetryConfig
from tryagain.decision import HALT, Decision, Halt, Retry
from tryagain.exceptions import RetryError, RetryExhaustedError
from tryagain.retrier import Retrier
from tryagain.retrier_async import AsyncRetrier

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
