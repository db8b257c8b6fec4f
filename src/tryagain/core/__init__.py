r"""Core logic shared by the blocking and asynchronous retry engines,
including configuration, validation, and the retry decision step."""

from __future__ import annotations

__all__ = [
    "DEFAULT_RETRY_ON",
    "RetryConfig",
    "decide",
    "validate_delay",
    "validate_max_attempts",
    "validate_max_delay",
    "validate_multiplier",
    "validate_retry_on",
]

from tryagain.core.config import DEFAULT_RETRY_ON, RetryConfig
from tryagain.core.retry_logic import decide
from tryagain.core.validation import (
    validate_delay,
    validate_max_attempts,
    validate_max_delay,
    validate_multiplier,
    validate_retry_on,
)
