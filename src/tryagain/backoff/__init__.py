r"""Backoff strategies deciding the delay between retry attempts.

This package provides the strategy interface and the immediate,
constant, linear, Fibonacci, and exponential backoff strategies.
"""

from __future__ import annotations

__all__ = [
    "MAX_BACKOFF_DELAY",
    "AttemptBackoffStrategy",
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "ImmediateBackoff",
    "LinearBackoff",
]

from tryagain.backoff.base import (
    MAX_BACKOFF_DELAY,
    AttemptBackoffStrategy,
    BaseBackoffStrategy,
)
from tryagain.backoff.constant import ConstantBackoff
from tryagain.backoff.exponential import ExponentialBackoff
from tryagain.backoff.fibonacci import FibonacciBackoff
from tryagain.backoff.immediate import ImmediateBackoff
from tryagain.backoff.linear import LinearBackoff
