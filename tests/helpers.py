r"""Shared test helpers for retry engine tests.

This module contains fake operations and strategies that record how the
engine drives them.
"""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Any

from tryagain.backoff import BaseBackoffStrategy
from tryagain.decision import HALT, Retry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tryagain.decision import Decision


class OperationError(Exception):
    """Error raised by the fake operations, carrying a payload."""

    def __init__(self, payload: Any) -> None:
        super().__init__(payload)
        self.payload = payload


class FlakyOperation:
    """Blocking operation raising a sequence of errors, then returning a
    value.

    Args:
        errors: Exceptions raised by the first attempts, in order.
        value: The value returned once ``errors`` is exhausted.
    """

    def __init__(self, errors: Sequence[BaseException] = (), value: Any = "ok") -> None:
        self._errors = list(errors)
        self.value = value
        self.call_count = 0
        self.call_times: list[float] = []

    def __call__(self) -> Any:
        self.call_count += 1
        self.call_times.append(time.monotonic())
        if self._errors:
            raise self._errors.pop(0)
        return self.value


class AlwaysFailingOperation:
    """Blocking operation that always raises ``OperationError(payload)``."""

    def __init__(self, payload: Any = 0) -> None:
        self.payload = payload
        self.call_count = 0
        self.call_times: list[float] = []

    def __call__(self) -> Any:
        self.call_count += 1
        self.call_times.append(time.monotonic())
        raise OperationError(self.payload)


class AsyncFlakyOperation:
    """Asynchronous operation raising a sequence of errors, then returning
    a value.

    Every attempt suspends for ``duration`` seconds and records its entry
    and exit timestamps.

    Args:
        errors: Exceptions raised by the first attempts, in order.
        value: The value returned once ``errors`` is exhausted.
        duration: Time spent inside each attempt, in seconds.
    """

    def __init__(
        self, errors: Sequence[BaseException] = (), value: Any = "ok", duration: float = 0.0
    ) -> None:
        self._errors = list(errors)
        self.value = value
        self.duration = duration
        self.call_count = 0
        self.intervals: list[tuple[float, float]] = []
        self.active = 0
        self.max_active = 0

    async def __call__(self) -> Any:
        self.call_count += 1
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        start = time.monotonic()
        try:
            await asyncio.sleep(self.duration)
            if self._errors:
                raise self._errors.pop(0)
            return self.value
        finally:
            self.active -= 1
            self.intervals.append((start, time.monotonic()))


class AsyncAlwaysFailingOperation:
    """Asynchronous operation that always raises without suspending."""

    def __init__(self, payload: Any = 0) -> None:
        self.payload = payload
        self.call_count = 0

    async def __call__(self) -> Any:
        self.call_count += 1
        raise OperationError(self.payload)


class ScriptedStrategy(BaseBackoffStrategy):
    """Backoff strategy returning a fixed sequence of decisions and
    recording the errors it receives.

    Once the script is exhausted it keeps returning ``HALT``.
    """

    def __init__(self, decisions: Sequence[Decision]) -> None:
        self._decisions = list(decisions)
        self.errors: list[BaseException] = []

    @property
    def call_count(self) -> int:
        return len(self.errors)

    def next(self, error: BaseException) -> Decision:
        self.errors.append(error)
        if self._decisions:
            return self._decisions.pop(0)
        return HALT


def halt_on(n: int, delay: float = 0.0) -> ScriptedStrategy:
    """Create a strategy returning ``Retry(delay)`` n-1 times, then
    ``HALT`` on its n-th consultation."""
    return ScriptedStrategy([Retry(delay)] * (n - 1) + [HALT])
