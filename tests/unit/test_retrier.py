r"""Unit tests for the blocking Retrier."""

from __future__ import annotations

from functools import partial
from unittest.mock import Mock

import pytest

from tests.helpers import AlwaysFailingOperation, FlakyOperation, OperationError
from tryagain import Retrier, RetryConfig, RetryExhaustedError
from tryagain.backoff import ConstantBackoff, ExponentialBackoff


def test_retrier_default_config() -> None:
    retrier = Retrier(ConstantBackoff)
    assert retrier.config == RetryConfig()


def test_retrier_config() -> None:
    config = RetryConfig(retry_on=(OSError,))
    assert Retrier(ConstantBackoff, config=config).config is config


def test_retrier_new_strategy_is_fresh() -> None:
    retrier = Retrier(partial(ExponentialBackoff, base_delay=1.0))
    first = retrier.new_strategy()
    second = retrier.new_strategy()
    assert first is not second
    assert isinstance(first, ExponentialBackoff)


def test_retrier_call(mock_sleep: Mock) -> None:
    retrier = Retrier(partial(ConstantBackoff, delay=0.0, max_attempts=3))
    assert retrier.call(FlakyOperation([OperationError(1)], value=5)) == 5


def test_retrier_sessions_do_not_share_strategy_state(mock_sleep: Mock) -> None:
    """Test that each session starts with a fresh strategy."""
    retrier = Retrier(partial(ConstantBackoff, delay=0.0, max_attempts=3))

    first = AlwaysFailingOperation()
    with pytest.raises(RetryExhaustedError):
        retrier.call(first)
    second = AlwaysFailingOperation()
    with pytest.raises(RetryExhaustedError):
        retrier.call(second)

    assert first.call_count == 3
    assert second.call_count == 3


def test_retrier_decorator(mock_sleep: Mock) -> None:
    retrier = Retrier(partial(ConstantBackoff, delay=0.0, max_attempts=5))
    failures = [OperationError(1), OperationError(2)]

    @retrier
    def add(a: int, b: int) -> int:
        """Add two numbers."""
        if failures:
            raise failures.pop(0)
        return a + b

    assert add(1, b=2) == 3
    assert add.__name__ == "add"
    assert add.__doc__ == "Add two numbers."


def test_retrier_uses_sleep() -> None:
    sleep = Mock()
    retrier = Retrier(partial(ConstantBackoff, delay=2.0), sleep=sleep)
    retrier.call(FlakyOperation([OperationError(1)]))
    sleep.assert_called_once_with(2.0)
