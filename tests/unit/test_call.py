r"""Unit tests for the blocking retry entry points."""

from __future__ import annotations

from functools import partial
from unittest.mock import Mock, call

import pytest

from tests.helpers import AlwaysFailingOperation, FlakyOperation, OperationError, halt_on
from tryagain import RetryConfig, RetryExhaustedError, retry, retry_if
from tryagain.backoff import ConstantBackoff, ImmediateBackoff, LinearBackoff


def test_retry_success(mock_sleep: Mock) -> None:
    assert retry(ImmediateBackoff(), lambda: "value") == "value"


def test_retry_returns_none_value(mock_sleep: Mock) -> None:
    """Test that a None result counts as success."""
    operation = Mock(return_value=None)
    assert retry(ImmediateBackoff(), operation) is None
    operation.assert_called_once()


def test_retry_with_partial(mock_sleep: Mock) -> None:
    def divide(a: int, b: int) -> float:
        return a / b

    assert retry(ImmediateBackoff(), partial(divide, 6, 3)) == 2.0


def test_retry_halts(mock_sleep: Mock) -> None:
    operation = AlwaysFailingOperation(payload=7)
    with pytest.raises(RetryExhaustedError) as exc_info:
        retry(halt_on(4), operation)
    assert exc_info.value.error.payload == 7
    assert operation.call_count == 4


def test_retry_linear_delays(mock_sleep: Mock) -> None:
    operation = FlakyOperation([OperationError(1)] * 3)
    retry(LinearBackoff(base_delay=1.0), operation)
    assert mock_sleep.call_args_list == [call(1.0), call(2.0), call(3.0)]


def test_retry_with_config(mock_sleep: Mock) -> None:
    on_retry = Mock()
    operation = FlakyOperation([OSError()])
    retry(ConstantBackoff(delay=0.1), operation, config=RetryConfig(on_retry=on_retry))
    on_retry.assert_called_once()


def test_retry_with_sleep() -> None:
    sleep = Mock()
    retry(ConstantBackoff(delay=3.0), FlakyOperation([OSError()]), sleep=sleep)
    sleep.assert_called_once_with(3.0)


def test_retry_if_rejects_fatal_error(mock_sleep: Mock) -> None:
    """Test that retry_if stops on errors rejected by the predicate."""

    class FatalError(Exception):
        pass

    operation = FlakyOperation([OperationError(1), FatalError("fatal"), OperationError(3)])
    strategy = ConstantBackoff(delay=0.0)

    with pytest.raises(RetryExhaustedError) as exc_info:
        retry_if(strategy, operation, lambda error, attempt: not isinstance(error, FatalError))

    assert isinstance(exc_info.value.error, FatalError)
    assert operation.call_count == 2
    assert strategy.attempts == 1


def test_retry_if_accepts(mock_sleep: Mock) -> None:
    operation = FlakyOperation([OperationError(1), OperationError(2)], value="ok")
    assert retry_if(ImmediateBackoff(), operation, lambda error, attempt: True) == "ok"


def test_retry_if_receives_attempt_number(mock_sleep: Mock) -> None:
    predicate = Mock(side_effect=[True, True, False])
    with pytest.raises(RetryExhaustedError):
        retry_if(ImmediateBackoff(), AlwaysFailingOperation(), predicate)
    assert [c.args[1] for c in predicate.call_args_list] == [1, 2, 3]


def test_retry_if_overrides_config_predicate(mock_sleep: Mock) -> None:
    config_predicate = Mock(return_value=False)
    config = RetryConfig(retry_if=config_predicate)
    operation = FlakyOperation([OperationError(1)], value="ok")
    assert retry_if(ImmediateBackoff(), operation, lambda e, n: True, config=config) == "ok"
    config_predicate.assert_not_called()
    assert config.retry_if is config_predicate
