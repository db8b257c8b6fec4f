r"""Unit tests for the asynchronous retry entry points."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock, call

import pytest

from tests.helpers import AsyncAlwaysFailingOperation, OperationError, halt_on
from tryagain import RetryConfig, RetryExhaustedError, retry_async, retry_if_async
from tryagain.backoff import ConstantBackoff, ExponentialBackoff, ImmediateBackoff


@pytest.mark.asyncio
async def test_retry_async_success(mock_asleep: AsyncMock) -> None:
    operation = AsyncMock(return_value="value")
    assert await retry_async(ImmediateBackoff(), operation) == "value"
    operation.assert_awaited_once()


@pytest.mark.asyncio
async def test_retry_async_halts(mock_asleep: AsyncMock) -> None:
    operation = AsyncAlwaysFailingOperation(payload=7)
    with pytest.raises(RetryExhaustedError) as exc_info:
        await retry_async(halt_on(4), operation)
    assert exc_info.value.error.payload == 7
    assert operation.call_count == 4


@pytest.mark.asyncio
async def test_retry_async_exponential_delays(mock_asleep: AsyncMock) -> None:
    operation = AsyncMock(side_effect=[OSError(), OSError(), "ok"])
    await retry_async(ExponentialBackoff(base_delay=1.0), operation)
    assert mock_asleep.await_args_list == [call(1.0), call(2.0)]


@pytest.mark.asyncio
async def test_retry_async_with_config(mock_asleep: AsyncMock) -> None:
    on_failure = Mock()
    with pytest.raises(RetryExhaustedError):
        await retry_async(
            ConstantBackoff(delay=0.0, max_attempts=1),
            AsyncAlwaysFailingOperation(),
            config=RetryConfig(on_failure=on_failure),
        )
    on_failure.assert_called_once()


@pytest.mark.asyncio
async def test_retry_async_with_sleep() -> None:
    sleep = AsyncMock()
    operation = AsyncMock(side_effect=[OSError(), "ok"])
    await retry_async(ConstantBackoff(delay=3.0), operation, sleep=sleep)
    sleep.assert_awaited_once_with(3.0)


@pytest.mark.asyncio
async def test_retry_if_async_rejects(mock_asleep: AsyncMock) -> None:
    operation = AsyncMock(side_effect=[OperationError("retry"), OperationError("fatal")])

    with pytest.raises(RetryExhaustedError) as exc_info:
        await retry_if_async(
            ImmediateBackoff(), operation, lambda error, attempt: error.payload != "fatal"
        )

    assert exc_info.value.error.payload == "fatal"
    assert operation.await_count == 2


@pytest.mark.asyncio
async def test_retry_if_async_accepts(mock_asleep: AsyncMock) -> None:
    operation = AsyncMock(side_effect=[OperationError(1), "ok"])
    assert await retry_if_async(ImmediateBackoff(), operation, lambda e, n: True) == "ok"
