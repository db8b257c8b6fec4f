r"""Retry engine running a retry session in blocking or asynchronous
mode.

Public API:
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
    - CallbackManager: Manager for callback invocations
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "CallbackManager", "RetryExecutor"]

from tryagain.engine.executor import RetryExecutor
from tryagain.engine.executor_async import AsyncRetryExecutor
from tryagain.engine.manager import CallbackManager
