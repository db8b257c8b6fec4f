r"""Utility helpers shared across the package."""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_session_id",
    "get_session_id",
    "log_structured",
    "set_session_id",
]

from tryagain.utils.structured_logging import (
    StructuredFormatter,
    clear_session_id,
    get_session_id,
    log_structured,
    set_session_id,
)
