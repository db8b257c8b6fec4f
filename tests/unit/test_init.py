r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import tryagain


def test_package_version_is_string() -> None:
    assert isinstance(tryagain.__version__, str)
    assert "." in tryagain.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in tryagain.__all__:
        assert hasattr(tryagain, name), f"{name} is in __all__ but not defined in module"


def test_entry_points_are_callable() -> None:
    assert callable(tryagain.retry)
    assert callable(tryagain.retry_async)
    assert callable(tryagain.retry_if)
    assert callable(tryagain.retry_if_async)
