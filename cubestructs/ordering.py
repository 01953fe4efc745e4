"""Generic helpers over ordered values."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def my_max(a: T, b: T) -> T:
    """Return ``a`` if it is greater than ``b``, otherwise ``b``."""
    if a > b:  # type: ignore[operator]
        return a
    return b