"""Helpers for writing row mappers."""

from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar

T = TypeVar("T")


def get_value(row: Mapping[str, Any], column: str, default: Optional[T] = None) -> Optional[T]:
    """
    Return `row[column]`, or `default` when the column is SQL NULL.

    Raises KeyError when the result set has no such column.
    """
    value = row[column]
    if value is None:
        return default
    return value


__all__ = ["get_value"]
