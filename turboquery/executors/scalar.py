"""
Scalar executor: the first column of the first row.

When a `result_type` is requested the raw value is converted with a pydantic
`TypeAdapter` in lax mode, so `"42"` becomes `42` for `int` and `"false"`
becomes `False` for `bool`. `str` accepts any value via `str()`. A failed
conversion raises `pydantic.ValidationError` unchanged.

A statement without a result set, an absent row or a SQL NULL yields the zero
value of the requested type (`0`, `0.0`, `""`, `False`, `Decimal(0)`, `b""`)
and None for any other type.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import TypeAdapter

from turboquery.executors.abstract import ParameterBinder
from turboquery.executors.base import BaseExecutor

T = TypeVar("T")

_ZERO_VALUES: Dict[Any, Any] = {
    int: 0,
    float: 0.0,
    str: "",
    bool: False,
    Decimal: Decimal(0),
    bytes: b"",
}


def default_value(result_type: Optional[Type[T]]) -> Optional[T]:
    """Return the zero value for `result_type`, or None."""
    return _ZERO_VALUES.get(result_type)


@lru_cache(maxsize=128)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def convert_scalar(value: Any, result_type: Optional[Type[T]] = None) -> Optional[T]:
    """Convert a raw scalar to `result_type`, applying the NULL/absent default."""
    if value is None:
        return default_value(result_type)
    if result_type is None:
        return value
    if result_type is str:
        return str(value)
    return _adapter(result_type).validate_python(value)


class PostgresScalarExecutor(BaseExecutor):
    """Single-value lookups (COUNT, EXISTS, MAX, ...)."""

    def execute_scalar(
        self,
        query: str,
        set_parameters: Optional[ParameterBinder] = None,
        result_type: Optional[Type[T]] = None,
    ) -> Optional[T]:
        command = self._build_command(query, set_parameters)
        with self._connect() as conn:
            with conn.cursor() as cur:
                cur.execute(command.render(), command.bound_parameters())
                row = cur.fetchone() if cur.description is not None else None
        self._log_executed("execute_scalar", command, found=row is not None)
        return convert_scalar(row[0] if row else None, result_type)

    async def execute_scalar_async(
        self,
        query: str,
        set_parameters: Optional[ParameterBinder] = None,
        result_type: Optional[Type[T]] = None,
    ) -> Optional[T]:
        command = self._build_command(query, set_parameters)
        async with await self._connect_async() as conn:
            async with conn.cursor() as cur:
                await cur.execute(command.render(), command.bound_parameters())
                row = await cur.fetchone() if cur.description is not None else None
        self._log_executed("execute_scalar_async", command, found=row is not None)
        return convert_scalar(row[0] if row else None, result_type)


__all__ = ["PostgresScalarExecutor", "convert_scalar", "default_value"]
