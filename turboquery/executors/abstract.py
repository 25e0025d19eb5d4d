"""
Abstract executor interfaces for TurboQuery.

Concrete executors implement these Protocols; the registry returned by
`add_turboquery` is keyed by them so consumers depend on the interface rather
than on a specific database engine.

Callables accepted by the executors:

- `ParameterBinder`: receives the per-call `Command` and binds parameters on it.
- `BatchParameterBinder`: receives one input item plus a fresh `Command`.
- `RowMapper`: receives a row (a dict keyed by column name) and returns a value.
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Optional,
    Protocol,
    Type,
    TypeVar,
    runtime_checkable,
)

from turboquery.domain.models import Command

T = TypeVar("T")
ItemT = TypeVar("ItemT")

Row = Dict[str, Any]
ParameterBinder = Callable[[Command], None]
BatchParameterBinder = Callable[[ItemT, Command], None]
RowMapper = Callable[[Row], T]


@runtime_checkable
class NonQueryExecutor(Protocol):
    """Statements that return no result set (INSERT, UPDATE, DELETE, DDL)."""

    def execute_non_query(
        self, query: str, set_parameters: Optional[ParameterBinder] = None
    ) -> int:
        """Execute `query` and return the number of affected rows."""
        ...

    async def execute_non_query_async(
        self, query: str, set_parameters: Optional[ParameterBinder] = None
    ) -> int:
        ...

    def execute_batch_non_query(
        self,
        query: str,
        items: Iterable[ItemT],
        map_parameters: BatchParameterBinder[ItemT],
        transactional: bool = False,
    ) -> int:
        """Execute `query` once per item on a single connection; return total affected rows."""
        ...

    async def execute_batch_non_query_async(
        self,
        query: str,
        items: Iterable[ItemT],
        map_parameters: BatchParameterBinder[ItemT],
        transactional: bool = False,
    ) -> int:
        ...


@runtime_checkable
class ScalarExecutor(Protocol):
    """First column of the first row, converted to a requested type."""

    def execute_scalar(
        self,
        query: str,
        set_parameters: Optional[ParameterBinder] = None,
        result_type: Optional[Type[T]] = None,
    ) -> Optional[T]:
        ...

    async def execute_scalar_async(
        self,
        query: str,
        set_parameters: Optional[ParameterBinder] = None,
        result_type: Optional[Type[T]] = None,
    ) -> Optional[T]:
        ...


@runtime_checkable
class QueryExecutor(Protocol):
    """Map every row of a result set."""

    def execute_reader(
        self,
        query: str,
        map_function: RowMapper[T],
        set_parameters: Optional[ParameterBinder] = None,
    ) -> List[T]:
        ...

    async def execute_reader_async(
        self,
        query: str,
        map_function: RowMapper[T],
        set_parameters: Optional[ParameterBinder] = None,
    ) -> List[T]:
        ...


@runtime_checkable
class OrphanRecordExecutor(Protocol):
    """Map only the first row of a result set."""

    def get_orphan_record(
        self,
        query: str,
        map_function: RowMapper[T],
        set_parameters: Optional[ParameterBinder] = None,
    ) -> Optional[T]:
        ...

    async def get_orphan_record_async(
        self,
        query: str,
        map_function: RowMapper[T],
        set_parameters: Optional[ParameterBinder] = None,
    ) -> Optional[T]:
        ...


@runtime_checkable
class PaginatedReader(Protocol):
    """Page through a query via the configured server-side procedure."""

    def batching_table(
        self, sql: str, page_number: int, page_size: int, map_function: RowMapper[T]
    ) -> List[T]:
        ...

    async def batching_table_async(
        self, sql: str, page_number: int, page_size: int, map_function: RowMapper[T]
    ) -> List[T]:
        ...


__all__ = [
    "BatchParameterBinder",
    "NonQueryExecutor",
    "OrphanRecordExecutor",
    "PaginatedReader",
    "ParameterBinder",
    "QueryExecutor",
    "Row",
    "RowMapper",
    "ScalarExecutor",
]
