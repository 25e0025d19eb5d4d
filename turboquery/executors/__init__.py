"""
Executors package for TurboQuery.

Re-exports the executor interfaces and the PostgreSQL implementations so
downstream code can import from `turboquery.executors` directly.
"""

from turboquery.executors.abstract import (
    BatchParameterBinder,
    NonQueryExecutor,
    OrphanRecordExecutor,
    PaginatedReader,
    ParameterBinder,
    QueryExecutor,
    Row,
    RowMapper,
    ScalarExecutor,
)
from turboquery.executors.non_query import PostgresNonQueryExecutor
from turboquery.executors.orphan import PostgresOrphanRecordExecutor
from turboquery.executors.pagination import PostgresPaginatedReader
from turboquery.executors.reader import PostgresQueryExecutor
from turboquery.executors.scalar import PostgresScalarExecutor

__all__ = [
    # Interfaces
    "BatchParameterBinder",
    "NonQueryExecutor",
    "OrphanRecordExecutor",
    "PaginatedReader",
    "ParameterBinder",
    "QueryExecutor",
    "Row",
    "RowMapper",
    "ScalarExecutor",
    # PostgreSQL implementations
    "PostgresNonQueryExecutor",
    "PostgresOrphanRecordExecutor",
    "PostgresPaginatedReader",
    "PostgresQueryExecutor",
    "PostgresScalarExecutor",
]
