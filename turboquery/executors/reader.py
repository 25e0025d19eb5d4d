"""
Reader executor: map every row of a result set.

Rows are delivered to the mapper as dicts keyed by column name (psycopg
`dict_row`). The mapper runs exactly once per row and the returned list keeps
result-set order. The full result is materialized in memory. A statement
without a result set yields an empty list.
"""

from __future__ import annotations

from typing import List, Optional, TypeVar

from psycopg.rows import dict_row

from turboquery.executors.abstract import ParameterBinder, RowMapper
from turboquery.executors.base import BaseExecutor

T = TypeVar("T")


class PostgresQueryExecutor(BaseExecutor):
    """Execute a query and map all returned rows."""

    def execute_reader(
        self,
        query: str,
        map_function: RowMapper[T],
        set_parameters: Optional[ParameterBinder] = None,
    ) -> List[T]:
        """
        Execute `query` and return `map_function(row)` for every row.

        Parameters
        ----------
        query : str
            SQL text, or a procedure name when the binder switches the command
            to `CommandType.STORED_PROCEDURE`.
        map_function : callable
            Invoked once per row with a dict of column values.
        set_parameters : callable, optional
            Binder invoked with the `Command` before execution.
        """
        command = self._build_command(query, set_parameters)
        records: List[T] = []
        with self._connect() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(command.render(), command.bound_parameters())
                if cur.description is not None:
                    for row in cur:
                        records.append(map_function(row))
        self._log_executed("execute_reader", command, rows=len(records))
        return records

    async def execute_reader_async(
        self,
        query: str,
        map_function: RowMapper[T],
        set_parameters: Optional[ParameterBinder] = None,
    ) -> List[T]:
        """Async variant of `execute_reader`."""
        command = self._build_command(query, set_parameters)
        records: List[T] = []
        async with await self._connect_async() as conn:
            async with conn.cursor(row_factory=dict_row) as cur:
                await cur.execute(command.render(), command.bound_parameters())
                if cur.description is not None:
                    async for row in cur:
                        records.append(map_function(row))
        self._log_executed("execute_reader_async", command, rows=len(records))
        return records


__all__ = ["PostgresQueryExecutor"]
