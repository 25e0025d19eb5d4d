"""
Orphan-record executor: map only the first row.

Only one row is fetched from the cursor, so the mapper runs at most once no
matter how many rows the query would return. No row, or a statement without
a result set, yields None.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from psycopg.rows import dict_row

from turboquery.executors.abstract import ParameterBinder, RowMapper
from turboquery.executors.base import BaseExecutor

T = TypeVar("T")


class PostgresOrphanRecordExecutor(BaseExecutor):
    """Fetch a single standalone record."""

    def get_orphan_record(
        self,
        query: str,
        map_function: RowMapper[T],
        set_parameters: Optional[ParameterBinder] = None,
    ) -> Optional[T]:
        command = self._build_command(query, set_parameters)
        with self._connect() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(command.render(), command.bound_parameters())
                row = cur.fetchone() if cur.description is not None else None
                record = map_function(row) if row is not None else None
        self._log_executed("get_orphan_record", command, found=row is not None)
        return record

    async def get_orphan_record_async(
        self,
        query: str,
        map_function: RowMapper[T],
        set_parameters: Optional[ParameterBinder] = None,
    ) -> Optional[T]:
        command = self._build_command(query, set_parameters)
        async with await self._connect_async() as conn:
            async with conn.cursor(row_factory=dict_row) as cur:
                await cur.execute(command.render(), command.bound_parameters())
                row = await cur.fetchone() if cur.description is not None else None
                record = map_function(row) if row is not None else None
        self._log_executed("get_orphan_record_async", command, found=row is not None)
        return record


__all__ = ["PostgresOrphanRecordExecutor"]
