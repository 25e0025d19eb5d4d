"""
Paginated reader backed by a server-side procedure.

All paging logic (ordering, offset computation) lives in the procedure named by
`Settings.batch_procedure_name`; this class only binds `(query, page_number,
page_size)` in that order and maps whatever rows come back through the reader
executor.

With the bundled `turboquery.sp_batching_records`, `sql` must be a complete
SELECT statement such as `SELECT * FROM items WHERE status = 'active' ORDER BY id`.
The procedure pages it as a derived table, so a bare filter like
`status = 'active'` is a SQL error.
"""

from __future__ import annotations

from typing import List, Optional, TypeVar

from turboquery.config import Settings
from turboquery.domain.models import Command, CommandType
from turboquery.exceptions import ConfigurationError
from turboquery.executors.abstract import ParameterBinder, RowMapper
from turboquery.executors.reader import PostgresQueryExecutor

T = TypeVar("T")


def _page_binder(sql: str, page_number: int, page_size: int) -> ParameterBinder:
    def bind(command: Command) -> None:
        command.command_type = CommandType.STORED_PROCEDURE
        command.add_with_value("query", sql)
        command.add_with_value("page_number", page_number)
        command.add_with_value("page_size", page_size)

    return bind


class PostgresPaginatedReader:
    """
    Read one page of an arbitrary query.

    Parameters
    ----------
    settings : Settings
        Must carry `batch_procedure_name`.
    reader : PostgresQueryExecutor, optional
        Reader used to run the procedure; built from `settings` when omitted.
    """

    def __init__(
        self, settings: Settings, reader: Optional[PostgresQueryExecutor] = None
    ) -> None:
        self._settings = settings
        self._reader = reader or PostgresQueryExecutor(settings)

    def _procedure_name(self) -> str:
        if not self._settings.batch_procedure_name:
            raise ConfigurationError("batch_procedure_name must be configured for pagination.")
        return self._settings.batch_procedure_name

    def batching_table(
        self, sql: str, page_number: int, page_size: int, map_function: RowMapper[T]
    ) -> List[T]:
        """Return the mapped rows of page `page_number` (1-based) of `sql`."""
        return self._reader.execute_reader(
            self._procedure_name(),
            map_function,
            _page_binder(sql, page_number, page_size),
        )

    async def batching_table_async(
        self, sql: str, page_number: int, page_size: int, map_function: RowMapper[T]
    ) -> List[T]:
        """Async variant of `batching_table`."""
        return await self._reader.execute_reader_async(
            self._procedure_name(),
            map_function,
            _page_binder(sql, page_number, page_size),
        )


__all__ = ["PostgresPaginatedReader"]
