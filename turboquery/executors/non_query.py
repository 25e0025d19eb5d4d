"""
Non-query executor and batch writer.

`execute_non_query` runs a single statement and returns the affected-row count
reported by the database. `execute_batch_non_query` runs the same statement
once per input item on a single connection.

Batch semantics: items run strictly in input order and the first failure aborts
the remaining items. Without `transactional=True` there is no surrounding
transaction, so with autocommit enabled the items executed before the failure
stay committed. Pass `transactional=True` to roll back the whole batch instead.

Example
-------
    writer = PostgresNonQueryExecutor(settings)
    writer.execute_batch_non_query(
        "INSERT INTO users (id, username) VALUES (%(id)s, %(username)s)",
        users,
        lambda user, cmd: (
            cmd.add_with_value("id", user.id),
            cmd.add_with_value("username", user.username),
        ),
    )
"""

from __future__ import annotations

from contextlib import nullcontext
from typing import Iterable, Optional

from turboquery.domain.models import Command
from turboquery.executors.abstract import BatchParameterBinder, ItemT, ParameterBinder
from turboquery.executors.base import BaseExecutor


class PostgresNonQueryExecutor(BaseExecutor):
    """Statements without a result set, singly or in batches."""

    def execute_non_query(
        self, query: str, set_parameters: Optional[ParameterBinder] = None
    ) -> int:
        """
        Execute a statement and return the number of affected rows.

        Parameters
        ----------
        query : str
            SQL text; parameters are referenced as `%(name)s`.
        set_parameters : callable, optional
            Binder invoked with the `Command` before execution.

        Returns
        -------
        int
            `cursor.rowcount` as reported by the server (-1 when not applicable).
        """
        command = self._build_command(query, set_parameters)
        with self._connect() as conn:
            with conn.cursor() as cur:
                cur.execute(command.render(), command.bound_parameters())
                affected = cur.rowcount
        self._log_executed("execute_non_query", command, rows=affected)
        return affected

    async def execute_non_query_async(
        self, query: str, set_parameters: Optional[ParameterBinder] = None
    ) -> int:
        """Async variant of `execute_non_query`."""
        command = self._build_command(query, set_parameters)
        async with await self._connect_async() as conn:
            async with conn.cursor() as cur:
                await cur.execute(command.render(), command.bound_parameters())
                affected = cur.rowcount
        self._log_executed("execute_non_query_async", command, rows=affected)
        return affected

    def execute_batch_non_query(
        self,
        query: str,
        items: Iterable[ItemT],
        map_parameters: BatchParameterBinder[ItemT],
        transactional: bool = False,
    ) -> int:
        """
        Execute `query` once per item, in order, on one connection.

        Returns
        -------
        int
            Sum of the per-item affected-row counts.
        """
        total = 0
        executed = 0
        with self._connect() as conn:
            with conn.transaction() if transactional else nullcontext():
                for item in items:
                    command = Command(text=query)
                    map_parameters(item, command)
                    with conn.cursor() as cur:
                        cur.execute(command.render(), command.bound_parameters())
                        total += cur.rowcount
                    executed += 1
        self._log_executed(
            "execute_batch_non_query",
            Command(text=query),
            items=executed,
            rows=total,
            transactional=transactional,
        )
        return total

    async def execute_batch_non_query_async(
        self,
        query: str,
        items: Iterable[ItemT],
        map_parameters: BatchParameterBinder[ItemT],
        transactional: bool = False,
    ) -> int:
        """Async variant of `execute_batch_non_query`."""
        total = 0
        executed = 0
        async with await self._connect_async() as conn:
            async with conn.transaction() if transactional else nullcontext():
                for item in items:
                    command = Command(text=query)
                    map_parameters(item, command)
                    async with conn.cursor() as cur:
                        await cur.execute(command.render(), command.bound_parameters())
                        total += cur.rowcount
                    executed += 1
        self._log_executed(
            "execute_batch_non_query_async",
            Command(text=query),
            items=executed,
            rows=total,
            transactional=transactional,
        )
        return total


__all__ = ["PostgresNonQueryExecutor"]
