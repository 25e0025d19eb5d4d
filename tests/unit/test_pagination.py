from __future__ import annotations

import pytest
from psycopg import sql

from turboquery.config import Settings
from turboquery.exceptions import ConfigurationError
from turboquery.executors.pagination import PostgresPaginatedReader

QUERY = "SELECT * FROM items WHERE status='active' ORDER BY id"
PAGE_ROWS = [{"row_data": {"id": 11}}, {"row_data": {"id": 12}}]


def _record_id(row: dict) -> int:
    return row["row_data"]["id"]


def test_batching_table_binds_query_page_number_and_size_in_order(settings, fake_db) -> None:
    fake_db.push(rows=PAGE_ROWS)

    ids = PostgresPaginatedReader(settings).batching_table(QUERY, 2, 10, _record_id)

    assert ids == [11, 12]
    ((query, params),) = fake_db.executed
    assert isinstance(query, sql.Composed)
    assert sql.Identifier("turboquery", "sp_batching_records") in list(query)
    assert list(params.items()) == [
        ("query", QUERY),
        ("page_number", 2),
        ("page_size", 10),
    ]
    assert fake_db.all_closed


@pytest.mark.asyncio
async def test_batching_table_async_binds_same_parameters(settings, fake_db) -> None:
    fake_db.push(rows=PAGE_ROWS[:1])

    ids = await PostgresPaginatedReader(settings).batching_table_async(QUERY, 1, 1, _record_id)

    assert ids == [11]
    assert list(fake_db.executed[0][1].values()) == [QUERY, 1, 1]


def test_batching_table_requires_procedure_name(fake_db) -> None:
    settings = Settings(connection_string="postgresql://test")

    with pytest.raises(ConfigurationError):
        PostgresPaginatedReader(settings).batching_table(QUERY, 1, 10, _record_id)

    assert fake_db.executed == []
