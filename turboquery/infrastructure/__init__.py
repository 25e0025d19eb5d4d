"""
Infrastructure package for TurboQuery.

Centralizes database connectivity concerns (sync/async connection factories).
Keep this layer focused on I/O and resource management, decoupled from the
executors that use it.
"""

from turboquery.infrastructure.db_factory import (
    build_conninfo,
    get_async_connection,
    get_sync_connection,
)

__all__ = [
    "build_conninfo",
    "get_async_connection",
    "get_sync_connection",
]
