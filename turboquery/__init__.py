"""
TurboQuery - thin helpers over psycopg for everyday data access.

Provides sync and async executors that each open one connection per call,
bind parameters, execute, map rows and close the connection:

- Non-query statements and batch writes
- Scalar lookups with type conversion
- Row mapping for whole result sets or a single record
- Paginated reads delegated to a server-side procedure

`add_turboquery` wires them up for a consuming application and runs the bundled
setup script once per database.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from turboquery.bootstrap import ensure_initialized, initialize_database, load_setup_script
from turboquery.config import DatabaseEngine, Settings, get_settings
from turboquery.domain.models import Command, CommandType
from turboquery.exceptions import (
    ConfigurationError,
    ScriptResourceError,
    ServiceNotRegisteredError,
    TurboQueryError,
)
from turboquery.executors import (
    NonQueryExecutor,
    OrphanRecordExecutor,
    PaginatedReader,
    PostgresNonQueryExecutor,
    PostgresOrphanRecordExecutor,
    PostgresPaginatedReader,
    PostgresQueryExecutor,
    PostgresScalarExecutor,
    QueryExecutor,
    ScalarExecutor,
)
from turboquery.registration import ServiceRegistry, add_turboquery
from turboquery.utils.logging import configure_logging, get_logger
from turboquery.utils.mapping import get_value

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "DatabaseEngine",
    "Settings",
    "get_settings",
    # Registration and bootstrap
    "ServiceRegistry",
    "add_turboquery",
    "ensure_initialized",
    "initialize_database",
    "load_setup_script",
    # Commands
    "Command",
    "CommandType",
    # Executor interfaces
    "NonQueryExecutor",
    "OrphanRecordExecutor",
    "PaginatedReader",
    "QueryExecutor",
    "ScalarExecutor",
    # PostgreSQL executors
    "PostgresNonQueryExecutor",
    "PostgresOrphanRecordExecutor",
    "PostgresPaginatedReader",
    "PostgresQueryExecutor",
    "PostgresScalarExecutor",
    # Errors
    "ConfigurationError",
    "ScriptResourceError",
    "ServiceNotRegisteredError",
    "TurboQueryError",
    # Helpers
    "configure_logging",
    "get_logger",
    "get_value",
]
