"""
One-time database setup.

The bundled `sql/setup.sql` script is executed verbatim as a single non-query
statement. `ensure_initialized` records which databases have already been set
up in this process, so registering the same configuration twice runs the script
only once.
"""

from __future__ import annotations

import threading
from importlib import resources
from typing import Optional, Set

from turboquery.config import Settings
from turboquery.exceptions import ScriptResourceError
from turboquery.executors.abstract import NonQueryExecutor
from turboquery.executors.non_query import PostgresNonQueryExecutor
from turboquery.utils.logging import get_logger

log = get_logger(__name__)

SETUP_SCRIPT = "setup.sql"

_lock = threading.Lock()
_initialized: Set[str] = set()


def load_setup_script(resource: str = SETUP_SCRIPT) -> str:
    """
    Read a SQL script shipped in the `turboquery/sql` package directory.

    Raises
    ------
    ScriptResourceError
        If the resource does not exist or contains only whitespace.
    """
    script = resources.files("turboquery") / "sql" / resource
    if not script.is_file():
        raise ScriptResourceError(resource, "resource not found")
    content = script.read_text(encoding="utf-8")
    if not content.strip():
        raise ScriptResourceError(resource, "script is empty")
    return content


def initialize_database(
    settings: Settings,
    executor: Optional[NonQueryExecutor] = None,
    resource: str = SETUP_SCRIPT,
) -> None:
    """Run the setup script against the configured database."""
    sql = load_setup_script(resource)
    executor = executor or PostgresNonQueryExecutor(settings)
    executor.execute_non_query(sql)
    log.info("Database initialized", extra={"script": resource})


def is_initialized(settings: Settings) -> bool:
    with _lock:
        return settings.connection_string in _initialized


def ensure_initialized(
    settings: Settings,
    executor: Optional[NonQueryExecutor] = None,
    resource: str = SETUP_SCRIPT,
) -> bool:
    """
    Initialize the database unless this process already did so.

    Returns True when the setup script was executed by this call. The flag is
    only set after the script succeeds, so a failed bootstrap is retried on the
    next registration.
    """
    with _lock:
        if settings.connection_string in _initialized:
            log.debug("Database already initialized; skipping setup script")
            return False
        initialize_database(settings, executor=executor, resource=resource)
        _initialized.add(settings.connection_string)
        return True


def reset_initialization_state() -> None:
    """Forget which databases were initialized (used by tests)."""
    with _lock:
        _initialized.clear()


__all__ = [
    "SETUP_SCRIPT",
    "ensure_initialized",
    "initialize_database",
    "is_initialized",
    "load_setup_script",
    "reset_initialization_state",
]
