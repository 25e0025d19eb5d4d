"""
Registration entry point for consuming applications.

Usage:
    from turboquery import add_turboquery
    from turboquery.executors import QueryExecutor

    def configure(options):
        options.connection_string = "postgresql://app@db/app"
        options.batch_procedure_name = "turboquery.sp_batching_records"

    registry = add_turboquery(configure)
    users = registry.resolve(QueryExecutor).execute_reader("SELECT * FROM users", dict)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Type, TypeVar

from turboquery.bootstrap import ensure_initialized
from turboquery.config import DatabaseEngine, Settings
from turboquery.exceptions import ConfigurationError, ServiceNotRegisteredError
from turboquery.executors.abstract import (
    NonQueryExecutor,
    OrphanRecordExecutor,
    PaginatedReader,
    QueryExecutor,
    ScalarExecutor,
)
from turboquery.executors.non_query import PostgresNonQueryExecutor
from turboquery.executors.orphan import PostgresOrphanRecordExecutor
from turboquery.executors.pagination import PostgresPaginatedReader
from turboquery.executors.reader import PostgresQueryExecutor
from turboquery.executors.scalar import PostgresScalarExecutor
from turboquery.utils.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")

ConfigureCallback = Callable[[Settings], None]


class ServiceRegistry:
    """Minimal interface → instance lookup."""

    def __init__(self) -> None:
        self._services: Dict[type, Any] = {}

    def register(self, interface: Type[T], instance: T) -> None:
        self._services[interface] = instance

    def resolve(self, interface: Type[T]) -> T:
        try:
            return self._services[interface]
        except KeyError:
            raise ServiceNotRegisteredError(interface) from None

    def __contains__(self, interface: object) -> bool:
        return interface in self._services

    def __len__(self) -> int:
        return len(self._services)


def _postgres_services(settings: Settings) -> Dict[type, Any]:
    reader = PostgresQueryExecutor(settings)
    return {
        NonQueryExecutor: PostgresNonQueryExecutor(settings),
        ScalarExecutor: PostgresScalarExecutor(settings),
        QueryExecutor: reader,
        OrphanRecordExecutor: PostgresOrphanRecordExecutor(settings),
        PaginatedReader: PostgresPaginatedReader(settings, reader=reader),
    }


_ENGINE_PROVIDERS: Dict[DatabaseEngine, Callable[[Settings], Dict[type, Any]]] = {
    DatabaseEngine.POSTGRESQL: _postgres_services,
}


def _choose_database(settings: Settings) -> Dict[type, Any]:
    provider = _ENGINE_PROVIDERS.get(settings.database_engine)
    if provider is None:
        raise ConfigurationError(f"Unsupported database engine '{settings.database_engine}'.")
    return provider(settings)


def add_turboquery(
    configure: Optional[ConfigureCallback],
    registry: Optional[ServiceRegistry] = None,
    settings: Optional[Settings] = None,
) -> ServiceRegistry:
    """
    Configure TurboQuery, initialize the database once, and register executors.

    Parameters
    ----------
    configure : callable
        Receives the `Settings` to populate (connection string, procedure name).
    registry : ServiceRegistry, optional
        Registry to populate; a new one is created when omitted.
    settings : Settings, optional
        Starting settings; defaults to `Settings()` loaded from the environment.

    Raises
    ------
    ConfigurationError
        If `configure` is None, no connection string results, or the engine is
        not supported.
    ScriptResourceError
        If the setup script is missing or empty.
    """
    if configure is None:
        raise ConfigurationError("A configuration callback is required.")

    settings = settings if settings is not None else Settings()
    configure(settings)
    if not settings.connection_string:
        raise ConfigurationError("A connection string must be configured.")

    services = _choose_database(settings)
    ensure_initialized(settings, executor=services[NonQueryExecutor])

    registry = registry if registry is not None else ServiceRegistry()
    for interface, instance in services.items():
        registry.register(interface, instance)
    log.info(
        "TurboQuery registered",
        extra={"engine": settings.database_engine.value, "services": len(services)},
    )
    return registry


__all__ = ["ConfigureCallback", "ServiceRegistry", "add_turboquery"]
