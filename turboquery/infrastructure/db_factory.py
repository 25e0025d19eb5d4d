"""
Database connection factory for TurboQuery.

Every execution primitive opens its own connection through this module and
closes it when the call completes; there is no pooling or reuse across calls.

Connection acquisition can optionally retry transient failures using tenacity
(`Settings.connect_attempts`, default 1 meaning a single attempt). Statement
execution is never retried.
"""

from __future__ import annotations

from typing import Any, Dict

import psycopg
from psycopg import AsyncConnection, Connection
from tenacity import (
    AsyncRetrying,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from turboquery.config import Settings
from turboquery.exceptions import ConfigurationError
from turboquery.utils.logging import get_logger

log = get_logger(__name__)

_TRANSIENT_ERRORS = (psycopg.OperationalError, psycopg.InterfaceError)


def build_conninfo(settings: Settings) -> str:
    """
    Return the connection string from settings.

    Raises
    ------
    ConfigurationError
        If no connection string has been configured.
    """
    if not settings.connection_string:
        raise ConfigurationError("A connection string must be configured.")
    return settings.connection_string


def _connect_kwargs(settings: Settings) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {"autocommit": settings.autocommit}
    if settings.connect_timeout is not None:
        kwargs["connect_timeout"] = settings.connect_timeout
    return kwargs


def _retry_policy(settings: Settings) -> Dict[str, Any]:
    return {
        "stop": stop_after_attempt(settings.connect_attempts),
        "wait": wait_exponential(multiplier=1, min=1, max=10),
        "retry": retry_if_exception_type(_TRANSIENT_ERRORS),
        "reraise": True,
    }


def get_sync_connection(settings: Settings) -> Connection:
    """
    Open a dedicated synchronous connection.

    Use as a context manager so the connection is closed on every exit path:

        with get_sync_connection(settings) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1")

    Raises
    ------
    psycopg.OperationalError
        If the server cannot be reached after the configured attempts.
    """
    conninfo = build_conninfo(settings)
    kwargs = _connect_kwargs(settings)
    for attempt in Retrying(**_retry_policy(settings)):
        with attempt:
            if attempt.retry_state.attempt_number > 1:
                log.debug(
                    "Retrying connection",
                    extra={"attempt": attempt.retry_state.attempt_number},
                )
            conn = psycopg.connect(conninfo, **kwargs)
    return conn


async def get_async_connection(settings: Settings) -> AsyncConnection:
    """
    Open a dedicated asynchronous connection.

    The async counterpart of `get_sync_connection`; use with `async with`.
    """
    conninfo = build_conninfo(settings)
    kwargs = _connect_kwargs(settings)
    async for attempt in AsyncRetrying(**_retry_policy(settings)):
        with attempt:
            if attempt.retry_state.attempt_number > 1:
                log.debug(
                    "Retrying connection",
                    extra={"attempt": attempt.retry_state.attempt_number},
                )
            conn = await AsyncConnection.connect(conninfo, **kwargs)
    return conn


__all__ = [
    "build_conninfo",
    "get_sync_connection",
    "get_async_connection",
]
