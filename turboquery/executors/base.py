"""
Shared plumbing for the PostgreSQL executors.

Executors receive their `Settings` explicitly and open one connection per call
through the infrastructure factory. Both factories are looked up on this module
at call time, so tests can substitute recording doubles with monkeypatch.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from turboquery.config import Settings
from turboquery.domain.models import Command, CommandType
from turboquery.executors.abstract import ParameterBinder
from turboquery.infrastructure.db_factory import get_async_connection, get_sync_connection
from turboquery.utils.logging import get_logger

log = get_logger(__name__)


class BaseExecutor:
    """
    Base class holding the configuration every executor needs.

    Subclasses use `_connect` / `_connect_async` inside `with` / `async with`
    so the connection is released on success and on error alike.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings

    def _connect(self):
        return get_sync_connection(self._settings)

    async def _connect_async(self):
        return await get_async_connection(self._settings)

    @staticmethod
    def _build_command(
        query: str,
        set_parameters: Optional[ParameterBinder] = None,
        command_type: CommandType = CommandType.TEXT,
    ) -> Command:
        command = Command(text=query, command_type=command_type)
        if set_parameters is not None:
            set_parameters(command)
        return command

    @staticmethod
    def _log_executed(operation: str, command: Command, **fields: Any) -> None:
        extra: Dict[str, Any] = {
            "operation": operation,
            "command_type": command.command_type.value,
            "parameters": list(command.parameters),
        }
        extra.update(fields)
        log.debug(f"[{operation}] executed", extra=extra)


__all__ = ["BaseExecutor"]
