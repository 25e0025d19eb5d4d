"""TurboQuery exception hierarchy.

Database errors raised by psycopg and conversion errors raised by pydantic are
not wrapped; they reach the caller unchanged.
"""

from __future__ import annotations


class TurboQueryError(Exception):
    """Base exception for all TurboQuery errors."""


class ConfigurationError(TurboQueryError):
    """Configuration is missing or invalid."""


class ScriptResourceError(TurboQueryError):
    """The bundled setup script could not be loaded."""

    def __init__(self, resource: str, message: str) -> None:
        self.resource = resource
        super().__init__(f"Setup script '{resource}': {message}")


class ServiceNotRegisteredError(TurboQueryError, KeyError):
    """No service is registered for the requested interface."""

    def __init__(self, interface: type) -> None:
        self.interface = interface
        super().__init__(f"No service registered for {interface.__name__}")

    def __str__(self) -> str:
        return str(self.args[0])


__all__ = [
    "TurboQueryError",
    "ConfigurationError",
    "ScriptResourceError",
    "ServiceNotRegisteredError",
]
