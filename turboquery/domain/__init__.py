"""
Domain package for TurboQuery.

Exports the command model passed to parameter binders.
"""

from turboquery.domain.models import Command, CommandType

__all__ = [
    "Command",
    "CommandType",
]
