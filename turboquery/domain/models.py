"""
Domain models for TurboQuery.

A `Command` is the per-call invocation handed to parameter binders: the query
(or stored procedure name), how to interpret it, and the named parameters bound
so far. Commands are created per call and never persisted.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Union

from psycopg import sql
from pydantic import BaseModel, Field


class CommandType(str, Enum):
    """How the command text is interpreted."""

    TEXT = "text"
    STORED_PROCEDURE = "stored_procedure"


class Command(BaseModel):
    """
    A single query or stored procedure invocation.

    For `TEXT` commands, parameters are referenced in the SQL as `%(name)s`.
    For `STORED_PROCEDURE` commands, `text` is the (optionally schema-qualified)
    procedure name and parameters are passed positionally in the order they
    were bound.
    """

    text: str = Field(..., min_length=1, description="SQL text or procedure name.")
    command_type: CommandType = Field(CommandType.TEXT, description="Interpretation of `text`.")
    parameters: Dict[str, Any] = Field(default_factory=dict, description="Bound parameters.")

    def add_with_value(self, name: str, value: Any) -> None:
        """
        Bind `value` to the parameter `name`.

        A leading `@` is stripped so `"@Id"` and `"Id"` bind the same parameter.
        """
        self.parameters[name.lstrip("@")] = value

    def render(self) -> Union[str, sql.Composed]:
        """Return the statement to hand to the psycopg cursor."""
        if self.command_type is CommandType.TEXT:
            return self.text
        procedure = sql.Identifier(*self.text.split("."))
        arguments = sql.SQL(", ").join(sql.Placeholder(name) for name in self.parameters)
        return sql.SQL("SELECT * FROM {}({})").format(procedure, arguments)

    def bound_parameters(self) -> Optional[Dict[str, Any]]:
        """Parameters for `cursor.execute`, or None when nothing was bound."""
        return dict(self.parameters) if self.parameters else None


__all__ = ["Command", "CommandType"]
