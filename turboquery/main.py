from __future__ import annotations

import sys
from typing import Optional

import typer
from psycopg.conninfo import conninfo_to_dict, make_conninfo

from turboquery.bootstrap import initialize_database
from turboquery.config import get_settings
from turboquery.executors.scalar import PostgresScalarExecutor
from turboquery.utils.logging import configure_logging

app = typer.Typer(help="TurboQuery CLI.")


def _masked(connection_string: str) -> str:
    if not connection_string:
        return "<not set>"
    params = conninfo_to_dict(connection_string)
    if params.get("password"):
        params["password"] = "***"
    return make_conninfo(**params)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"connection={_masked(settings.connection_string)} | "
        f"engine={settings.database_engine.value} "
        f"procedure={settings.batch_procedure_name or '<not set>'} "
        f"autocommit={settings.autocommit} attempts={settings.connect_attempts}"
    )


@app.command()
def bootstrap() -> None:
    """
    Run the bundled setup script against the configured database.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    initialize_database(settings)
    typer.echo("Database initialized.")


@app.command()
def scalar(
    query: str = typer.Argument(..., help="Query whose first column of the first row is printed."),
    result_type: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help="Convert the result to int, float, str or bool.",
    ),
) -> None:
    """
    Execute a query and print its scalar result.
    """
    types = {"int": int, "float": float, "str": str, "bool": bool}
    if result_type is not None and result_type not in types:
        raise typer.BadParameter(
            f"Unknown type '{result_type}'. Choose from: {', '.join(types)}", param_hint="--type"
        )
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    value = PostgresScalarExecutor(settings).execute_scalar(
        query, result_type=types.get(result_type) if result_type else None
    )
    typer.echo(value)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
