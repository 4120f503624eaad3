"""
warden schema - print the SQL Warden expects in the database.
"""

import typer
from rich.console import Console
from rich.syntax import Syntax

from ...sql import schema_files, schema_sql

console = Console()


def schema_command(
    raw: bool = typer.Option(False, "--raw", help="Print plain SQL (for piping into psql)"),
) -> None:
    """
    Print the profile/invite tables and the delete function.

    Example:
        $ warden schema --raw | psql "$DATABASE_URL"
    """
    sql = schema_sql()

    if raw:
        typer.echo(sql)
        return

    for path in schema_files():
        console.print(f"[dim]-- {path.name}[/dim]")
    console.print(Syntax(sql, "sql"))
