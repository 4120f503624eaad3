"""
Warden CLI - invite-only user administration.

Usage:
    warden invite           Invite a user and print their setup link
    warden delete           Delete a user and their rows
    warden schema           Print the SQL for the tables Warden uses
"""

import typer

from .commands import schema, users

app = typer.Typer(
    name="warden",
    help="Invite-only user administration on Supabase",
    add_completion=False,
)

app.command(name="invite")(users.invite_command)
app.command(name="delete")(users.delete_command)
app.command(name="schema")(schema.schema_command)


@app.callback()
def callback() -> None:
    """
    Warden - invite and delete users of an invite-only app.

    Configuration comes from WARDEN_* environment variables or .env.
    """
    pass


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
