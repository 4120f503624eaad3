"""
warden invite / warden delete - user administration from the command line.

The operator names the admin identity they act as with ``--as``; the admin
check still runs against that identity's profile row.
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console

from ...admin import Caller, DeleteUserRequest, InviteUserRequest
from ...client import Warden
from ...config import load_config
from ...errors import WardenError, as_warden_error
from ...logs import configure_logging

console = Console()


def invite_command(
    email: str = typer.Argument(..., help="Email address to invite"),
    first_name: str = typer.Option(..., "--first", "-f", help="Invitee first name"),
    last_name: str = typer.Option(..., "--last", "-l", help="Invitee last name"),
    role: Optional[str] = typer.Option(
        None,
        "--role",
        "-r",
        help="Role to assign (default: associate)",
    ),
    caller_uid: str = typer.Option(..., "--as", help="Admin user id to act as"),
) -> None:
    """
    Invite a user and print their credential-setup link.

    Example:
        $ warden invite jane@example.com --first Jane --last Doe --as <admin-uid>
    """
    console.print("\n[bold cyan]Inviting User[/bold cyan]\n")

    request = InviteUserRequest(
        email=email, role=role, first_name=first_name, last_name=last_name
    )
    asyncio.run(_invite(Caller(uid=caller_uid), request))


async def _invite(caller: Caller, request: InviteUserRequest) -> None:
    """Internal async function to invite a user."""
    warden = await _connect()
    try:
        result = await warden.users.invite(caller, request)
    except Exception as e:
        _fail(e)
    finally:
        await warden.close()

    console.print("[green]✓[/green] User invited")
    console.print(f"\nID: [cyan]{result.uid}[/cyan]")
    console.print(f"Email: [cyan]{result.email}[/cyan]")
    console.print(f"Role: [cyan]{result.role}[/cyan]")
    console.print(f"Setup link: [cyan]{result.reset_link}[/cyan]\n")
    console.print("[dim]Send the setup link to the invitee; Warden does not email it.[/dim]\n")


def delete_command(
    uid: str = typer.Argument(..., help="User id to delete"),
    email: Optional[str] = typer.Option(
        None,
        "--email",
        "-e",
        help="Email of the user, to also remove their invite row",
    ),
    caller_uid: str = typer.Option(..., "--as", help="Admin user id to act as"),
    force: bool = typer.Option(
        False,
        "--force",
        "-y",
        help="Skip confirmation prompt",
    ),
) -> None:
    """
    Delete a user's identity, profile row and invite row.

    Example:
        $ warden delete <uid> --email jane@example.com --as <admin-uid>
    """
    if not force:
        confirm = typer.confirm(f"Are you sure you want to delete user {uid}?")
        if not confirm:
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    asyncio.run(_delete(Caller(uid=caller_uid), DeleteUserRequest(uid=uid, email=email)))


async def _delete(caller: Caller, request: DeleteUserRequest) -> None:
    """Internal async function to delete a user."""
    warden = await _connect()
    try:
        result = await warden.users.delete(caller, request)
    except Exception as e:
        _fail(e)
    finally:
        await warden.close()

    console.print(f"[green]✓[/green] User {result.uid} deleted")
    if result.email:
        console.print(f"  Invite for [cyan]{result.email}[/cyan] removed")


async def _connect() -> Warden:
    try:
        config = load_config()
    except Exception as e:
        console.print(f"[red]Error loading configuration:[/red] {e}")
        raise typer.Exit(1)

    configure_logging(config)
    try:
        return await Warden.create(config=config)
    except Exception as e:
        _fail(e)


def _fail(exc: Exception) -> None:
    error = as_warden_error(exc)
    console.print(f"[red]Error ({error.kind.value}):[/red] {error.message}")
    raise typer.Exit(1)
