"""Command line entry point."""

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from users_service.core.exceptions import UserNotFoundError
from users_service.core.services import DbSessionService, UserManagementService
from users_service.entities.user import UserResponse
from users_service.runtime.context import get_config

console = Console()

app = typer.Typer(
    help="Users service - serve the API and inspect stored users",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
users_app = typer.Typer(help="Inspect stored users")
app.add_typer(users_app, name="users")


def _database_service() -> DbSessionService:
    return DbSessionService(get_config())


def _user_table(title: str, users: list[UserResponse]) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("DNI", style="green")
    table.add_column("First Name", style="magenta")
    table.add_column("Last Name", style="magenta")
    table.add_column("Email", style="blue")
    table.add_column("Phone", style="blue")
    table.add_column("Status", style="yellow")
    table.add_column("Updated", style="dim")
    for user in users:
        table.add_row(
            user.id,
            user.dni,
            user.first_name,
            user.last_name,
            user.email,
            user.phone_number,
            user.status.value,
            user.updated_at.isoformat() if user.updated_at else "",
        )
    return table


@app.command()
def serve(
    host: str = typer.Option(None, help="Host to bind to (defaults to app.host)"),
    port: int = typer.Option(None, help="Port to bind to (defaults to app.port)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    config = get_config()
    uvicorn.run(
        "users_service.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
    )


@app.command("init-db")
def init_db() -> None:
    """Create the database tables."""
    _database_service().create_all()
    console.print("[green]Database tables created[/green]")


@users_app.command("list")
def list_users() -> None:
    """List every stored user."""
    database_service = _database_service()
    with database_service.session_scope() as session:
        users = list(UserManagementService(session).list_users())

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    console.print(_user_table("Users", users))
    console.print(f"\n[green]Found {len(users)} users[/green]")


@users_app.command("show")
def show_user(
    user_id: str = typer.Argument(None, help="User ID"),
    dni: str = typer.Option(None, "--dni", "-d", help="Look the user up by national ID"),
) -> None:
    """Show one user by ID or by national ID."""
    if not user_id and not dni:
        console.print("[red]Provide a user ID or --dni[/red]")
        raise typer.Exit(code=2)

    database_service = _database_service()
    try:
        with database_service.session_scope() as session:
            service = UserManagementService(session)
            user = service.get_user_by_dni(dni) if dni else service.get_user(user_id)
    except UserNotFoundError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1) from e

    console.print(_user_table("User", [user]))


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
