"""Boardshop CLI application using Typer.

This module provides command-line utilities for the Boardshop backend:
secret generation for deployment configuration and a development server.
"""

import secrets

import typer
import uvicorn
from rich.console import Console

from boardshop_config.settings import get_settings

app = typer.Typer(
    name="boardshop",
    help="Boardshop - skateboard shop backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Boardshop configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Boardshop Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    bind_host = host or settings.api_host
    bind_port = port or settings.api_port

    console.print(
        f"[bold green]Starting Boardshop API[/bold green] on "
        f"http://{bind_host}:{bind_port}"
    )
    uvicorn.run(
        "boardshop.presentation.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
