"""HRDesk CLI application using Typer.

This module provides command-line utilities for the HRDesk backend:
running the API server and generating deployment secrets.
"""

import secrets

import typer
import uvicorn
from pydantic import ValidationError
from rich.console import Console

from hrdesk_config.settings import clear_settings_cache, get_settings

app = typer.Typer(
    name="hrdesk",
    help="HRDesk - employee directory API CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Listen port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HRDesk API server."""
    clear_settings_cache()
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print("[bold red]Invalid configuration:[/bold red]")
        for error in e.errors():
            field = ".".join(str(p) for p in error["loc"]) or "settings"
            console.print(f"  [red]{field}[/red]: {error['msg']}")
        console.print(
            "[dim]Set JWT_SECRET_KEY and DATABASE_URL in the environment "
            "or in config/.env.[/dim]"
        )
        raise typer.Exit(1) from None

    bind_host = host or settings.api_host
    bind_port = port or settings.api_port
    console.print(
        f"[bold green]Starting {settings.app_name} API[/bold green] "
        f"on http://{bind_host}:{bind_port}"
    )
    uvicorn.run(
        "hrdesk.presentation.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a JWT signing secret for HRDesk configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]HRDesk Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 random bytes, URL-safe encoded, for HS256 signing
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above value to your config/.env file.[/dim]\n"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
