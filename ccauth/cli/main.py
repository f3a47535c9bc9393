"""Main entry point for the ccauth command line."""

import asyncio
from typing import Annotated

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from ccauth._version import __version__
from ccauth.auth.environment import (
    BASE_URL_VAR,
    MANAGED_AUTH_VARS,
    is_proxy_auth_configured,
)
from ccauth.auth.exceptions import CredentialsNotFoundError
from ccauth.auth.models import CredentialId, CredentialType, mask_secret
from ccauth.auth.storage.environment import (
    ENV_MAP,
    EnvironmentBackend,
    get_env_base_url,
)
from ccauth.config.settings import ConfigurationError, get_settings
from ccauth.core.env import get_default_env
from ccauth.core.logging import get_logger, setup_logging


app = typer.Typer(
    name="ccauth",
    help="Inspect Claude client authentication from environment variables",
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

console = Console()
logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"ccauth {__version__}")
        raise typer.Exit()


@app.callback()
def app_main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Override the configured log level"),
    ] = None,
) -> None:
    """Inspect Claude client authentication from environment variables."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(2) from e

    setup_logging(
        json_logs=settings.logging.json_logs,
        log_level_name=log_level or settings.logging.level,
    )


def _find_credential(
    backend: EnvironmentBackend, credential_id: CredentialId
) -> str:
    credential = asyncio.run(backend.get(credential_id))
    if credential is None:
        raise CredentialsNotFoundError(
            f"No {credential_id.type.value} credential in environment variables"
        )
    return credential.value


@app.command(name="status")
def status_command() -> None:
    """Show the auth-related environment variables and the detected auth mode."""
    env = get_default_env()

    table = Table(
        title="Auth Environment",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Variable", style="cyan")
    table.add_column("Value", style="white")

    for name in MANAGED_AUTH_VARS:
        value = env.get(name)
        if name == BASE_URL_VAR:
            shown = value or "[dim]not set[/dim]"
        else:
            shown = mask_secret(value) if value else "[dim]not set[/dim]"
        table.add_row(name, shown)

    console.print(table)

    if is_proxy_auth_configured(env):
        base_url = get_env_base_url(env)
        console.print(f"[green]✓[/green] Proxy authentication via {base_url}")
    else:
        console.print("[dim]Proxy authentication not configured[/dim]")


@app.command(name="list")
def list_command() -> None:
    """List credential types resolvable from environment variables."""
    backend = EnvironmentBackend()
    ids = asyncio.run(backend.list())

    if not ids:
        console.print("[yellow]No credentials found in environment variables.[/yellow]")
        return

    table = Table(
        title="Environment Credentials",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Credential", style="cyan")
    table.add_column("Variables", style="dim")

    for credential_id in ids:
        names = ", ".join(ENV_MAP[credential_id.type])
        table.add_row(credential_id.type.value, names)

    console.print(table)


@app.command(name="get")
def get_command(
    credential_type: Annotated[
        CredentialType,
        typer.Argument(help="Credential type to resolve"),
    ],
    workspace: Annotated[
        str | None,
        typer.Option("--workspace", "-w", help="Workspace scope of the credential"),
    ] = None,
    reveal: Annotated[
        bool,
        typer.Option("--reveal", help="Print the raw value instead of a masked preview"),
    ] = False,
) -> None:
    """Resolve a single credential from environment variables.

    Examples:
        ccauth get anthropic_api_key            # Masked preview
        ccauth get anthropic_auth_token --reveal
    """
    backend = EnvironmentBackend()
    credential_id = CredentialId(type=credential_type, workspace_id=workspace)

    try:
        value = _find_credential(backend, credential_id)
    except CredentialsNotFoundError as e:
        logger.debug("credential_not_found", credential_type=credential_type.value)
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1) from e

    if reveal:
        typer.echo(value)
    else:
        console.print(mask_secret(value))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
