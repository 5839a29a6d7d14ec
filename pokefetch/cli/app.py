"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from pokefetch import __version__
from pokefetch.api.client import PokeAPIClient
from pokefetch.core.fetch_session import FetchSession
from pokefetch.exceptions import PokefetchError
from pokefetch.media.downloader import close_connection_pool
from pokefetch.storage.config_manager import ConfigManager

from .formatters import format_error_with_suggestions, print_config, print_summary

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("pokefetch")

app = typer.Typer(
    name="pokefetch",
    help=(
        "Fetch a Pokémon from a PokeAPI-compatible API, print it, and save its"
        " sprites. Use 'pokefetch <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "pokefetch"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the effective configuration."
    ),
):
    """pokefetch CLI"""
    if version:
        console.print(f"[bold]pokefetch[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("pokefetch").setLevel(log_level)

    if show_config:
        try:
            config = ConfigManager(CONFIG_FILE).load_config()
        except PokefetchError as e:
            console.print(
                f"[red]✗ Configuration is invalid: {escape(str(e))}[/red]"
            )
            raise typer.Exit(code=1) from e
        print_config(CONFIG_FILE, config.model_dump(exclude={"config_path"}))
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def init(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing file without asking."
    ),
):
    """Write a configuration file with the default settings."""
    if (
        CONFIG_FILE.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    try:
        ConfigManager(CONFIG_FILE).save_new_config()
    except PokefetchError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    console.print(
        f"[bold green]✓ Configuration saved to '{CONFIG_FILE}'[/bold green]"
    )


@app.command(name="fetch")
def fetch_command(
    identifier: str | None = typer.Argument(
        None, help="Pokémon name or number (default from config, otherwise 1)."
    ),
    api_url: str | None = typer.Option(
        None, "--api-url", help="Base URL of the PokeAPI-compatible API."
    ),
    output_dir: str | None = typer.Option(
        None, "-o", "--output-dir", help="Directory the sprite files are written to."
    ),
    sprites: bool | None = typer.Option(
        None,
        "--sprites/--no-sprites",
        help="Download the front and back sprites next to the printed data.",
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Request timeout in seconds."
    ),
):
    """Fetch a Pokémon, print it, and save its sprites."""
    cli_options = {
        key: value
        for key, value in {
            "identifier": identifier,
            "api_base_url": api_url,
            "output_dir": output_dir,
            "download_sprites": sprites,
            "timeout": timeout,
        }.items()
        if value is not None
    }

    async def _fetch_async():
        api_client = None
        session = None
        try:
            config = ConfigManager(CONFIG_FILE).load_config(cli_options)
            api_client = PokeAPIClient(config.api_base_url, timeout=config.timeout)
            session = FetchSession(config, api_client, console=console)
            await session.run()
        except PokefetchError as e:
            console.print(format_error_with_suggestions(e))
            raise typer.Exit(code=1) from e
        finally:
            await close_connection_pool()
            if api_client:
                await api_client.close()

        if session.config.download_sprites:
            print_summary(session.stats, console)

    asyncio.run(_fetch_async())


@app.command()
def diagnose():
    """Diagnose common configuration and connectivity issues."""
    console.print("\n[bold cyan]Running diagnostics...[/bold cyan]\n")
    issues_found = False
    if CONFIG_FILE.is_file():
        console.print(f"[green]✓[/] Config file exists at: [dim]{CONFIG_FILE}[/dim]")
    else:
        console.print(
            f"[yellow]○[/] No config file at [dim]{CONFIG_FILE}[/dim];"
            " using defaults."
        )
    try:
        config = ConfigManager(CONFIG_FILE).load_config()
        console.print("[green]✓[/] Configuration is valid.")
    except PokefetchError as e:
        console.print(
            f"[red]✗ Configuration validation failed: {escape(str(e))}[/red]"
        )
        raise typer.Exit(code=1) from e

    console.print(f"\n[dim]Testing connectivity to {config.api_base_url}...[/dim]")

    async def test_connection() -> bool:
        async with PokeAPIClient(
            config.api_base_url, timeout=config.timeout
        ) as client:
            try:
                await client.fetch_pokemon(config.identifier)
            except PokefetchError as e:
                console.print(
                    f"[red]✗ Connection test failed: {escape(str(e))}[/red]"
                )
                return False
        console.print("[green]✓[/] Successfully fetched the configured resource.")
        return True

    if not asyncio.run(test_connection()):
        issues_found = True
    console.print()
    if not issues_found:
        console.print(
            "[bold green]✓ All checks passed! Your setup looks good.[/bold green]\n"
        )
    else:
        console.print(
            "[bold red]✗ Some issues were found. "
            "Please review the messages above.[/bold red]\n"
        )
        raise typer.Exit(code=1)
