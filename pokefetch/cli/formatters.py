"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pokefetch.models.pokemon import Pokemon
from pokefetch.models.session import FetchStats, SpriteResult
from pokefetch.utils.formatting import format_height, format_size


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "ApiRequestError": [
            "• Check your internet connection.",
            "• Verify the API URL with `pokefetch --show-config`.",
            "• Run `pokefetch diagnose` to test connectivity.",
        ],
        "UnexpectedStatusError": [
            "• A 404 usually means the name or number does not exist.",
            "• Names are lower case, e.g. `pokefetch fetch bulbasaur`.",
            "• The API might be temporarily unavailable; try again later.",
        ],
        "MalformedResponseError": [
            "• The API URL may not point to a PokeAPI-compatible server.",
            "• Run the command with -vv for detailed logs.",
        ],
        "ConfigurationError": [
            "• Check the values in your configuration file.",
            "• Run `pokefetch init --force` to restore the defaults.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_pokemon(pokemon: Pokemon, console: Console | None = None):
    """Displays the selected fields of a Pokémon followed by its stat list."""
    console = console or Console()

    details = Table(show_header=False, box=None, padding=(0, 2))
    details.add_column(style="bold cyan", justify="right")
    details.add_column()

    details.add_row("Name:", f"[bold]{escape(pokemon.name)}[/bold]")
    details.add_row("Base Experience:", str(pokemon.base_experience))
    details.add_row(
        "Height:", f"{pokemon.height} [dim]({format_height(pokemon.height)})[/dim]"
    )
    details.add_row("Id:", str(pokemon.id))
    for side, url in pokemon.sprites.by_side():
        details.add_row(
            f"{side.capitalize()} Sprite:", escape(url) if url else "[dim]none[/dim]"
        )

    console.print(
        Panel(
            details,
            title=f"[bold]#{pokemon.id} {escape(pokemon.name)}[/bold]",
            border_style="cyan",
            expand=False,
        )
    )

    if not pokemon.stats:
        console.print("[dim]No stats reported.[/dim]")
        return

    stats_table = Table(title="Stats", box=box.ROUNDED)
    stats_table.add_column("Stat", style="cyan")
    stats_table.add_column("Base", justify="right", style="green")
    stats_table.add_column("URL", style="dim")
    for info in pokemon.stats:
        stats_table.add_row(
            escape(info.stat.name), str(info.base_stat), escape(info.stat.url)
        )
    console.print(stats_table)


def print_sprite_result(result: SpriteResult, console: Console | None = None):
    """Reports the outcome of saving one sprite."""
    console = console or Console()
    side = result.side.capitalize()

    if result.saved:
        console.print(
            f"[green]✓ {side} sprite saved as:[/green] {escape(str(result.path))}"
            f" [dim]({format_size(result.size)})[/dim]"
        )
    elif result.error is not None:
        action = "saving" if result.failed_step == "save" else "downloading"
        console.print(
            f"[red]✗ Error {action} {result.side} sprite:[/red] "
            f"{escape(str(result.error))}"
        )


def print_summary(stats: FetchStats, console: Console | None = None):
    """Displays a one-line summary of the sprite downloads."""
    console = console or Console()
    parts = [f"[green]{stats.sprites_saved} saved[/green]"]
    if stats.sprites_failed:
        parts.append(f"[red]{stats.sprites_failed} failed[/red]")
    if stats.sprites_skipped:
        parts.append(f"[yellow]{stats.sprites_skipped} skipped[/yellow]")
    parts.append(f"[cyan]{format_size(stats.total_bytes_written)}[/cyan] written")
    console.print(f"\n[bold]Sprites:[/bold] {', '.join(parts)}")


def print_config(config_path: Path, config_data: dict[str, Any]):
    """Displays the effective configuration."""
    console = Console()
    content = ""
    for key, value in config_data.items():
        content += f"{key} = {value}\n"

    source = config_path if config_path.is_file() else f"{config_path} (not found)"
    console.print(
        Panel(
            escape(content.strip()),
            title=f"Configuration ([dim]{escape(str(source))}[/dim])",
            border_style="cyan",
        )
    )
