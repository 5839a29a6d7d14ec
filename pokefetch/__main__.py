"""
Console entry point for `pokefetch` and `python -m pokefetch`.

Commands report their own expected failures; anything that escapes the Typer
app is rendered here as an error panel and ends the process with code 1.
"""

import logging
import sys

import typer
from rich.console import Console

from pokefetch import __version__
from pokefetch.cli.app import app
from pokefetch.cli.formatters import format_error_with_suggestions
from pokefetch.exceptions import PokefetchError

log = logging.getLogger("pokefetch")

EXIT_INTERRUPTED = 130


def main() -> None:
    console = Console(stderr=True)

    try:
        app()
    except (typer.Exit, typer.Abort):
        pass
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        sys.exit(EXIT_INTERRUPTED)
    except PokefetchError as e:
        console.print(format_error_with_suggestions(e))
        sys.exit(1)
    except Exception as e:
        context = {"version": __version__, "args": sys.argv[1:]}
        console.print(format_error_with_suggestions(e, context))
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
