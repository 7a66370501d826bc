#!/usr/bin/env python3
"""
Unistore CLI

Main entrypoint for the unistore command-line tool.
"""

import sys
from dataclasses import replace

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import fetch, resolve
from unistore.config import Settings
from unistore.core.errors import ConfigError
from unistore.logging_config import setup_logging
from unistore.metrics import start_metrics_server

app = typer.Typer(
    name="unistore",
    help="Unidirectional state container and content dispatcher CLI",
    add_completion=False,
)

console = Console()

app.command("resolve")(resolve.resolve_command)
app.command("tabs")(fetch.tabs_command)
app.command("text")(fetch.text_command)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log dispatches (DEBUG, text format)"),
):
    """Load settings from the environment and configure logging."""
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)

    # Keep stdout clean for --json output unless asked for dispatch logs
    if verbose:
        settings = replace(settings, log_level="DEBUG", log_format="text")
    else:
        settings = replace(settings, log_level="WARNING")
    setup_logging(settings, stream=sys.stderr)
    start_metrics_server(settings.metrics_enabled, settings.metrics_port)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from unistore import __version__ as core_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Unistore CLI[/bold]", f"v{__version__}")
    table.add_row("Core", f"v{core_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
