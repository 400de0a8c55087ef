"""History, relay and preset listing commands."""

import typer
from rich.table import Table

from .deps import cli_module
from .rendering import render_history
from .shared import app, console


@app.command()
def history(
    clear: bool = typer.Option(False, "--clear", help="Forget all recent scans"),
) -> None:
    """Show the most recent scans."""
    cli = cli_module()
    store = cli.RecentScans(cli.get_history_path())
    if clear:
        store.clear()
        console.print("[green]Scan history cleared.[/green]")
        return
    render_history(store.entries())


@app.command()
def relays() -> None:
    """List relays in the order they are tried."""
    cli = cli_module()
    table = Table(title="Relays (priority order)", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("URL template")
    for position, relay in enumerate(cli.DEFAULT_RELAYS, start=1):
        table.add_row(str(position), relay.name, relay.url_template)
    console.print(table)


@app.command()
def presets() -> None:
    """List preset login pages usable as ``preset:<key>``."""
    cli = cli_module()
    table = Table(title="Preset targets", show_header=True, header_style="bold")
    table.add_column("Key")
    table.add_column("Name")
    table.add_column("URL")
    for preset in cli.PRESET_TARGETS:
        table.add_row(preset.key, preset.name, preset.url)
    console.print(table)


@app.command()
def version() -> None:
    """Show the installed authscout version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        current_version = pkg_version("authscout")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"authscout {current_version}")
