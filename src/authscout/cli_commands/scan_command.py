"""Scan CLI command."""

import asyncio
from pathlib import Path

import typer
from rich.markup import escape

from authscout.errors import AllRelaysFailedError, InvalidUrlError

from .deps import cli_module
from .rendering import render_findings, render_summary
from .shared import app, configure_logging, console

PRESET_PREFIX = "preset:"


def resolve_target(target: str) -> str:
    """Expand ``preset:<key>`` into the preset's URL."""
    if not target.lower().startswith(PRESET_PREFIX):
        return target
    cli = cli_module()
    key = target[len(PRESET_PREFIX) :]
    preset = cli.get_preset(key)
    if preset is None:
        console.print(f"[red]Unknown preset: {key}. Run 'authscout presets' to list them.[/red]")
        raise typer.Exit(1)
    return preset.url


@app.command()
def scan(
    target: str = typer.Argument(..., help="URL to scan (scheme optional) or preset:<key>"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Also write a JSON report into this directory"
    ),
    relay_timeout: float | None = typer.Option(
        None, "--relay-timeout", help="Per-relay timeout in seconds"
    ),
    no_history: bool = typer.Option(False, "--no-history", help="Do not record this scan"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show relay and detection traces"),
) -> None:
    """Fetch a page through the relays and report its authentication components."""
    cli = cli_module()
    configure_logging(verbose or cli.is_verbose())

    orchestrator = cli.RelayOrchestrator(
        attempt_timeout=relay_timeout if relay_timeout else cli.get_relay_timeout(),
        min_body_length=cli.get_min_body_length(),
    )
    scanner = cli.AuthScanner(orchestrator, scan_timeout=cli.get_scan_timeout())

    url = resolve_target(target)
    if not as_json:
        console.print(f"[blue]Scanning {url}...[/blue]")

    try:
        result = asyncio.run(scanner.scan(url))
    except InvalidUrlError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
    except AllRelaysFailedError as exc:
        console.print(f"[red]{escape(exc.explanation())}[/red]")
        raise typer.Exit(1) from exc

    if as_json:
        typer.echo(cli.render_json(result))
    else:
        render_summary(result)
        render_findings(result)

    if output is not None:
        report_file = cli.write_json_report(result, output)
        if not as_json:
            console.print(f"\n[green]Report written:[/green] {report_file}")

    if not no_history:
        cli.RecentScans(cli.get_history_path()).record(result)
