"""Console rendering of scan results and history."""

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from authscout.modules.detector.models import Finding
from authscout.modules.history import RecentScanEntry
from authscout.modules.scanner import ScanResult

from .shared import console

CATEGORY_TITLES = {
    "forms": "Login Forms",
    "passwordInputs": "Password Inputs",
    "usernameInputs": "Username Inputs",
    "emailInputs": "Email Inputs",
    "loginButtons": "Login Buttons",
    "authContainers": "Auth Containers",
    "socialAuth": "Social Sign-in",
}


def render_summary(result: ScanResult) -> None:
    if result.has_authentication:
        headline = "[green]Authentication found[/green]"
        border = "green"
    else:
        headline = "[yellow]No authentication detected[/yellow]"
        border = "yellow"

    table = Table(show_header=True, header_style="bold")
    table.add_column("Category")
    table.add_column("Count", justify="right")
    counts = result.summary.to_dict()
    for key, title in CATEGORY_TITLES.items():
        table.add_row(title, str(counts[key]))
    table.add_row("[bold]Total[/bold]", f"[bold]{result.summary.total}[/bold]")

    console.print(
        Panel(
            f"{headline}\n"
            f"[bold]URL:[/bold] {escape(result.url)}\n"
            f"[bold]Relay:[/bold] {escape(result.relay_used)}\n"
            f"[bold]Scanned:[/bold] {result.timestamp}",
            title="Scan Result",
            border_style=border,
        )
    )
    console.print(table)


def _describe(finding: Finding) -> str:
    data = finding.to_dict()
    skip = {"html", "index", "scriptRendered"}
    parts = [f"{k}={v}" for k, v in data.items() if k not in skip and v not in (None, "")]
    if finding.script_rendered:
        parts.insert(0, "script-rendered")
    return ", ".join(parts)


def render_findings(result: ScanResult) -> None:
    for key, items in result.findings.categories().items():
        if not items:
            continue
        console.print(f"\n[bold cyan]{CATEGORY_TITLES[key]}[/bold cyan] ({len(items)})")
        for finding in items:
            console.print(f"  • {escape(_describe(finding))}")
            console.print(f"    [dim]{escape(finding.html)}[/dim]")


def render_history(entries: list[RecentScanEntry]) -> None:
    if not entries:
        console.print("[dim]No recent scans.[/dim]")
        return

    table = Table(title="Recent Scans", show_header=True, header_style="bold")
    table.add_column("URL")
    table.add_column("Auth")
    table.add_column("Findings", justify="right")
    table.add_column("Scanned")
    for entry in entries:
        auth = "[green]yes[/green]" if entry.has_authentication else "[yellow]no[/yellow]"
        table.add_row(escape(entry.url), auth, str(entry.total), entry.timestamp)
    console.print(table)
