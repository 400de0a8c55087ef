"""Shared CLI app objects."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from authscout.utils.debug import set_debug_enabled

app = typer.Typer(
    name="authscout",
    help="Detect login forms and authentication components on web pages",
    no_args_is_help=True,
)
console = Console()


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through rich; debug tracing when verbose."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    set_debug_enabled(verbose)
