"""CLI command modules; importing this package registers every command."""

from . import info_commands, scan_command
from .shared import app, console

__all__ = ["app", "console", "info_commands", "scan_command"]
