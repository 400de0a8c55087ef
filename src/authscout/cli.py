"""authscout CLI - authentication surface detection for web pages."""

from authscout.cli_commands import app, console
from authscout.config import (
    get_history_path,
    get_min_body_length,
    get_relay_timeout,
    get_scan_timeout,
    is_verbose,
)
from authscout.modules.history import RecentScans
from authscout.modules.presets import PRESET_TARGETS, get_preset
from authscout.modules.report import render_json, write_json_report
from authscout.modules.retrieval import DEFAULT_RELAYS, RelayOrchestrator
from authscout.modules.scanner import AuthScanner

__all__ = [
    "AuthScanner",
    "DEFAULT_RELAYS",
    "PRESET_TARGETS",
    "RecentScans",
    "RelayOrchestrator",
    "app",
    "console",
    "get_history_path",
    "get_min_body_length",
    "get_preset",
    "get_relay_timeout",
    "get_scan_timeout",
    "is_verbose",
    "main",
    "render_json",
    "write_json_report",
]


def main():
    """Entry point for the CLI."""
    app()
