"""Debug utilities for scan visibility.

Thread-safe debug logging with rich formatting for console sessions.
"""

import json
import threading
from typing import Any

from rich.console import Console
from rich.syntax import Syntax

# Thread-local storage for debug state
_debug_state = threading.local()


def set_debug_enabled(enabled: bool) -> None:
    """Set debug mode for the current thread/session."""
    _debug_state.enabled = enabled


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled for the current thread/session."""
    return getattr(_debug_state, "enabled", False)


def debug_print(category: str, message: str, **data: Any) -> None:
    """Print debug information if debug mode is enabled.

    Args:
        category: Debug category (relay, detect, scan)
        message: Main message to display
        **data: Additional key-value pairs to display
    """
    if not is_debug_enabled():
        return
    console = Console(stderr=True)
    console.print(f"[DEBUG:{category}] {message}", style="bold cyan", markup=False)
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            try:
                json_str = json.dumps(value, indent=2)
                syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)
                console.print(f"  {key}:", style="dim", markup=False)
                console.print(syntax)
            except (TypeError, ValueError):
                console.print(f"  {key}: {value}", style="dim", markup=False)
        elif isinstance(value, list):
            console.print(f"  {key}: {', '.join(str(v) for v in value)}", style="dim", markup=False)
        elif isinstance(value, str) and len(value) > 100:
            # Truncate long strings
            console.print(
                f"  {key}: {value[:100]}... ({len(value)} chars)", style="dim", markup=False
            )
        else:
            console.print(f"  {key}: {value}", style="dim", markup=False)


def debug_relay_attempt(
    relay_name: str,
    request_url: str,
    start: bool = True,
    elapsed: float | None = None,
    outcome: str | None = None,
) -> None:
    """Log one relay attempt in debug mode.

    Args:
        relay_name: Name of the relay being tried
        request_url: Full relay request URL
        start: True for start event, False for completion
        elapsed: Time elapsed in seconds (for completion event)
        outcome: Success or skip reason (for completion event)
    """
    if not is_debug_enabled():
        return
    if start:
        debug_print("relay", f"→ {relay_name}", URL=request_url)
    else:
        debug_print(
            "relay",
            f"← {relay_name} +{elapsed:.1f}s" if elapsed is not None else f"← {relay_name}",
            Outcome=outcome,
        )


def debug_detection(counts: dict[str, int], synthetic: list[str]) -> None:
    """Log classifier output counts in debug mode."""
    if not is_debug_enabled():
        return
    debug_print(
        "detect",
        "classification complete",
        Counts=counts,
        ScriptRendered=synthetic or None,
    )
