"""Relay-based retrieval of page markup."""

from .models import RawDocument, RelayAttempt, RelaySource
from .orchestrator import RelayOrchestrator
from .relays import DEFAULT_RELAYS

__all__ = [
    "DEFAULT_RELAYS",
    "RawDocument",
    "RelayAttempt",
    "RelayOrchestrator",
    "RelaySource",
]
