"""Relay catalogue in priority order."""

from .models import RelaySource

# Order encodes priority.
DEFAULT_RELAYS: tuple[RelaySource, ...] = (
    RelaySource(name="AllOrigins", url_template="https://api.allorigins.win/raw?url="),
    RelaySource(name="CorsProxy", url_template="https://corsproxy.io/?url="),
    RelaySource(name="CodeTabs", url_template="https://api.codetabs.com/v1/proxy?quest="),
)
