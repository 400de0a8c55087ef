"""Data models for relay retrieval."""

from dataclasses import dataclass
from urllib.parse import quote

# Characters left unescaped by JavaScript's encodeURIComponent besides [A-Za-z0-9_.-~].
_URI_COMPONENT_SAFE = "!~*'()"


@dataclass(frozen=True)
class RelaySource:
    """A third-party relay that fetches markup on our behalf."""

    name: str
    url_template: str

    def build_url(self, target_url: str) -> str:
        """Append the percent-encoded target to the relay template."""
        return self.url_template + quote(target_url, safe=_URI_COMPONENT_SAFE)


@dataclass
class RawDocument:
    """Markup obtained from the first relay that succeeded."""

    source_text: str
    relay_used: str


@dataclass
class RelayAttempt:
    """Outcome of one relay attempt that did not produce a document."""

    relay_name: str
    reason: str
    status_code: int | None = None
    elapsed: float = 0.0
