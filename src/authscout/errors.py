"""Exceptions raised by the scan pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from authscout.modules.retrieval.models import RelayAttempt

ALL_RELAYS_FAILED_MESSAGE = (
    "Could not retrieve the page through any relay. Possible causes:\n"
    "  - the site actively blocks automated requests\n"
    "  - cross-origin restrictions prevented the relays from fetching it\n"
    "  - a network failure or timeout occurred\n"
    "  - the URL is malformed or does not exist"
)


class AuthScoutError(Exception):
    """Base class for authscout errors."""


class InvalidUrlError(AuthScoutError, ValueError):
    """The scan target could not be normalized into an absolute URL."""

    def __init__(self, raw_input: str, reason: str = "not a valid absolute URL"):
        self.raw_input = raw_input
        self.reason = reason
        super().__init__(f"Invalid URL {raw_input!r}: {reason}")


class AllRelaysFailedError(AuthScoutError):
    """Every relay was tried without obtaining usable markup."""

    def __init__(self, url: str, attempts: list[RelayAttempt] | None = None, detail: str = ""):
        self.url = url
        self.attempts = list(attempts or [])
        self.detail = detail
        super().__init__(self.explanation())

    def explanation(self) -> str:
        lines = [ALL_RELAYS_FAILED_MESSAGE]
        if self.detail:
            lines.append(f"Detail: {self.detail}")
        if self.attempts:
            lines.append("Relay attempts:")
            lines.extend(f"  - {a.relay_name}: {a.reason}" for a in self.attempts)
        return "\n".join(lines)
