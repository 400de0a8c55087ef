"""Ordered, sequential relay fallback for fetching page markup."""

import asyncio
import logging
import time
from collections.abc import Sequence

import httpx

from authscout.config import DEFAULT_MIN_BODY_LENGTH, DEFAULT_RELAY_TIMEOUT
from authscout.errors import AllRelaysFailedError
from authscout.tools.http import HTML_ACCEPT, HTTPClient
from authscout.utils.debug import debug_relay_attempt

from .models import RawDocument, RelayAttempt, RelaySource
from .relays import DEFAULT_RELAYS

logger = logging.getLogger(__name__)


class RelayOrchestrator:
    """Fetch markup through relays, one at a time, in priority order.

    The first relay returning a 2xx response with a body longer than
    ``min_body_length`` wins and later relays are never contacted. Each
    attempt has its own timeout; a timed-out attempt only moves on to the
    next relay.
    """

    def __init__(
        self,
        relays: Sequence[RelaySource] = DEFAULT_RELAYS,
        attempt_timeout: float = DEFAULT_RELAY_TIMEOUT,
        min_body_length: int = DEFAULT_MIN_BODY_LENGTH,
    ):
        if not relays:
            raise ValueError("At least one relay is required")
        self.relays = tuple(relays)
        self.attempt_timeout = attempt_timeout
        self.min_body_length = min_body_length

    async def fetch(self, url: str) -> RawDocument:
        """Return the markup for ``url`` or raise AllRelaysFailedError."""
        attempts: list[RelayAttempt] = []

        async with HTTPClient(timeout=self.attempt_timeout) as client:
            for relay in self.relays:
                document, attempt = await self._try_relay(client, relay, url)
                if document is not None:
                    logger.info("Fetched %s via %s", url, relay.name)
                    return document
                logger.info("Relay %s skipped for %s: %s", relay.name, url, attempt.reason)
                attempts.append(attempt)

        raise AllRelaysFailedError(url, attempts)

    async def _try_relay(
        self,
        client: HTTPClient,
        relay: RelaySource,
        url: str,
    ) -> tuple[RawDocument | None, RelayAttempt | None]:
        request_url = relay.build_url(url)
        debug_relay_attempt(relay.name, request_url)
        started = time.perf_counter()

        try:
            response = await asyncio.wait_for(
                client.get(request_url, headers={"Accept": HTML_ACCEPT}),
                timeout=self.attempt_timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            return None, self._skip(relay, f"timed out after {self.attempt_timeout:g}s", started)
        except (httpx.HTTPError, OSError) as exc:
            return None, self._skip(relay, f"network error: {exc.__class__.__name__}", started)

        if not response.is_success:
            return None, self._skip(
                relay, f"HTTP {response.status_code}", started, response.status_code
            )
        if len(response.body) <= self.min_body_length:
            return None, self._skip(
                relay,
                f"response too short ({len(response.body)} chars)",
                started,
                response.status_code,
            )

        debug_relay_attempt(
            relay.name,
            request_url,
            start=False,
            elapsed=time.perf_counter() - started,
            outcome=f"ok ({len(response.body)} chars)",
        )
        return RawDocument(source_text=response.body, relay_used=relay.name), None

    @staticmethod
    def _skip(
        relay: RelaySource,
        reason: str,
        started: float,
        status_code: int | None = None,
    ) -> RelayAttempt:
        elapsed = time.perf_counter() - started
        debug_relay_attempt(relay.name, "", start=False, elapsed=elapsed, outcome=reason)
        return RelayAttempt(
            relay_name=relay.name,
            reason=reason,
            status_code=status_code,
            elapsed=elapsed,
        )
