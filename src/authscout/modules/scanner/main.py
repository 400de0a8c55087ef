"""Scan pipeline: normalize, fetch, parse, classify, aggregate."""

import asyncio
import logging

from authscout.errors import AllRelaysFailedError
from authscout.modules.detector import detect_auth_components, parse_document
from authscout.modules.normalizer import normalize_url
from authscout.modules.retrieval import RelayOrchestrator
from authscout.utils.debug import debug_print

from .aggregator import build_scan_result
from .models import ScanResult

logger = logging.getLogger(__name__)


class AuthScanner:
    """Scans a single URL for authentication components."""

    def __init__(
        self,
        orchestrator: RelayOrchestrator | None = None,
        scan_timeout: float | None = None,
    ):
        self.orchestrator = orchestrator or RelayOrchestrator()
        self.scan_timeout = scan_timeout

    async def scan(self, raw_input: str) -> ScanResult:
        """Scan ``raw_input``.

        Raises InvalidUrlError before any network activity when the target
        cannot be normalized, and AllRelaysFailedError when no relay
        returned usable markup.
        """
        url = normalize_url(raw_input)
        debug_print("scan", f"scanning {url}", Relays=[r.name for r in self.orchestrator.relays])

        if self.scan_timeout:
            try:
                raw = await asyncio.wait_for(self.orchestrator.fetch(url), self.scan_timeout)
            except asyncio.TimeoutError as exc:
                raise AllRelaysFailedError(
                    url, detail=f"scan deadline of {self.scan_timeout:g}s exceeded"
                ) from exc
        else:
            raw = await self.orchestrator.fetch(url)

        findings = detect_auth_components(parse_document(raw.source_text))
        result = build_scan_result(url, findings, raw.relay_used)
        logger.info(
            "Scanned %s via %s: authentication=%s total=%d",
            url,
            raw.relay_used,
            result.has_authentication,
            result.summary.total,
        )
        return result


async def quick_scan(raw_input: str) -> ScanResult:
    """Scan with default relays and settings."""
    return await AuthScanner().scan(raw_input)
