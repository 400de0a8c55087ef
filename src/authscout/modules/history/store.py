"""Bounded, most-recent-first history of scanned URLs."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from authscout.modules.scanner.models import ScanResult

logger = logging.getLogger(__name__)

MAX_RECENT_SCANS = 5


@dataclass
class RecentScanEntry:
    """One remembered scan."""

    url: str
    timestamp: str
    has_authentication: bool
    total: int

    @classmethod
    def from_result(cls, result: ScanResult) -> "RecentScanEntry":
        return cls(
            url=result.url,
            timestamp=result.timestamp,
            has_authentication=result.has_authentication,
            total=result.summary.total,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecentScanEntry":
        return cls(
            url=str(data["url"]),
            timestamp=str(data.get("timestamp", "")),
            has_authentication=bool(data.get("hasAuthentication", False)),
            total=int(data.get("total", 0)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "timestamp": self.timestamp,
            "hasAuthentication": self.has_authentication,
            "total": self.total,
        }


class RecentScans:
    """JSON-file backed list of recent scans, unique by URL."""

    def __init__(self, path: Path, limit: int = MAX_RECENT_SCANS):
        self.path = Path(path)
        self.limit = limit

    def entries(self) -> list[RecentScanEntry]:
        """Stored entries, most recent first. Unreadable files read as empty."""
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return [RecentScanEntry.from_dict(item) for item in data][: self.limit]
        except (OSError, json.JSONDecodeError, TypeError, KeyError, ValueError) as e:
            logger.warning("Could not read scan history %s: %s", self.path, e)
            return []

    def record(self, result: ScanResult) -> list[RecentScanEntry]:
        """Put ``result`` at the front, dropping any older entry for the same URL."""
        entry = RecentScanEntry.from_result(result)
        updated = [entry] + [e for e in self.entries() if e.url != entry.url]
        updated = updated[: self.limit]
        self._write(updated)
        return updated

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()

    def _write(self, entries: list[RecentScanEntry]) -> None:
        payload = [e.to_dict() for e in entries]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not write scan history %s: %s", self.path, e)
