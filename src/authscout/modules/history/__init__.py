"""Recent-scan history."""

from .store import MAX_RECENT_SCANS, RecentScanEntry, RecentScans

__all__ = ["MAX_RECENT_SCANS", "RecentScanEntry", "RecentScans"]
