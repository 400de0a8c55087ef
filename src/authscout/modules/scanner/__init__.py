"""Scan pipeline and result aggregation."""

from .aggregator import build_scan_result, has_authentication, summarize
from .main import AuthScanner, quick_scan
from .models import ScanResult, ScanSummary

__all__ = [
    "AuthScanner",
    "ScanResult",
    "ScanSummary",
    "build_scan_result",
    "has_authentication",
    "quick_scan",
    "summarize",
]
