"""Aggregation of classifier findings into a scan result."""

from datetime import datetime, timezone

from authscout.modules.detector.models import Findings

from .models import ScanResult, ScanSummary


def has_authentication(findings: Findings) -> bool:
    """Forms or credential inputs qualify; buttons, containers and social links do not."""
    return bool(
        findings.forms
        or findings.password_inputs
        or findings.username_inputs
        or findings.email_inputs
    )


def summarize(findings: Findings) -> ScanSummary:
    """Count findings per category.

    ``total`` leaves out auth containers, since their contents are already
    counted as forms, inputs or buttons.
    """
    summary = ScanSummary(
        forms=len(findings.forms),
        password_inputs=len(findings.password_inputs),
        username_inputs=len(findings.username_inputs),
        email_inputs=len(findings.email_inputs),
        login_buttons=len(findings.login_buttons),
        auth_containers=len(findings.auth_containers),
        social_auth=len(findings.social_auth),
    )
    summary.total = (
        summary.forms
        + summary.password_inputs
        + summary.username_inputs
        + summary.email_inputs
        + summary.login_buttons
        + summary.social_auth
    )
    return summary


def build_scan_result(
    url: str,
    findings: Findings,
    relay_used: str,
    timestamp: str | None = None,
) -> ScanResult:
    """Combine findings into a ScanResult."""
    return ScanResult(
        url=url,
        timestamp=timestamp or datetime.now(timezone.utc).isoformat(),
        has_authentication=has_authentication(findings),
        findings=findings,
        relay_used=relay_used,
        summary=summarize(findings),
    )
