"""Data models for scan results."""

from dataclasses import dataclass, field
from typing import Any

from authscout.modules.detector.models import Findings


@dataclass
class ScanSummary:
    """Per-category counts of a scan."""

    forms: int = 0
    password_inputs: int = 0
    username_inputs: int = 0
    email_inputs: int = 0
    login_buttons: int = 0
    auth_containers: int = 0
    social_auth: int = 0
    total: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "forms": self.forms,
            "passwordInputs": self.password_inputs,
            "usernameInputs": self.username_inputs,
            "emailInputs": self.email_inputs,
            "loginButtons": self.login_buttons,
            "authContainers": self.auth_containers,
            "socialAuth": self.social_auth,
            "total": self.total,
        }


@dataclass
class ScanResult:
    """Outcome of scanning one URL."""

    url: str
    timestamp: str
    has_authentication: bool
    findings: Findings
    relay_used: str
    summary: ScanSummary = field(default_factory=ScanSummary)

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "timestamp": self.timestamp,
            "hasAuthentication": self.has_authentication,
            "findings": self.findings.to_dict(),
            "relayUsed": self.relay_used,
            "summary": self.summary.to_dict(),
        }
