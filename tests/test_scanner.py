"""Tests for result aggregation and the scan pipeline."""

import asyncio
import json

import pytest
import respx
from httpx import Response

from authscout.errors import AllRelaysFailedError, InvalidUrlError
from authscout.modules.detector.models import (
    ButtonFinding,
    ContainerFinding,
    Findings,
    FormFinding,
    InputFinding,
    SocialFinding,
)
from authscout.modules.report import render_json, write_json_report
from authscout.modules.retrieval import RelayOrchestrator
from authscout.modules.scanner import (
    AuthScanner,
    build_scan_result,
    has_authentication,
    summarize,
)
from authscout.tools.http import HTTPClient


def _findings_with_only_controls() -> Findings:
    return Findings(
        login_buttons=[ButtonFinding(html="<button>Sign in</button>", index=0)],
        auth_containers=[ContainerFinding(html="<div></div>", index=0)],
        social_auth=[SocialFinding(html="<a></a>", provider="Github")],
    )


class TestAggregator:
    """Test summary counts and the authentication flag."""

    def test_controls_alone_do_not_count_as_authentication(self):
        assert has_authentication(_findings_with_only_controls()) is False

    @pytest.mark.parametrize(
        "findings",
        [
            Findings(forms=[FormFinding("<form>", 0, True, False, False)]),
            Findings(password_inputs=[InputFinding("<input>", 0)]),
            Findings(username_inputs=[InputFinding("<input>", 0)]),
            Findings(email_inputs=[InputFinding("<input>", 0)]),
        ],
    )
    def test_any_credential_category_counts(self, findings):
        assert has_authentication(findings) is True

    def test_total_excludes_auth_containers(self):
        findings = _findings_with_only_controls()
        findings.password_inputs.append(InputFinding("<input>", 0))
        findings.auth_containers.extend(
            ContainerFinding(html=f"<div id='{i}'></div>", index=i) for i in range(1, 4)
        )

        summary = summarize(findings)

        assert summary.auth_containers == 4
        assert summary.total == 3

    def test_build_scan_result_serializes_camel_case(self):
        findings = Findings(password_inputs=[InputFinding("<input>", 0, name="pwd")])
        result = build_scan_result(
            "https://example.com", findings, "RelayA", timestamp="2024-01-01T00:00:00+00:00"
        )

        data = json.loads(render_json(result))

        assert set(data) == {
            "url",
            "timestamp",
            "hasAuthentication",
            "findings",
            "relayUsed",
            "summary",
        }
        assert data["hasAuthentication"] is True
        assert data["relayUsed"] == "RelayA"
        assert data["summary"]["passwordInputs"] == 1
        assert data["summary"]["total"] == 1
        assert data["findings"]["passwordInputs"][0]["name"] == "pwd"
        assert data["findings"]["passwordInputs"][0]["scriptRendered"] is False
        assert set(data["findings"]) == {
            "forms",
            "passwordInputs",
            "usernameInputs",
            "emailInputs",
            "loginButtons",
            "authContainers",
            "socialAuth",
        }

    def test_timestamp_defaults_to_now(self):
        result = build_scan_result("https://example.com", Findings(), "RelayA")
        assert result.timestamp
        assert result.has_authentication is False

    def test_write_json_report(self, temp_dir):
        result = build_scan_result("https://example.com/login", Findings(), "RelayA")
        report_file = write_json_report(result, temp_dir / "reports")
        assert report_file.exists()
        assert report_file.name.startswith("authscan_example_com_")
        assert json.loads(report_file.read_text())["url"] == "https://example.com/login"


class TestAuthScanner:
    """Test the full scan pipeline against mocked relays."""

    @respx.mock
    async def test_scan_login_page(self, test_relays, login_page):
        respx.get(url__startswith="https://relay-a.test/").mock(return_value=Response(502))
        respx.get(url__startswith="https://relay-b.test/").mock(
            return_value=Response(200, text=login_page)
        )
        route_c = respx.get(url__startswith="https://relay-c.test/").mock(
            return_value=Response(200, text=login_page)
        )

        scanner = AuthScanner(RelayOrchestrator(test_relays))
        result = await scanner.scan("example.com/login")

        assert result.url == "https://example.com/login"
        assert result.relay_used == "RelayB"
        assert result.has_authentication is True
        assert result.summary.forms == 1
        assert result.summary.password_inputs == 1
        assert not route_c.called

    @respx.mock
    async def test_scan_plain_page(self, test_relays, plain_page):
        respx.get(url__startswith="https://relay-a.test/").mock(
            return_value=Response(200, text=plain_page)
        )

        result = await AuthScanner(RelayOrchestrator(test_relays)).scan("https://example.com")

        assert result.has_authentication is False
        assert result.summary.total == 0

    @respx.mock
    async def test_invalid_url_makes_no_request(self, test_relays):
        route = respx.get(url__startswith="https://relay-a.test/").mock(
            return_value=Response(200, text="x" * 500)
        )

        with pytest.raises(InvalidUrlError):
            await AuthScanner(RelayOrchestrator(test_relays)).scan("   ")
        assert not route.called

    @respx.mock
    async def test_all_relays_failed_produces_no_result(self, test_relays):
        for host in ("relay-a", "relay-b", "relay-c"):
            respx.get(url__startswith=f"https://{host}.test/").mock(return_value=Response(500))

        with pytest.raises(AllRelaysFailedError):
            await AuthScanner(RelayOrchestrator(test_relays)).scan("example.com")

    async def test_scan_deadline(self, monkeypatch, test_relays):
        async def slow_get(self, url, headers=None, timeout=None):
            await asyncio.sleep(5)

        monkeypatch.setattr(HTTPClient, "get", slow_get)

        scanner = AuthScanner(
            RelayOrchestrator(test_relays, attempt_timeout=10), scan_timeout=0.05
        )
        with pytest.raises(AllRelaysFailedError) as exc_info:
            await scanner.scan("example.com")
        assert "deadline" in str(exc_info.value)
