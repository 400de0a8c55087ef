"""Test configuration and fixtures for authscout."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from authscout.modules.retrieval import RelaySource

LOGIN_PAGE = """<!DOCTYPE html>
<html>
<head><title>Sign in</title></head>
<body>
  <div class="auth-wrapper" id="login-panel">
    <form action="/session" method="post" id="login-form">
      <input type="text" name="username" id="user" placeholder="Username" autocomplete="username">
      <input type="password" name="password" id="pass" autocomplete="current-password">
      <button type="submit">Sign in</button>
    </form>
  </div>
  <a class="btn google-login" href="/oauth/google">Sign in with Google</a>
</body>
</html>
"""

PLAIN_PAGE = """<!DOCTYPE html>
<html>
<head><title>About us</title></head>
<body>
  <h1>About</h1>
  <p>We are a small company that makes very nice things for very nice people.</p>
</body>
</html>
"""


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep tests away from the real ~/.authscout and any AUTHSCOUT_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(tmp_path)
    for key in (
        "AUTHSCOUT_RELAY_TIMEOUT",
        "AUTHSCOUT_SCAN_TIMEOUT",
        "AUTHSCOUT_MIN_BODY_LENGTH",
        "AUTHSCOUT_HISTORY_PATH",
        "AUTHSCOUT_VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_relays() -> list[RelaySource]:
    """Three fake relays in priority order."""
    return [
        RelaySource(name="RelayA", url_template="https://relay-a.test/raw?url="),
        RelaySource(name="RelayB", url_template="https://relay-b.test/?"),
        RelaySource(name="RelayC", url_template="https://relay-c.test/proxy?quest="),
    ]


@pytest.fixture
def login_page() -> str:
    return LOGIN_PAGE


@pytest.fixture
def plain_page() -> str:
    return PLAIN_PAGE
