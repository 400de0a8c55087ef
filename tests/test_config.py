"""Tests for configuration management."""

from pathlib import Path

import pytest

from authscout import config


class TestLoadEnvFile:
    """Tests for load_env_file."""

    def test_load_env_file_missing_returns_empty(self, temp_dir: Path) -> None:
        assert config.load_env_file(temp_dir / ".env") == {}

    def test_load_env_file_parses_and_strips(self, temp_dir: Path) -> None:
        env_path = temp_dir / ".env"
        env_path.write_text("# comment\n\nFOO=\"bar\"\nBAZ='qux'\n")
        assert config.load_env_file(env_path) == {"FOO": "bar", "BAZ": "qux"}


class TestGetConfig:
    """Tests for precedence of configuration sources."""

    def test_default_when_nothing_set(self) -> None:
        assert config.get_config("AUTHSCOUT_MISSING", default="d") == "d"

    def test_global_yaml(self, isolated_config: Path) -> None:
        config_dir = isolated_config / ".authscout"
        config_dir.mkdir()
        (config_dir / "config.yml").write_text("AUTHSCOUT_RELAY_TIMEOUT: 7\n")
        assert config.get_relay_timeout() == 7.0

    def test_project_env_beats_global(self, isolated_config: Path, tmp_path: Path) -> None:
        (isolated_config / ".authscout").mkdir()
        (isolated_config / ".authscout" / "config.yml").write_text("AUTHSCOUT_RELAY_TIMEOUT: 7\n")
        (tmp_path / ".authscout").mkdir()
        (tmp_path / ".authscout" / ".env").write_text("AUTHSCOUT_RELAY_TIMEOUT=3\n")
        assert config.get_relay_timeout() == 3.0

    def test_environment_beats_project(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        (tmp_path / ".authscout").mkdir()
        (tmp_path / ".authscout" / ".env").write_text("AUTHSCOUT_RELAY_TIMEOUT=3\n")
        monkeypatch.setenv("AUTHSCOUT_RELAY_TIMEOUT", "9.5")
        assert config.get_relay_timeout() == 9.5


class TestTypedGetters:
    """Tests for typed getters and their fallbacks."""

    def test_relay_timeout_default(self) -> None:
        assert config.get_relay_timeout() == config.DEFAULT_RELAY_TIMEOUT

    def test_invalid_relay_timeout_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AUTHSCOUT_RELAY_TIMEOUT", "soon")
        assert config.get_relay_timeout() == config.DEFAULT_RELAY_TIMEOUT

    def test_scan_timeout_disabled_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert config.get_scan_timeout() is None
        monkeypatch.setenv("AUTHSCOUT_SCAN_TIMEOUT", "0")
        assert config.get_scan_timeout() is None
        monkeypatch.setenv("AUTHSCOUT_SCAN_TIMEOUT", "30")
        assert config.get_scan_timeout() == 30.0

    def test_min_body_length(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert config.get_min_body_length() == 100
        monkeypatch.setenv("AUTHSCOUT_MIN_BODY_LENGTH", "250")
        assert config.get_min_body_length() == 250
        monkeypatch.setenv("AUTHSCOUT_MIN_BODY_LENGTH", "lots")
        assert config.get_min_body_length() == 100

    def test_history_path(self, monkeypatch: pytest.MonkeyPatch, isolated_config: Path) -> None:
        assert config.get_history_path() == isolated_config / ".authscout" / "recent_scans.json"
        monkeypatch.setenv("AUTHSCOUT_HISTORY_PATH", "/tmp/elsewhere.json")
        assert config.get_history_path() == Path("/tmp/elsewhere.json")

    @pytest.mark.parametrize("value,expected", [("true", True), ("1", True), ("no", False)])
    def test_is_verbose(self, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
        monkeypatch.setenv("AUTHSCOUT_VERBOSE", value)
        assert config.is_verbose() is expected
