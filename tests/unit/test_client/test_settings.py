"""Unit tests for environment settings."""

import pytest

from verbclient.settings import ClientSettings, get_settings


class TestClientSettings:
    """Tests for ClientSettings."""

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """VERBCLIENT_* variables populate the settings."""
        monkeypatch.setenv("VERBCLIENT_PROTOCOL", "https")
        monkeypatch.setenv("VERBCLIENT_PORT", "8443")

        settings = get_settings()

        assert settings.protocol == "https"
        assert settings.port == 8443
        assert settings.encoding is None

    def test_to_overrides_skips_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Only provided values become overrides."""
        monkeypatch.delenv("VERBCLIENT_PROTOCOL", raising=False)
        monkeypatch.delenv("VERBCLIENT_PORT", raising=False)
        monkeypatch.delenv("VERBCLIENT_ENCODING", raising=False)

        settings = ClientSettings(encoding="latin-1")

        assert settings.to_overrides() == {"encoding": "latin-1"}
