"""Unit tests for client configuration resolution."""

import pytest
from pydantic import ValidationError

from verbclient.config import ClientConfig, resolve_config
from verbclient.logging import log_error
from verbclient.models import Protocol


class TestResolveConfig:
    """Tests for resolve_config."""

    def test_default_values(self) -> None:
        """Omitted options take the documented defaults."""
        config = resolve_config("localhost")

        assert callable(config.error_sink)
        assert config.error_sink is log_error
        assert config.protocol == Protocol.HTTP
        assert config.encoding == "utf8"
        assert config.base_url == "localhost"
        assert config.port is None
        assert config.headers == {}

    def test_overrides_replace_defaults(self) -> None:
        """Supplied options override their defaults."""

        def sink(error: Exception) -> None:
            pass

        config = resolve_config(
            "example.com",
            {
                "protocol": "https",
                "encoding": "latin-1",
                "port": 8443,
                "error_sink": sink,
                "headers": {"accept": "application/json"},
            },
        )

        assert config.protocol == Protocol.HTTPS
        assert config.encoding == "latin-1"
        assert config.port == 8443
        assert config.error_sink is sink
        assert config.headers == {"accept": "application/json"}

    def test_url_wins_over_base_url_option(self) -> None:
        """base_url always equals the url argument."""
        config = resolve_config("localhost", {"base_url": "other.example.com"})

        assert config.base_url == "localhost"

    def test_none_values_fall_back_to_defaults(self) -> None:
        """Options explicitly set to None behave as omitted."""
        config = resolve_config("localhost", {"headers": None, "protocol": None})

        assert config.headers == {}
        assert config.protocol == Protocol.HTTP

    def test_partial_overrides_keep_other_defaults(self) -> None:
        """Overriding one field leaves the others at their defaults."""
        config = resolve_config("localhost", {"port": 9000})

        assert config.port == 9000
        assert config.protocol == Protocol.HTTP
        assert config.encoding == "utf8"
        assert config.headers == {}

    def test_headers_are_copied(self) -> None:
        """Mutating the caller's mapping does not affect the config."""
        headers = {"x-request-id": "1"}
        config = resolve_config("localhost", {"headers": headers})

        headers["x-request-id"] = "2"

        assert config.headers == {"x-request-id": "1"}

    def test_numeric_header_values_accepted(self) -> None:
        """Header values may be numbers as well as strings."""
        config = resolve_config("localhost", {"headers": {"x-count": 5}})

        assert config.headers == {"x-count": 5}

    def test_unknown_protocol_is_accepted(self) -> None:
        """Protocol values are only checked when a transport is selected."""
        config = resolve_config("localhost", {"protocol": "ftp"})

        assert config.protocol == "ftp"

    def test_unknown_option_rejected(self) -> None:
        """Unrecognized option names fail validation."""
        with pytest.raises(ValidationError):
            resolve_config("localhost", {"timeout": 5})


class TestClientConfig:
    """Tests for the ClientConfig model."""

    def test_frozen(self) -> None:
        """Configuration cannot be reassigned after construction."""
        config = ClientConfig(base_url="localhost")

        with pytest.raises(ValidationError):
            config.port = 80  # type: ignore[misc]

    def test_rejects_wrong_port_type(self) -> None:
        """Type shape is validated."""
        with pytest.raises(ValidationError):
            ClientConfig(base_url="localhost", port="not-a-port")  # type: ignore[arg-type]
