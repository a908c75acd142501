"""Minimal async HTTP client with content-type aware decoding.

This package provides verb helpers (get/post/put/delete) with:
- Transport selection for http and https
- JSON serialization of structured request bodies
- Response decoding driven by the declared content type
- A single error sink observing every failure
- Structured logging and metrics
"""

from verbclient.client import Client
from verbclient.codec import encode_body
from verbclient.config import ClientConfig, resolve_config
from verbclient.decoder import (
    decode_body,
    extract_content_type,
    parse_response_data,
    read_body,
)
from verbclient.errors import (
    ClientError,
    ClientErrorClass,
    HttpStatusError,
    ParseError,
    TransportError,
    UnsupportedContentTypeError,
    UnsupportedProtocolError,
)
from verbclient.logging import configure_logging, get_logger, log_error
from verbclient.metrics import ClientMetrics
from verbclient.models import HttpMethod, Protocol, WireBody, WireRequest
from verbclient.settings import ClientSettings, get_settings
from verbclient.status import is_error_status
from verbclient.transport import (
    HttpsTransport,
    HttpTransport,
    Transport,
    select_transport,
)


__all__ = [
    # Client
    "Client",
    # Config
    "ClientConfig",
    "ClientSettings",
    "get_settings",
    "resolve_config",
    # Models
    "HttpMethod",
    "Protocol",
    "WireBody",
    "WireRequest",
    # Transport
    "HttpTransport",
    "HttpsTransport",
    "Transport",
    "select_transport",
    # Codec
    "encode_body",
    # Decoder
    "decode_body",
    "extract_content_type",
    "parse_response_data",
    "read_body",
    "is_error_status",
    # Errors
    "ClientError",
    "ClientErrorClass",
    "HttpStatusError",
    "ParseError",
    "TransportError",
    "UnsupportedContentTypeError",
    "UnsupportedProtocolError",
    # Logging
    "configure_logging",
    "get_logger",
    "log_error",
    # Metrics
    "ClientMetrics",
]
