"""Verb-based HTTP client with content-type aware decoding."""

import time
from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from verbclient.codec import encode_body
from verbclient.config import ClientConfig, resolve_config
from verbclient.constants import HEADER_CONTENT_LENGTH
from verbclient.decoder import decode_body, read_body
from verbclient.errors import (
    ClientError,
    ClientErrorClass,
    HttpStatusError,
    ParseError,
    TransportError,
)
from verbclient.metrics import ClientMetrics
from verbclient.models import HttpMethod, WireRequest
from verbclient.redact import redact_headers, redact_url_credentials
from verbclient.settings import ClientSettings
from verbclient.transport import select_transport


logger = structlog.get_logger()


class Client:
    """HTTP client exposing get, post, put, and delete.

    Each call sends one request, buffers the whole response, and decodes
    it by its declared content type. Every runtime failure is passed to
    the configured error sink and then raised:

    - Error statuses (400-599) raise ``HttpStatusError``; its ``body`` is
      the decoded response body. The sink receives a generic
      ``ClientError`` instead.
    - Transport, content-type, and parse failures raise ``ClientError``
      subclasses; the sink receives the same exception object.
    - ``UnsupportedProtocolError`` is raised without calling the sink.
    """

    def __init__(
        self,
        url: str,
        options: Mapping[str, Any] | None = None,
        *,
        network_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Host to send requests to.
            options: Partial configuration overriding the defaults.
            network_transport: Optional httpx transport used for all requests.
        """
        self._config = resolve_config(url, options)
        self._network_transport = network_transport
        self._metrics = ClientMetrics.get_instance()
        self._log = logger.bind(component="client", host=url)

    @classmethod
    def from_settings(
        cls,
        url: str,
        settings: ClientSettings | None = None,
        **overrides: Any,
    ) -> "Client":
        """Create a client from environment settings.

        Args:
            url: Host to send requests to.
            settings: Settings to use; read from the environment if omitted.
            **overrides: Options taking precedence over the settings.

        Returns:
            Configured client.
        """
        settings = settings or ClientSettings()
        options = {**settings.to_overrides(), **overrides}
        return cls(url, options)

    @property
    def config(self) -> ClientConfig:
        """Resolved configuration of this client."""
        return self._config

    async def get(self, path: str) -> Any:
        """Send a GET request and return the decoded response body."""
        return await self._dispatch(HttpMethod.GET, path, None)

    async def post(self, path: str, body: object = None) -> Any:
        """Send a POST request and return the decoded response body."""
        return await self._dispatch(HttpMethod.POST, path, body)

    async def put(self, path: str, body: object = None) -> Any:
        """Send a PUT request and return the decoded response body."""
        return await self._dispatch(HttpMethod.PUT, path, body)

    async def delete(self, path: str, body: object = None) -> Any:
        """Send a DELETE request and return the decoded response body."""
        return await self._dispatch(HttpMethod.DELETE, path, body)

    async def _dispatch(
        self,
        method: HttpMethod,
        path: str,
        body: object,
    ) -> Any:
        """Send one request and decode its response.

        Args:
            method: Request method.
            path: Request path on the configured host.
            body: Optional request payload.

        Returns:
            Decoded response body.

        Raises:
            UnsupportedProtocolError: If the configured protocol is unknown.
            TransportError: If the connection fails.
            ParseError: If the response body cannot be decoded or parsed.
            UnsupportedContentTypeError: If the content type is unsupported.
            HttpStatusError: If the response status is in the error range.
        """
        config = self._config
        transport = select_transport(config.protocol, self._network_transport)

        wire_body = encode_body(body, config.encoding)
        headers = {key: str(value) for key, value in config.headers.items()}
        if wire_body is not None:
            for key in [k for k in headers if k.lower() == HEADER_CONTENT_LENGTH]:
                del headers[key]
            headers[HEADER_CONTENT_LENGTH] = str(wire_body.content_length)

        request = WireRequest(
            hostname=config.base_url,
            port=config.port,
            path=path,
            method=method,
            headers=headers,
            scheme=transport.scheme,
            body=wire_body.data if wire_body is not None else None,
        )

        log = self._log.bind(
            method=method.value,
            url=redact_url_credentials(request.url),
        )
        log.debug(
            "request_dispatch",
            headers=redact_headers(headers),
            bytes_sent=wire_body.content_length if wire_body else 0,
        )

        start_time_ns = time.perf_counter_ns()
        try:
            async with transport.open(request) as response:
                if wire_body is not None:
                    self._metrics.record_sent(wire_body.content_length)
                data = await read_body(response)
        except httpx.DecodingError as e:
            # Content-Encoding did not match the body, e.g. corrupt gzip
            parse_error = ParseError(f"Undecodable response body: {e}")
            self._report(parse_error, log)
            raise parse_error from e
        except httpx.RequestError as e:
            error = TransportError(
                f"Request failed: {str(e) or type(e).__name__}", url=request.url
            )
            self._report(error, log)
            raise error from e

        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        self._metrics.record_response(response.status_code, len(data), duration_ms)
        log.info(
            "request_complete",
            status_code=response.status_code,
            bytes=len(data),
            duration_ms=round(duration_ms, 2),
        )

        try:
            return decode_body(response.status_code, response.headers, data, config)
        except HttpStatusError:
            self._metrics.record_failure(ClientErrorClass.HTTP_STATUS)
            raise
        except ClientError as e:
            self._metrics.record_failure(e.error_class)
            log.warning("request_failed", **e.to_dict())
            raise

    def _report(
        self, error: ClientError, log: structlog.stdlib.BoundLogger
    ) -> None:
        """Record, log, and pass a failure to the error sink."""
        self._metrics.record_failure(error.error_class)
        log.warning("request_failed", **error.to_dict())
        self._config.error_sink(error)
