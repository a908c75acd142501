"""Transport capabilities for the supported protocols.

Each capability opens one request against a remote host and yields the
streaming response. Network I/O is delegated to httpx; a custom
``httpx.AsyncBaseTransport`` may be injected for tests or special routing.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import ClassVar

import httpx

from verbclient.errors import UnsupportedProtocolError
from verbclient.models import Protocol, WireRequest


class Transport:
    """Opens requests for a single scheme."""

    scheme: ClassVar[Protocol]

    def __init__(
        self, network_transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        """Initialize the transport.

        Args:
            network_transport: Optional httpx transport to send through.
        """
        self._network_transport = network_transport

    @asynccontextmanager
    async def open(self, request: WireRequest) -> AsyncIterator[httpx.Response]:
        """Send a request and yield its response before the body is read.

        No timeout is applied, redirects are returned as-is, and proxy
        environment variables are ignored.

        Args:
            request: The request to send, using this transport's scheme.

        Yields:
            Streaming response.

        Raises:
            httpx.TransportError: If the connection fails.
        """
        if request.scheme != self.scheme:
            request = request.model_copy(update={"scheme": self.scheme})

        async with (
            httpx.AsyncClient(
                transport=self._network_transport,
                timeout=None,
                follow_redirects=False,
                trust_env=False,
            ) as client,
            client.stream(
                request.method.value,
                request.url,
                headers=request.headers,
                content=request.body,
            ) as response,
        ):
            yield response


class HttpTransport(Transport):
    """Plain HTTP transport."""

    scheme = Protocol.HTTP


class HttpsTransport(Transport):
    """HTTP over TLS transport."""

    scheme = Protocol.HTTPS


TRANSPORTS: dict[Protocol, type[Transport]] = {
    Protocol.HTTP: HttpTransport,
    Protocol.HTTPS: HttpsTransport,
}


def select_transport(
    protocol: Protocol | str,
    network_transport: httpx.AsyncBaseTransport | None = None,
) -> Transport:
    """Look up the transport for a protocol.

    Args:
        protocol: Protocol tag from the client configuration.
        network_transport: Optional httpx transport handed to the capability.

    Returns:
        Transport for the protocol.

    Raises:
        UnsupportedProtocolError: If the protocol is not http or https.
    """
    try:
        key = Protocol(protocol)
    except ValueError:
        raise UnsupportedProtocolError(protocol) from None
    return TRANSPORTS[key](network_transport)
