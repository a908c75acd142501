"""Data models for wire requests and bodies."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Protocol(str, Enum):
    """Schemes a client can speak."""

    HTTP = "http"
    HTTPS = "https"


class HttpMethod(str, Enum):
    """Request methods exposed by the verb API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class WireBody(BaseModel):
    """Serialized form of an outgoing request body."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str | None = Field(
        default=None, description="Serialized body text, None for raw bytes"
    )
    data: bytes = Field(description="Bytes written to the wire")

    @property
    def content_length(self) -> int:
        """Byte length of the encoded body."""
        return len(self.data)


class WireRequest(BaseModel):
    """A request ready to be handed to a transport.

    Holds its own copy of the headers, so it never shares state with the
    client configuration or with other requests.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hostname: str
    port: int | None = None
    path: str = "/"
    method: HttpMethod
    headers: dict[str, str] = Field(default_factory=dict)
    scheme: Protocol
    body: bytes | None = None

    @property
    def url(self) -> str:
        """Absolute URL assembled from scheme, host, port, and path."""
        netloc = self.hostname if self.port is None else f"{self.hostname}:{self.port}"
        path = self.path if self.path.startswith("/") else f"/{self.path}"
        return f"{self.scheme.value}://{netloc}{path}"
