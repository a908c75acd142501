"""Error types for the client.

Every failure other than an HTTP error status is raised as a
``ClientError`` subclass. Error statuses are raised as ``HttpStatusError``,
which carries the decoded response body instead of a message and is
intentionally kept outside the ``ClientError`` hierarchy.
"""

from enum import Enum
from typing import Any


class ClientErrorClass(str, Enum):
    """Classification of client errors.

    - PROTOCOL: Configured protocol is not http or https
    - CONTENT_TYPE: Response declared an unsupported content type
    - PARSE: Response body did not parse under its content type
    - TRANSPORT: Connection failed, was reset, or aborted mid-stream
    - HTTP_STATUS: Response status was in the error range
    """

    PROTOCOL = "PROTOCOL"
    CONTENT_TYPE = "CONTENT_TYPE"
    PARSE = "PARSE"
    TRANSPORT = "TRANSPORT"
    HTTP_STATUS = "HTTP_STATUS"


class ClientError(Exception):
    """Base exception for client errors.

    Provides structured error information for logging and error sinks.
    """

    def __init__(
        self,
        error_class: ClientErrorClass,
        message: str,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        """Initialize the client error.

        Args:
            error_class: Classification of the error.
            message: Human-readable error message.
            details: Additional structured error details.
        """
        super().__init__(message)
        self.error_class = error_class
        self.message = message
        self.details = details or {}

    def to_dict(
        self,
    ) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error_class": self.error_class.value,
            "message": self.message,
            "details": self.details,
        }


class UnsupportedProtocolError(ClientError):
    """Configured protocol has no transport.

    Raised before any network activity. The error sink is not invoked.
    """

    def __init__(self, protocol: object) -> None:
        """Initialize the error.

        Args:
            protocol: The offending protocol value.
        """
        super().__init__(
            error_class=ClientErrorClass.PROTOCOL,
            message=f"Unsupported protocol: {protocol}",
            details={"protocol": str(protocol)},
        )
        self.protocol = protocol


class UnsupportedContentTypeError(ClientError):
    """Response content type is outside the decoding table."""

    def __init__(self, content_type: str | None) -> None:
        """Initialize the error.

        Args:
            content_type: Declared content type, or None if absent.
        """
        super().__init__(
            error_class=ClientErrorClass.CONTENT_TYPE,
            message=(
                "Unsupported content-type for http response received: "
                f"{content_type}"
            ),
            details={"content_type": content_type},
        )
        self.content_type = content_type


class ParseError(ClientError):
    """Error parsing a response body.

    Raised when the body does not parse under its declared content type.
    The underlying parser failure is available as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        content_type: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize the parse error.

        Args:
            message: Human-readable error message.
            content_type: Content type the body was parsed as.
            line: Line number where parsing failed.
            column: Column number where parsing failed.
        """
        details: dict[str, str | int | bool | None] = {}
        if content_type is not None:
            details["content_type"] = content_type
        if line is not None:
            details["line"] = line
        if column is not None:
            details["column"] = column

        super().__init__(
            error_class=ClientErrorClass.PARSE,
            message=message,
            details=details,
        )
        self.content_type = content_type
        self.line = line
        self.column = column


class TransportError(ClientError):
    """The underlying connection failed.

    Wraps connection refused, reset, and mid-stream aborts. The original
    httpx exception is available as ``__cause__``.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        """Initialize the transport error.

        Args:
            message: Human-readable error message.
            url: URL of the failed request.
        """
        super().__init__(
            error_class=ClientErrorClass.TRANSPORT,
            message=message,
            details={"url": url},
        )
        self.url = url


class HttpStatusError(Exception):
    """Response status code was in the error range.

    ``body`` is the raw decoded response body, exactly what a successful
    call would have returned. The error sink receives a separate generic
    ``ClientError`` for the same failure.
    """

    def __init__(self, status_code: int, body: Any) -> None:
        """Initialize the status error.

        Args:
            status_code: HTTP status code.
            body: Decoded response body.
        """
        super().__init__(f"HTTP error status {status_code}")
        self.status_code = status_code
        self.body = body
