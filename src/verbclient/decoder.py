"""Response buffering and content-type driven decoding."""

import json
from collections.abc import Mapping
from io import BytesIO
from typing import Any

import httpx

from verbclient.config import ClientConfig
from verbclient.constants import (
    CONTENT_TYPE_JSON,
    DEFAULT_CHUNK_SIZE,
    HEADER_CONTENT_TYPE,
    TEXT_CONTENT_TYPES,
)
from verbclient.errors import (
    ClientError,
    ClientErrorClass,
    HttpStatusError,
    ParseError,
    UnsupportedContentTypeError,
)
from verbclient.status import is_error_status


async def read_body(response: httpx.Response) -> bytes:
    """Buffer every chunk of a streaming response in arrival order.

    Args:
        response: Streaming response.

    Returns:
        Complete response body.

    Raises:
        httpx.RequestError: If the stream is aborted or cannot be decoded.
    """
    buffer = BytesIO()
    async for chunk in response.aiter_bytes(chunk_size=DEFAULT_CHUNK_SIZE):
        buffer.write(chunk)
    return buffer.getvalue()


def extract_content_type(headers: Mapping[str, str]) -> str | None:
    """Get the declared content type without parameters such as charset.

    Args:
        headers: Response headers.

    Returns:
        Media type before the first ``;``, or None if absent.
    """
    value = headers.get(HEADER_CONTENT_TYPE)
    if not value:
        return None
    return value.split(";", 1)[0].strip() or None


def parse_response_data(content_type: str | None, data: str) -> Any:
    """Parse a response body according to its content type.

    Args:
        content_type: Declared media type.
        data: Buffered body text.

    Returns:
        Parsed JSON value, or the text unchanged for XML, HTML, and script.

    Raises:
        ParseError: If a JSON body is malformed.
        UnsupportedContentTypeError: If the type is not in the table.
    """
    if content_type == CONTENT_TYPE_JSON:
        try:
            return json.loads(data)
        except json.JSONDecodeError as e:
            msg = f"Malformed JSON response body: {e.msg}"
            raise ParseError(
                msg,
                content_type=content_type,
                line=e.lineno,
                column=e.colno,
            ) from e

    if content_type in TEXT_CONTENT_TYPES:
        return data

    raise UnsupportedContentTypeError(content_type)


def decode_body(
    status_code: int,
    headers: Mapping[str, str],
    body: bytes,
    config: ClientConfig,
) -> Any:
    """Decode a buffered response and classify its status.

    Every failure is reported to ``config.error_sink`` before it is raised.
    For error statuses the sink receives a generic ``ClientError`` while the
    raised ``HttpStatusError`` carries the decoded body itself.

    Args:
        status_code: HTTP status code.
        headers: Response headers.
        body: Buffered response body.
        config: Client configuration.

    Returns:
        Decoded body.

    Raises:
        ParseError: If the body does not parse.
        UnsupportedContentTypeError: If the content type is unsupported.
        HttpStatusError: If the status is in the error range.
    """
    content_type = extract_content_type(headers)
    text = body.decode(config.encoding, errors="replace")

    try:
        decoded = parse_response_data(content_type, text)
    except ClientError as e:
        config.error_sink(e)
        raise

    if is_error_status(status_code):
        config.error_sink(
            ClientError(
                error_class=ClientErrorClass.HTTP_STATUS,
                message=str(decoded),
                details={"status_code": status_code},
            )
        )
        raise HttpStatusError(status_code, decoded)

    return decoded

