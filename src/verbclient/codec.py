"""Serialization of outgoing request bodies."""

import json
from collections.abc import Mapping

from pydantic import BaseModel

from verbclient.constants import DEFAULT_ENCODING
from verbclient.models import WireBody


def encode_body(body: object, encoding: str = DEFAULT_ENCODING) -> WireBody | None:
    """Serialize a request body for the wire.

    Structured values (mappings, lists, tuples, pydantic models) become
    compact JSON; bytes are sent unchanged; anything else is converted with
    ``str()``.

    Args:
        body: Payload supplied by the caller.
        encoding: Character encoding for the wire bytes.

    Returns:
        The serialized body, or None when there is nothing to send.
    """
    if body is None or (isinstance(body, str | bytes) and not body):
        return None

    if isinstance(body, Mapping | list | tuple):
        text = json.dumps(body, separators=(",", ":"), ensure_ascii=False)
    elif isinstance(body, BaseModel):
        text = body.model_dump_json()
    elif isinstance(body, bytes):
        return WireBody(data=body)
    else:
        text = str(body)

    return WireBody(text=text, data=text.encode(encoding))
