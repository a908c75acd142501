"""Client configuration and its resolution from caller overrides."""

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from verbclient.constants import DEFAULT_ENCODING
from verbclient.logging import log_error
from verbclient.models import Protocol


class ClientConfig(BaseModel):
    """Configuration for a single client instance.

    Frozen after construction. ``protocol`` accepts any string so that
    unknown schemes surface from transport selection rather than here.
    ``headers`` is copied per request and never modified in place.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = ""
    protocol: Protocol | str = Protocol.HTTP
    encoding: str = DEFAULT_ENCODING
    port: int | None = None
    error_sink: Callable[[Exception], None] = Field(
        default=log_error,
        description="Called with every runtime failure before it is raised",
    )
    headers: dict[str, str | int] = Field(
        default_factory=dict,
        description="Headers sent with every request; values are sent as text",
    )


def resolve_config(
    url: str, overrides: Mapping[str, Any] | None = None
) -> ClientConfig:
    """Merge caller overrides over the defaults.

    Args:
        url: Host the client talks to. Always wins over ``base_url`` in
            ``overrides``.
        overrides: Partial configuration supplied by the caller. Keys set
            to None fall back to their defaults.

    Returns:
        Resolved configuration.
    """
    options = {
        key: value for key, value in (overrides or {}).items() if value is not None
    }
    if "headers" in options:
        options["headers"] = dict(options["headers"])
    options["base_url"] = url
    return ClientConfig(**options)
