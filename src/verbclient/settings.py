"""Client settings powered by Pydantic BaseSettings."""

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Environment defaults for client construction.

    Read from ``VERBCLIENT_*`` variables or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="VERBCLIENT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    protocol: str | None = Field(default=None, description="http or https")
    encoding: str | None = None
    port: int | None = Field(default=None, ge=1, le=65535)

    def to_overrides(self) -> dict[str, Any]:
        """Return only the settings that were actually provided."""
        return self.model_dump(exclude_none=True)


def get_settings() -> ClientSettings:
    """Get a settings instance."""
    return ClientSettings()
