"""
Configuration management for the video client.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_MAX_CHANNEL = 40
DEFAULT_MAX_PLAYLIST = 200


class ClientSettings(BaseSettings):
    """Client configuration read from ``VIDEO_CLIENT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VIDEO_CLIENT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    service_name: str = Field(default="video_client")
    log_level: str = Field(default="info")

    # Catalog service
    base_url: str = Field(default="http://localhost:8080")
    request_timeout: float = Field(default=10.0, gt=0)

    # Entity caches
    max_channel: int = Field(default=DEFAULT_MAX_CHANNEL, ge=0)
    max_playlist: int = Field(default=DEFAULT_MAX_PLAYLIST, ge=0)

    # YouTube Data API key, enables generic search and comments
    api_key: Optional[str] = Field(default=None)


def get_settings(**overrides) -> ClientSettings:
    """Get client settings, with explicit overrides taking precedence over the environment."""
    return ClientSettings(**overrides)
