"""Cache configuration model.

Location and TTL of the persistent keyword cache.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from dataforseo_cli.shared.constants import Cache


def default_cache_path() -> Path:
    return Path.home() / ".cache" / Cache.DIR_NAME / Cache.FILE_NAME


class CacheSettings(BaseModel):
    """Cache configuration."""

    path: Path = Field(
        default_factory=default_cache_path,
        description="Path of the JSON cache file",
    )
    ttl_seconds: int = Field(
        default=Cache.TTL_SECONDS,
        gt=0,
        description="Cache time-to-live in seconds",
    )
