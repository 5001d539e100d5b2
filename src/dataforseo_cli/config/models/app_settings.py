"""Application-level configuration models (request defaults, logging)."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dataforseo_cli.shared.constants import CLIDefaults


class DefaultsSettings(BaseModel):
    """Default request dimensions used when a command omits them."""

    location: int = Field(default=CLIDefaults.LOCATION, description="Location code")
    language: str = Field(default=CLIDefaults.LANGUAGE, description="Language code")
    limit: int = Field(default=CLIDefaults.LIMIT, gt=0, description="Max results")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    file: str | None = Field(default=None, description="Optional JSON log file")
