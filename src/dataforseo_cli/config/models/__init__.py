"""Configuration models for dataforseo-cli."""

from .api_settings import APISettings
from .app_settings import DefaultsSettings, LoggingSettings
from .cache_settings import CacheSettings, default_cache_path
from .settings import Settings

__all__ = [
    "APISettings",
    "CacheSettings",
    "DefaultsSettings",
    "LoggingSettings",
    "Settings",
    "default_cache_path",
]
