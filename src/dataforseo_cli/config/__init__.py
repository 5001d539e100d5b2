"""dataforseo-cli Configuration Module

Unified access to configuration models and settings management:
- Settings: Main configuration facade
- Loader functions: get_config, load_settings, reload_config, save_credentials
"""

from __future__ import annotations

from .loader import (
    check_credentials,
    default_config_path,
    get_config,
    load_settings,
    reload_config,
    reset_config,
    save_credentials,
)
from .models import (
    APISettings,
    CacheSettings,
    DefaultsSettings,
    LoggingSettings,
    Settings,
)

__all__ = [
    "APISettings",
    "CacheSettings",
    "DefaultsSettings",
    "LoggingSettings",
    "Settings",
    "check_credentials",
    "default_config_path",
    "get_config",
    "load_settings",
    "reload_config",
    "reset_config",
    "save_credentials",
]
