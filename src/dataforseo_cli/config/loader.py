"""Settings loader and singleton manager.

This module handles:
- Environment variable loading from a .env file
- Configuration file loading from TOML
- Singleton access to the Settings instance
- Persisting API credentials back to the config file
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any

import toml
from dotenv import load_dotenv

from dataforseo_cli.config.models.settings import Settings
from dataforseo_cli.shared.constants import Cache
from dataforseo_cli.shared.errors import ConfigurationError, ErrorCode, ErrorContext

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.toml"
CONFIG_FILE_MODE = 0o600


def default_config_path() -> Path:
    """Return ``~/.config/dataforseo-cli/config.toml`` (or ``$DATAFORSEO_CONFIG``)."""
    override = os.getenv("DATAFORSEO_CONFIG")
    if override:
        return Path(override)
    return Path.home() / ".config" / Cache.DIR_NAME / CONFIG_FILE_NAME


class SettingsLoader:
    """Singleton manager for Settings."""

    _instance: Settings | None = None
    _lock: threading.RLock = threading.RLock()

    def get_config(self) -> Settings:
        """Get the global settings instance, loading it on first use."""
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    _load_env_file()
                    self._instance = load_settings()
        return self._instance

    def reload_config(self) -> Settings:
        """Reload the global settings instance from configuration files."""
        with self._lock:
            _load_env_file()
            self._instance = load_settings()
        return self._instance

    def reset(self) -> None:
        """Forget the cached instance (used by tests)."""
        with self._lock:
            self._instance = None


_loader = SettingsLoader()


def get_config() -> Settings:
    return _loader.get_config()


def reload_config() -> Settings:
    return _loader.reload_config()


def reset_config() -> None:
    _loader.reset()


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from the TOML config file, or defaults if it is absent.

    Raises:
        ConfigurationError: If the file exists but cannot be parsed
    """
    path = Path(config_path) if config_path else default_config_path()
    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return Settings()

    try:
        return Settings.from_toml_file(path)
    except (OSError, toml.TomlDecodeError, ValueError) as e:
        raise ConfigurationError(
            ErrorCode.CONFIG_ERROR,
            f"Failed to load configuration from {path}: {e}",
            ErrorContext(operation="load_settings", file_path=str(path)),
            original_error=e,
        ) from e


def save_credentials(
    login: str | None = None,
    password: str | None = None,
    base64_token: str | None = None,
    config_path: Path | str | None = None,
) -> Path:
    """Write API credentials into the ``[api]`` table of the config file.

    Either ``base64_token`` or both ``login`` and ``password`` must be given.
    Other tables in an existing config file are preserved.

    Returns:
        Path of the written config file

    Raises:
        ConfigurationError: If the credentials are incomplete or the write fails
    """
    path = Path(config_path) if config_path else default_config_path()
    context = ErrorContext(operation="save_credentials", file_path=str(path))

    if base64_token:
        api_table: dict[str, Any] = {"base64_token": base64_token}
    elif login and password:
        api_table = {"login": login, "password": password}
    else:
        raise ConfigurationError(
            ErrorCode.CREDENTIALS_MISSING,
            "Provide login and password, or a base64 token",
            context,
        )

    try:
        raw_config: dict[str, Any] = toml.load(path) if path.exists() else {}
        existing_api = raw_config.get("api", {})
        for key in ("login", "password", "base64_token"):
            existing_api.pop(key, None)
        existing_api.update(api_table)
        raw_config["api"] = existing_api

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            toml.dump(raw_config, f)
        path.chmod(CONFIG_FILE_MODE)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigurationError(
            ErrorCode.CONFIG_ERROR,
            f"Failed to save credentials: {e}",
            context,
            original_error=e,
        ) from e

    logger.info("API credentials saved to %s", path)
    reset_config()
    return path


def check_credentials(settings: Settings | None = None) -> tuple[bool, str]:
    """Return whether credentials are configured and the masked login."""
    settings = settings or get_config()
    if not settings.api.is_configured:
        return False, ""
    return True, settings.api.masked_login()


def _load_env_file(env_file: Path | None = None) -> None:
    """Load variables from ``.env`` in the working directory, if present.

    Existing environment variables are not overridden.
    """
    env_file = env_file or Path(".env")
    if env_file.exists():
        load_dotenv(env_file, override=False)
        logger.debug("Loaded environment from %s", env_file)
