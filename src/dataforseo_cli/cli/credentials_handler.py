"""Credential commands: ``status`` and ``set-credentials``."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import typer

from dataforseo_cli.config import check_credentials, save_credentials
from dataforseo_cli.shared.constants import CLIDefaults, CLIHelp
from dataforseo_cli.shared.errors import CliError, ErrorCode, ErrorContext

logger = logging.getLogger(__name__)


def parse_credential_pairs(pairs: Sequence[str]) -> dict[str, str]:
    """Parse ``key=value`` arguments.

    Arguments without ``=`` or with an empty key or value are ignored.
    Values may contain ``=`` (base64 padding).
    """
    credentials: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if sep and key and value:
            credentials[key] = value
    return credentials


def handle_set_credentials(pairs: Sequence[str]) -> None:
    """Save credentials from ``login=... password=...`` or ``base64=...``.

    Raises:
        CliError: If neither form is complete
    """
    credentials = parse_credential_pairs(pairs)
    if credentials.get("base64"):
        path = save_credentials(base64_token=credentials["base64"])
    elif credentials.get("login") and credentials.get("password"):
        path = save_credentials(
            login=credentials["login"],
            password=credentials["password"],
        )
    else:
        raise CliError(
            ErrorCode.CLI_INVALID_ARGUMENTS,
            CLIHelp.SET_CREDENTIALS_USAGE,
            ErrorContext(operation="set_credentials"),
            command="set-credentials",
        )
    typer.echo(f"API credentials saved to {path}")


def handle_status() -> int:
    """Print whether credentials are configured; returns the exit code."""
    configured, masked_login = check_credentials()
    if configured:
        typer.echo(f"✓ Credentials configured (login: {masked_login})")
        return CLIDefaults.EXIT_SUCCESS

    typer.echo("✗ No credentials configured")
    typer.echo("Run: dataforseo-cli set-credentials login=XXX password=XXX")
    return CLIDefaults.EXIT_ERROR
