"""
CLI Error Handling Utilities

This module provides consistent error handling across CLI commands: every
failure becomes a CliError, is logged with context, and is reported to
the user as a single ``Error: <message>`` line on stderr.
"""

from __future__ import annotations

import functools
import logging
import sys
from typing import Any, Callable, TypeVar

import typer

from dataforseo_cli.shared.constants import CLIDefaults
from dataforseo_cli.shared.errors import (
    CliError,
    DataForSEOError,
    ErrorCode,
    create_cli_error,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_cli_error(error: BaseException, command: str) -> int:
    """Report an error raised by a CLI command.

    Args:
        error: The exception that occurred
        command: The CLI command being executed

    Returns:
        Exit code for the CLI command
    """
    error_context = {"command": command, "error_type": type(error).__name__}
    cli_error = _map_error_to_cli_error(error, command, error_context)
    _log_error(error, command, cli_error, error_context)
    sys.stderr.write(f"Error: {cli_error.message}\n")
    return cli_error.exit_code


def _map_error_to_cli_error(
    error: BaseException,
    command: str,
    error_context: dict[str, Any],
) -> CliError:
    """Map specific exception types to CLI errors."""
    if isinstance(error, CliError):
        error_context["error_code"] = error.code.value
        return error

    # Provider, configuration and cache errors already carry a user-facing message
    if isinstance(error, DataForSEOError):
        error_context["error_code"] = error.code.value
        return create_cli_error(
            message=error.message,
            command=command,
            original_error=error,
        )

    if isinstance(error, KeyboardInterrupt):
        error_context["interrupt_type"] = "user_interrupt"
        return create_cli_error(
            message="Command interrupted by user",
            command=command,
            exit_code=CLIDefaults.EXIT_INTERRUPTED,
        )

    if isinstance(error, OSError):
        error_context["error_category"] = "file_system"
        return create_cli_error(
            message=f"File system error: {error}",
            command=command,
            original_error=error,
            code=ErrorCode.FILE_SYSTEM_ERROR,
        )

    error_context["error_category"] = "unexpected"
    return create_cli_error(
        message=f"Unexpected error: {error}",
        command=command,
        original_error=error if isinstance(error, Exception) else None,
    )


def _log_error(
    error: BaseException,
    command: str,
    cli_error: CliError,
    error_context: dict[str, Any],
) -> None:
    if isinstance(error, KeyboardInterrupt):
        logger.warning(
            "Command interrupted: %s",
            cli_error.message,
            extra={"context": error_context},
        )
    elif isinstance(error, DataForSEOError):
        logger.debug(
            "CLI error in %s: %s",
            command,
            cli_error.message,
            extra={"context": error_context},
            exc_info=error,
        )
    else:
        logger.exception(
            "CLI error in %s: %s",
            command,
            cli_error.message,
            extra={"context": error_context},
        )


def handle_cli_errors(command_name: str) -> Callable[[F], F]:
    """Decorator that turns exceptions from a command into ``typer.Exit``.

    Example:
        >>> @handle_cli_errors(command_name="volume")
        ... def volume_command(...):
        ...     return handle_volume(...)  # No try-except needed!
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except (Exception, KeyboardInterrupt) as e:  # noqa: BLE001
                # Every failure must end as one "Error:" line and an exit code
                exit_code = handle_cli_error(e, command_name)
                raise typer.Exit(exit_code) from e

        return wrapper  # type: ignore[return-value]

    return decorator
