"""dataforseo-cli Error Handling Module

This module defines the error handling system for dataforseo-cli, providing
structured error classes with context information and user-friendly messages.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for dataforseo-cli.

    This enum serves as the single source of truth for all error codes
    used throughout the application.
    """

    # Provider (DataForSEO API) Errors
    NETWORK_ERROR = "NETWORK_ERROR"
    API_REQUEST_FAILED = "API_REQUEST_FAILED"
    API_TASK_FAILED = "API_TASK_FAILED"
    API_INVALID_RESPONSE = "API_INVALID_RESPONSE"

    # File System Errors
    FILE_SYSTEM_ERROR = "FILE_SYSTEM_ERROR"

    # Cache Errors
    INVALID_CACHE_KEY = "INVALID_CACHE_KEY"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CREDENTIALS_MISSING = "CREDENTIALS_MISSING"

    # CLI Errors
    CLI_INVALID_ARGUMENTS = "CLI_INVALID_ARGUMENTS"
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        elif val is None:
            coerced[key] = "None"
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data so the context is always safe to serialize into logs.

    Attributes:
        file_path: Optional file path associated with the error
        operation: Optional operation name that caused the error
        additional_data: Optional dict with primitive values only
    """

    file_path: str | None = None
    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        if self.additional_data is not None:
            object.__setattr__(
                self, "additional_data", _coerce_primitives(self.additional_data)
            )

    def safe_dict(self) -> dict[str, Any]:
        """Export context as a dict that always carries ``additional_data``."""
        data: dict[str, Any] = {}
        if self.file_path is not None:
            data["file_path"] = self.file_path
        if self.operation is not None:
            data["operation"] = self.operation
        data["additional_data"] = self.additional_data or {}
        return data


class DataForSEOError(Exception):
    """Base exception class for all dataforseo-cli errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize DataForSEOError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error
        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(DataForSEOError):
    """Domain-specific errors.

    Raised when a value violates a rule of the cache or request model,
    e.g. a cache key field containing the key separator.
    """


class InfrastructureError(DataForSEOError):
    """Infrastructure-related errors.

    Raised when interacting with external systems like the file system
    or the DataForSEO API.
    """


class ProviderError(InfrastructureError):
    """The DataForSEO API rejected or failed a request.

    Carries the provider's status code and status message so the CLI can
    print a one-line diagnostic. ``status_code`` is the API envelope code
    (e.g. 40101), the task code, the HTTP status when no envelope could
    be parsed, or None for network failures and malformed items.
    """

    def __init__(
        self,
        code: ErrorCode,
        status_code: int | None,
        status_message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        label: str = "API",
    ) -> None:
        self.status_code = status_code
        self.status_message = status_message
        prefix = f"{label} error" if status_code is None else f"{label} error {status_code}"
        super().__init__(
            code,
            f"{prefix}: {status_message}",
            context,
            original_error,
        )


class ApplicationError(DataForSEOError):
    """Application-level errors (configuration, command usage)."""


class ConfigurationError(ApplicationError):
    """Missing or invalid configuration, e.g. no API credentials."""


class CliError(ApplicationError):
    """CLI-specific error with enhanced context for command-line operations."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        command: str | None = None,
        exit_code: int = 1,
    ):
        super().__init__(code, message, context, original_error)
        self.command = command
        self.exit_code = exit_code


def create_cli_error(
    message: str,
    command: str | None = None,
    original_error: Exception | None = None,
    exit_code: int = 1,
    code: ErrorCode = ErrorCode.CLI_UNEXPECTED_ERROR,
) -> CliError:
    """Create a CLI error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"command": command} if command else None
    )
    return CliError(
        code,
        message,
        ErrorContext(operation="cli", additional_data=additional_data),
        original_error,
        command,
        exit_code,
    )


def create_provider_error(
    status_code: int | None,
    status_message: str,
    path: str,
    code: ErrorCode = ErrorCode.API_REQUEST_FAILED,
    original_error: Exception | None = None,
    label: str = "API",
) -> ProviderError:
    """Create a ProviderError for a failed API call on ``path``.

    ``label`` prefixes the message, "API" for envelope failures and
    "Task" for failures reported on the first task.
    """
    return ProviderError(
        code,
        status_code,
        status_message,
        ErrorContext(operation="api_request", additional_data={"path": path}),
        original_error,
        label,
    )
