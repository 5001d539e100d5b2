"""Tests for the error hierarchy."""

from __future__ import annotations

from pathlib import Path

import pytest

from dataforseo_cli.shared.constants import Namespace
from dataforseo_cli.shared.errors import (
    ApplicationError,
    CliError,
    ConfigurationError,
    DataForSEOError,
    DomainError,
    ErrorCode,
    ErrorContext,
    InfrastructureError,
    ProviderError,
    create_cli_error,
    create_provider_error,
)


class TestErrorContext:
    """Test ErrorContext."""

    def test_coerces_additional_data(self):
        context = ErrorContext(
            operation="op",
            additional_data={
                "path": Path("/tmp/cache.json"),
                "namespace": Namespace.VOLUME,
                "missing": None,
                "count": 3,
            },
        )

        assert context.additional_data == {
            "path": str(Path("/tmp/cache.json")),
            "namespace": "volume",
            "missing": "None",
            "count": 3,
        }

    def test_rejects_complex_values(self):
        with pytest.raises(TypeError):
            ErrorContext(additional_data={"items": [1, 2]})

    def test_safe_dict(self):
        assert ErrorContext(operation="op").safe_dict() == {
            "operation": "op",
            "additional_data": {},
        }


class TestHierarchy:
    """Test the exception classes."""

    def test_str_includes_code(self):
        error = DomainError(ErrorCode.INVALID_CACHE_KEY, "bad key")
        assert str(error) == "INVALID_CACHE_KEY: bad key"

    def test_subclassing(self):
        assert issubclass(ProviderError, InfrastructureError)
        assert issubclass(ConfigurationError, ApplicationError)
        assert issubclass(CliError, ApplicationError)
        assert issubclass(DomainError, DataForSEOError)

    def test_to_dict(self):
        cause = ValueError("boom")
        error = InfrastructureError(
            ErrorCode.FILE_SYSTEM_ERROR,
            "write failed",
            ErrorContext(file_path="/tmp/x"),
            cause,
        )

        assert error.to_dict() == {
            "code": "FILE_SYSTEM_ERROR",
            "message": "write failed",
            "context": {"file_path": "/tmp/x", "additional_data": {}},
            "original_error": "boom",
        }


class TestFactories:
    """Test the error factory helpers."""

    def test_provider_error(self):
        error = create_provider_error(40101, "Authentication failed.", "/p")

        assert error.status_code == 40101
        assert error.status_message == "Authentication failed."
        assert error.message == "API error 40101: Authentication failed."
        assert error.context.additional_data == {"path": "/p"}

    def test_provider_error_label(self):
        error = create_provider_error(40501, "Invalid Field.", "/p", label="Task")
        assert error.message == "Task error 40501: Invalid Field."

    def test_provider_error_without_status(self):
        error = create_provider_error(None, "Request failed: refused", "/p")
        assert error.message == "API error: Request failed: refused"

    def test_cli_error(self):
        error = create_cli_error("nope", command="volume", exit_code=2)

        assert error.code == ErrorCode.CLI_UNEXPECTED_ERROR
        assert error.command == "volume"
        assert error.exit_code == 2
        assert error.context.additional_data == {"command": "volume"}
