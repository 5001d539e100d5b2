"""
Test main callback function.

This test ensures that the main callback correctly processes the root
options, sets up the CLI context and configures logging.
"""

from __future__ import annotations

import logging

from typer.testing import CliRunner

from dataforseo_cli.cli.common.context import (
    CliContext,
    LogLevel,
    clear_cli_context,
    get_cli_context,
)
from dataforseo_cli.cli.typer_app import app, main_callback

runner = CliRunner()


def test_main_callback_sets_context() -> None:
    """Test that main_callback sets the context correctly."""
    main_callback(verbose=2, log_level=LogLevel.INFO)

    context = get_cli_context()
    assert context.verbose == 2
    assert context.log_level == LogLevel.INFO


def test_verbose_overrides_log_level() -> None:
    """Test that verbose mode forces DEBUG logging."""
    main_callback(verbose=1, log_level=LogLevel.ERROR)

    assert get_cli_context().get_effective_log_level() == "DEBUG"
    assert logging.getLogger("dataforseo_cli").level == logging.DEBUG


def test_log_level_defaults_to_config(tmp_path) -> None:
    """Test that the [logging] table is used when no flag is given."""
    (tmp_path / "config.toml").write_text('[logging]\nlevel = "info"\n', encoding="utf-8")

    main_callback(verbose=0, log_level=None)

    assert logging.getLogger("dataforseo_cli").level == logging.INFO


def test_effective_log_level_precedence() -> None:
    assert CliContext().get_effective_log_level() == "WARNING"
    assert CliContext(log_level=LogLevel.ERROR).get_effective_log_level("INFO") == "ERROR"
    assert CliContext().get_effective_log_level("info") == "INFO"


def test_context_requires_initialization() -> None:
    clear_cli_context()
    try:
        get_cli_context()
    except RuntimeError as e:
        assert "not been initialized" in str(e)
    else:
        raise AssertionError("expected RuntimeError")


def test_version_option() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "dataforseo-cli 1.0.6" in result.output


def test_help_lists_commands() -> None:
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ("volume", "related", "competitor", "locations", "languages", "status"):
        assert command in result.output


def test_invalid_config_reports_error(tmp_path) -> None:
    (tmp_path / "config.toml").write_text("[api\n", encoding="utf-8")

    result = runner.invoke(app, ["status"])

    assert result.exit_code == 1
    assert "Error: Failed to load configuration" in result.output
