"""
Reusable Typer Options Module

This module provides the Typer options shared by the root callback and
the keyword commands, so flags and help text stay consistent.
"""

from __future__ import annotations

import typer

from dataforseo_cli.shared.constants import CLIHelp, CLIOptions

# Root options

verbose_option = typer.Option(
    "--verbose",
    "-v",
    count=True,
    help="Enable verbose output (equivalent to --log-level DEBUG).",
)

log_level_option = typer.Option(
    "--log-level",
    case_sensitive=False,
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
)

version_option = typer.Option(
    "--version",
    "-V",
    help="Show version information and exit.",
    is_eager=True,
)

print_cache_option = typer.Option(
    CLIOptions.PRINT_CACHE,
    help=CLIHelp.PRINT_CACHE,
)

# Request dimensions (None falls back to the configured defaults)

location_option = typer.Option(
    CLIOptions.LOCATION,
    CLIOptions.LOCATION_SHORT,
    help=CLIHelp.LOCATION,
)

language_option = typer.Option(
    CLIOptions.LANGUAGE,
    help=CLIHelp.LANGUAGE,
)

limit_option = typer.Option(
    CLIOptions.LIMIT,
    CLIOptions.LIMIT_SHORT,
    min=1,
    help=CLIHelp.LIMIT,
)

# Output format

json_option = typer.Option(CLIOptions.JSON, help=CLIHelp.JSON)

table_option = typer.Option(CLIOptions.TABLE, help=CLIHelp.TABLE)

human_option = typer.Option(CLIOptions.HUMAN, help=CLIHelp.HUMAN)
