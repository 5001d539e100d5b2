"""
dataforseo-cli Typer CLI Application

This is the main Typer-based CLI application. Keyword commands print TSV
by default (``--json`` and ``--table`` switch format) so results can be
piped; logs and errors go to stderr.
"""

from __future__ import annotations

from typing import Annotated

import typer

from dataforseo_cli.cli.cache_handler import handle_print_cache
from dataforseo_cli.cli.common.context import CliContext, LogLevel, set_cli_context
from dataforseo_cli.cli.common.error_handler import handle_cli_error, handle_cli_errors
from dataforseo_cli.cli.common.options import (
    human_option,
    json_option,
    language_option,
    limit_option,
    location_option,
    log_level_option,
    print_cache_option,
    table_option,
    verbose_option,
    version_option,
)
from dataforseo_cli.cli.credentials_handler import handle_set_credentials, handle_status
from dataforseo_cli.cli.formatters import get_format
from dataforseo_cli.cli.keyword_handlers import (
    handle_competitor,
    handle_languages,
    handle_locations,
    handle_related,
    handle_volume,
)
from dataforseo_cli.config import get_config
from dataforseo_cli.shared.constants import CLICommands, CLIDefaults, CLIHelp
from dataforseo_cli.shared.logging import setup_structured_logger

# Version information
__version__ = CLIDefaults.VERSION


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=__version__))
        raise typer.Exit


def main_callback(verbose: int, log_level: LogLevel | None) -> None:
    """
    Process the root options before any command runs.

    Sets the global CLI context and configures the package logger from
    the options and the ``[logging]`` config table.
    """
    context = CliContext(verbose=verbose, log_level=log_level)
    set_cli_context(context)

    settings = get_config()
    setup_structured_logger(
        level=context.get_effective_log_level(settings.logging.level),
        log_file=settings.logging.file,
    )


app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[int, verbose_option] = 0,
    log_level: Annotated[LogLevel | None, log_level_option] = None,
    version: Annotated[bool, version_option] = False,
    print_cache: Annotated[bool, print_cache_option] = False,
) -> None:
    """Main CLI callback with error handling."""
    version_callback(version)

    try:
        main_callback(verbose, log_level)
        if print_cache:
            handle_print_cache()
    except Exception as e:  # noqa: BLE001
        exit_code = handle_cli_error(e, "main-callback")
        raise typer.Exit(exit_code) from e

    if print_cache:
        raise typer.Exit(CLIDefaults.EXIT_SUCCESS)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command(CLICommands.VOLUME)
@handle_cli_errors(command_name=CLICommands.VOLUME)
def volume_command(
    keywords: Annotated[list[str], typer.Argument(help=CLIHelp.VOLUME_KEYWORDS)],
    location: Annotated[int | None, location_option] = None,
    language: Annotated[str | None, language_option] = None,
    json_output: Annotated[bool, json_option] = False,
    table: Annotated[bool, table_option] = False,
    human: Annotated[bool, human_option] = False,
) -> None:
    """
    Get search volume, CPC, and difficulty for keywords.

    Cached keywords are served locally; the rest are fetched in one request.

    Examples:
        dataforseo-cli volume "seo tools" "keyword research"

        dataforseo-cli volume "seo tools" -l 2826 --language en --table
    """
    handle_volume(
        keywords,
        location,
        language,
        get_format(json_output=json_output, table=table, human=human),
    )


@app.command(CLICommands.RELATED)
@handle_cli_errors(command_name=CLICommands.RELATED)
def related_command(
    seed: Annotated[str, typer.Argument(help=CLIHelp.RELATED_SEED)],
    location: Annotated[int | None, location_option] = None,
    language: Annotated[str | None, language_option] = None,
    limit: Annotated[int | None, limit_option] = None,
    json_output: Annotated[bool, json_option] = False,
    table: Annotated[bool, table_option] = False,
    human: Annotated[bool, human_option] = False,
) -> None:
    """
    Find related keywords from a seed keyword.

    Examples:
        dataforseo-cli related "coffee grinder" -n 20
    """
    handle_related(
        seed,
        location,
        language,
        limit,
        get_format(json_output=json_output, table=table, human=human),
    )


@app.command(CLICommands.COMPETITOR)
@handle_cli_errors(command_name=CLICommands.COMPETITOR)
def competitor_command(
    domain: Annotated[str, typer.Argument(help=CLIHelp.COMPETITOR_DOMAIN)],
    location: Annotated[int | None, location_option] = None,
    language: Annotated[str | None, language_option] = None,
    limit: Annotated[int | None, limit_option] = None,
    json_output: Annotated[bool, json_option] = False,
    table: Annotated[bool, table_option] = False,
    human: Annotated[bool, human_option] = False,
) -> None:
    """
    Get keywords a domain ranks for.

    Examples:
        dataforseo-cli competitor example.com --json
    """
    handle_competitor(
        domain,
        location,
        language,
        limit,
        get_format(json_output=json_output, table=table, human=human),
    )


@app.command(CLICommands.LOCATIONS)
@handle_cli_errors(command_name=CLICommands.LOCATIONS)
def locations_command(
    search: Annotated[str | None, typer.Argument(help=CLIHelp.SEARCH_LOCATIONS)] = None,
    json_output: Annotated[bool, json_option] = False,
) -> None:
    """Search location codes."""
    handle_locations(search, json_output=json_output)


@app.command(CLICommands.LANGUAGES)
@handle_cli_errors(command_name=CLICommands.LANGUAGES)
def languages_command(
    search: Annotated[str | None, typer.Argument(help=CLIHelp.SEARCH_LANGUAGES)] = None,
    json_output: Annotated[bool, json_option] = False,
) -> None:
    """Search language codes."""
    handle_languages(search, json_output=json_output)


@app.command(CLICommands.STATUS)
@handle_cli_errors(command_name=CLICommands.STATUS)
def status_command() -> None:
    """Check if API credentials are configured."""
    exit_code = handle_status()
    if exit_code != CLIDefaults.EXIT_SUCCESS:
        raise typer.Exit(exit_code)


@app.command(CLICommands.SET_CREDENTIALS)
@handle_cli_errors(command_name=CLICommands.SET_CREDENTIALS)
def set_credentials_command(
    pairs: Annotated[
        list[str] | None,
        typer.Argument(help=CLIHelp.CREDENTIALS_PAIRS),
    ] = None,
) -> None:
    """
    Save DataForSEO API credentials to the config file.

    Examples:
        dataforseo-cli set-credentials login=me@example.com password=secret

        dataforseo-cli set-credentials base64=bWVAZXhhbXBsZS5jb206c2VjcmV0
    """
    handle_set_credentials(pairs or [])


app.command(CLICommands.SET_API_KEY, hidden=True)(set_credentials_command)


@app.command(CLICommands.CACHE)
@handle_cli_errors(command_name=CLICommands.CACHE)
def cache_command() -> None:
    """Print cached entries grouped by command."""
    handle_print_cache()


if __name__ == "__main__":
    app()
