"""
Output formatters for keyword command results.

Rows are flat dicts whose keys are the column names. TSV is the default
so results pipe cleanly into other tools; ``--json`` emits compact JSON
and ``--table``/``--human`` render a rich table.
"""

from __future__ import annotations

from typing import Any

import orjson
import typer
from rich import box
from rich.console import Console
from rich.table import Table

from dataforseo_cli.shared.constants import OutputFormat

Row = dict[str, Any]

NO_RESULTS = "No results."


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def format_tsv(rows: list[Row]) -> str:
    """Header line plus one tab-separated line per row; empty for no rows."""
    if not rows:
        return ""
    columns = list(rows[0])
    lines = ["\t".join(columns)]
    lines.extend("\t".join(_cell(row.get(col)) for col in columns) for row in rows)
    return "\n".join(lines)


def format_json(data: Any) -> str:
    return orjson.dumps(data).decode("utf-8")


def build_table(rows: list[Row]) -> Table:
    columns = list(rows[0]) if rows else []
    table = Table(box=box.SIMPLE_HEAD, show_edge=False)
    for column in columns:
        table.add_column(column, overflow="fold")
    for row in rows:
        table.add_row(*(_cell(row.get(col)) for col in columns))
    return table


def get_format(*, json_output: bool = False, table: bool = False, human: bool = False) -> str:
    """Pick the output format from the command flags; JSON wins over table."""
    if json_output:
        return OutputFormat.JSON
    if table or human:
        return OutputFormat.TABLE
    return OutputFormat.TSV


def print_rows(rows: list[Row], fmt: str, console: Console | None = None) -> None:
    """Write ``rows`` to stdout in the requested format."""
    if fmt == OutputFormat.JSON:
        typer.echo(format_json(rows))
    elif fmt == OutputFormat.TABLE:
        if not rows:
            typer.echo(NO_RESULTS)
            return
        (console or Console()).print(build_table(rows))
    else:
        typer.echo(format_tsv(rows))
