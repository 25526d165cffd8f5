"""Command-line interface.

    hivecheck columns dev.tab --exclude tmp
    hivecheck duplicates dev.tab col1 col2
    hivecheck duplicates dev.tab "col1, col2"
    hivecheck analyse dev.tab 0.5 dummy --output report.yaml
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table as RichTable

from hivecheck.config import HiveSettings, load_settings
from hivecheck.duplicates import DuplicateCounter
from hivecheck.exceptions import (
    HiveCheckError,
    InvalidArgumentsError,
    QueryExecutionError,
    SchemaUnavailableError,
    ToolUnavailableError,
)
from hivecheck.execution.beeline import BeelineExecutor
from hivecheck.models.report import save_report_to_json, save_report_to_yaml
from hivecheck.profiling.profiler import TableProfiler
from hivecheck.schema import SchemaProvider, columns_csv
from hivecheck.sql.identifiers import split_columns

app = typer.Typer(
    name="hivecheck",
    help="Profile Hive tables and count duplicate rows.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

EXIT_CODES: list[tuple[type[HiveCheckError], int]] = [
    (InvalidArgumentsError, 1),
    (ToolUnavailableError, 2),
    (SchemaUnavailableError, 3),
    (QueryExecutionError, 4),
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@contextmanager
def _exit_on_error() -> Iterator[None]:
    """Report hivecheck errors on stderr and exit with a code per error kind."""
    try:
        yield
    except HiveCheckError as e:
        err_console.print(f"[red]{type(e).__name__}:[/red] {e}", highlight=False)
        for error_type, code in EXIT_CODES:
            if isinstance(e, error_type):
                raise typer.Exit(code) from e
        raise typer.Exit(1) from e


def _executor(ctx: typer.Context) -> BeelineExecutor:
    settings = ctx.obj if isinstance(ctx.obj, HiveSettings) else HiveSettings()
    return BeelineExecutor(settings)


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="YAML file with connection settings (overrides HIVE_* variables)",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug output and SQL")
    ] = False,
) -> None:
    """Profile Hive tables and count duplicate rows."""
    _configure_logging(verbose)
    ctx.obj = load_settings(config)


@app.command()
def columns(
    ctx: typer.Context,
    table: Annotated[str, typer.Argument(help="Table name, e.g. dev.tab")],
    exclude: Annotated[
        Optional[str],
        typer.Option("--exclude", "-e", help="Skip columns containing this text"),
    ] = None,
) -> None:
    """Print a comma-separated list of a table's columns."""
    with _exit_on_error():
        result = SchemaProvider(_executor(ctx)).list_columns(table, exclude)
    console.print(columns_csv(result), highlight=False, soft_wrap=True)


@app.command()
def duplicates(
    ctx: typer.Context,
    table: Annotated[str, typer.Argument(help="Table name, e.g. dev.tab")],
    column_args: Annotated[
        Optional[list[str]],
        typer.Argument(
            metavar="[COLUMNS]...",
            help="Columns defining a duplicate (default: all columns)",
        ),
    ] = None,
    show_sql: Annotated[
        bool, typer.Option("--show-sql", help="Print the generated statement")
    ] = False,
) -> None:
    """Count the duplicate rows of a table."""
    with _exit_on_error():
        report = DuplicateCounter(_executor(ctx)).report(
            table, split_columns(column_args) or None
        )
    if show_sql:
        err_console.print(report.sql, highlight=False, soft_wrap=True)
    console.print(report.duplicate_count)


@app.command()
def analyse(
    ctx: typer.Context,
    table: Annotated[str, typer.Argument(help="Table name, e.g. dev.tab")],
    sample: Annotated[
        Optional[str],
        typer.Argument(help="Row limit (e.g. 10000) or fraction of rows (e.g. 0.5)"),
    ] = None,
    exclude: Annotated[
        Optional[str],
        typer.Argument(help="Skip columns whose name contains this text"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output", "-o", help="Write the report to a .yaml or .json file"
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Console output: table, yaml or json"),
    ] = "table",
    show_sql: Annotated[
        bool, typer.Option("--show-sql", help="Print the generated statement")
    ] = False,
) -> None:
    """Compute min, max, max length, distinct % and null % for every column."""
    if output_format not in ("table", "yaml", "json"):
        err_console.print(f"[red]Unknown format:[/red] {output_format}")
        raise typer.Exit(1)

    with _exit_on_error():
        report = TableProfiler(_executor(ctx)).profile(table, sample, exclude)

    if show_sql:
        err_console.print(report.sql, highlight=False, soft_wrap=True)

    if output is not None:
        if output.suffix.lower() == ".json":
            save_report_to_json(report, output)
        else:
            save_report_to_yaml(report, output)
        logger.info(f"Report written to {output}")

    if output_format == "json":
        console.print_json(json.dumps(report.model_dump(mode="json")))
    elif output_format == "yaml":
        console.print(
            yaml.dump(report.model_dump(mode="json"), sort_keys=False),
            highlight=False,
        )
    else:
        rich_table = RichTable(title=f"{report.table}")
        rich_table.add_column("metric_name")
        rich_table.add_column("metric_value", justify="right")
        for record in report.metrics:
            rich_table.add_row(record.metric_name, record.metric_value)
        console.print(rich_table)


__all__ = ["app", "split_columns"]
