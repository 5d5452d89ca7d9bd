"""
Tabular Export - CLI Interface

Command-line interface using Typer for exporting CSV and Parquet tables.
"""

import csv
from pathlib import Path
from typing import Any, Optional

import pyarrow.parquet as pq
import typer
from rich.console import Console
from rich.table import Table

from tabular_export import __version__
from tabular_export.export import (
    ArrowDataSource,
    ExportConfig,
    ExportManager,
    ListDataSource,
    TabularDataSource,
)
from tabular_export.shared.config import get_settings
from tabular_export.shared.constants import (
    DEFAULT_FORMAT,
    DEFAULT_TITLE,
    FORMAT_DESCRIPTORS,
    ExportFormat,
)
from tabular_export.shared.exceptions import UnsupportedFormatError
from tabular_export.shared.logging import setup_logging

app = typer.Typer(
    name="tabular-export",
    help="Export tables to CSV, spreadsheet and HTML report documents",
    add_completion=False,
)
console = Console()


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (default: from settings)"
    ),
):
    """Export tables to CSV, spreadsheet and HTML report documents."""
    setup_logging(level=log_level)


def _coerce(text: str) -> Any:
    """Turn numeric-looking text into int/float, blanks into None."""
    if text == "":
        return None
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            continue
    return text


def load_table(path: Path, numbers: bool = False) -> TabularDataSource:
    """
    Load a table from a Parquet or CSV file.

    Args:
        path: Input file; ".parquet" is read with PyArrow, anything else as CSV
        numbers: Convert numeric-looking CSV cells to numbers

    Returns:
        Data source over the file contents
    """
    if path.suffix.lower() == ".parquet":
        return ArrowDataSource(pq.read_table(path))

    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        columns = next(reader, [])
        rows = [[_coerce(cell) for cell in row] if numbers else row for row in reader]
    return ListDataSource(columns, rows)


@app.command()
def export(
    input_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="CSV or Parquet file to export"
    ),
    output: Path = typer.Argument(..., help="Target file"),
    format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Format id or extension (default: from the output suffix)",
    ),
    title: str = typer.Option(DEFAULT_TITLE, "--title", "-t", help="Document title"),
    subtitle: str = typer.Option("", "--subtitle", "-s", help="Document subtitle"),
    header: bool = typer.Option(True, "--header/--no-header", help="Include header information"),
    footer: bool = typer.Option(True, "--footer/--no-footer", help="Include footer information"),
    timestamp: bool = typer.Option(True, "--timestamp/--no-timestamp", help="Include timestamps"),
    columns: list[str] = typer.Option([], "--column", "-c", help="Columns to export (default: all)"),
    numbers: bool = typer.Option(False, "--numbers", help="Treat numeric CSV cells as numbers"),
):
    """
    Export a table file to another format.

    Example:
        tabular-export export products.csv report.html -t "Products" -c ID -c Name
    """
    try:
        if format:
            fmt = ExportFormat.parse(format)
        else:
            fmt = ExportFormat.for_path(output) or DEFAULT_FORMAT
    except UnsupportedFormatError as e:
        console.print(f"[red]Error: {e.message}[/]")
        raise typer.Exit(2)

    source = load_table(input_path, numbers=numbers)
    config = ExportConfig.from_settings(
        get_settings(),
        title=title,
        subtitle=subtitle,
        include_header=header,
        include_footer=footer,
        include_timestamp=timestamp,
        selected_columns=columns or None,
    )

    with console.status(f"[bold green]Exporting {source.row_count} rows..."):
        result = ExportManager().export(source, config, fmt, output)

    if not result.ok:
        console.print(f"[red]Error: {result.error.message}[/]")
        raise typer.Exit(1)

    console.print(
        f"[green]✓ Exported {result.rows_exported} rows, "
        f"{result.columns_exported} columns ({fmt.descriptor.display_name})[/]"
    )
    console.print(f"  • {result.path}")


@app.command()
def formats():
    """List available export formats."""
    table = Table(title="Export Formats")
    table.add_column("Format", style="cyan")
    table.add_column("Extension", style="green")
    table.add_column("Description")

    for fmt, descriptor in FORMAT_DESCRIPTORS.items():
        table.add_row(fmt.value, f".{descriptor.extension}", descriptor.display_name)

    console.print(table)


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]Tabular Export[/] v{__version__}")
    console.print("[dim]CSV, spreadsheet and HTML report export for tables[/]")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
