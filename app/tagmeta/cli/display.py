"""Shared display functions for records and batch results.

Provides streaming record output, result tables and the batch runner
used by the tags and shortcut commands.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass

import typer
from rich.markup import escape
from rich.table import Table

from tagmeta.core.config import OutputFormat
from tagmeta.models.records import ItemOutcome, Record, ShortcutRecord, TagMetadata
from tagmeta.utils.formatting import console, print_reported_error


@dataclass(frozen=True, slots=True)
class BatchSummary:
    """Counts collected while streaming one batch.

    Attributes:
        records: Number of records emitted.
        errors: Number of errors reported.
    """

    records: int
    errors: int

    @property
    def failed(self) -> bool:
        """Check if any error was reported."""
        return self.errors > 0


def format_record(record: Record) -> str:
    """Format a record as a single line of Rich markup.

    Args:
        record: Record to format.

    Returns:
        Rich markup string.
    """
    if isinstance(record, TagMetadata):
        if record.keywords:
            keywords = escape(", ".join(record.keywords))
            return f"[path]{escape(record.file.full_name)}[/]  [keyword]{keywords}[/]"
        return f"[path]{escape(record.file.full_name)}[/]  [muted](no keywords)[/]"
    return f"[shortcut]{escape(record.file.full_name)}[/] -> [path]{escape(record.target.full_name)}[/]"


def print_record(record: Record, output_format: OutputFormat) -> None:
    """Print one record as soon as it is produced.

    JSON output is one object per line so it can be consumed while
    the batch is still running.

    Args:
        record: Record to print.
        output_format: TEXT or JSON.
    """
    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(record.to_dict()))
    else:
        console.print(format_record(record), soft_wrap=True, highlight=False)


def create_tags_table(records: list[TagMetadata]) -> Table:
    """Create a Rich table displaying keyword records.

    Args:
        records: Keyword records to display.

    Returns:
        Rich Table with File and Keywords columns.
    """
    table = Table(
        title="Image Keywords",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("File", style="path", overflow="fold")
    table.add_column("Keywords", style="keyword")

    for record in records:
        keywords = escape(", ".join(record.keywords)) if record.keywords else "[muted]-[/muted]"
        table.add_row(escape(record.file.full_name), keywords)

    return table


def create_shortcuts_table(records: list[ShortcutRecord]) -> Table:
    """Create a Rich table displaying created shortcuts.

    Args:
        records: Shortcut records to display.

    Returns:
        Rich Table with Shortcut and Target columns.
    """
    table = Table(
        title="Created Shortcuts",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Shortcut", style="shortcut", overflow="fold")
    table.add_column("Target", style="path", overflow="fold")

    for record in records:
        table.add_row(escape(record.file.full_name), escape(record.target.full_name))

    return table


def create_records_table(records: list[Record]) -> Table:
    """Create the table matching the record type of a batch."""
    shortcuts = [r for r in records if isinstance(r, ShortcutRecord)]
    if shortcuts:
        return create_shortcuts_table(shortcuts)
    return create_tags_table([r for r in records if isinstance(r, TagMetadata)])


def stream_outcomes(outcomes: Iterable[ItemOutcome], output_format: OutputFormat) -> BatchSummary:
    """Print outcomes as they arrive and count them.

    Errors are printed to stderr immediately. Records are printed
    immediately in TEXT and JSON format; in TABLE format they are
    collected and printed as one table at the end.

    Args:
        outcomes: Outcome stream from the item processor.
        output_format: Output format for records.

    Returns:
        BatchSummary with record and error counts.
    """
    collected: list[Record] = []
    records = 0
    errors = 0

    for outcome in outcomes:
        if outcome.error is not None:
            errors += 1
            print_reported_error(outcome.error)
        elif outcome.record is not None:
            records += 1
            if output_format == OutputFormat.TABLE:
                collected.append(outcome.record)
            else:
                print_record(outcome.record, output_format)

    if output_format == OutputFormat.TABLE:
        if collected:
            console.print(create_records_table(collected))
        console.print(f"\n[dim]{records} item(s), {errors} error(s)[/dim]")

    return BatchSummary(records=records, errors=errors)
