"""Shortcut commands.

Provides the command that creates Windows shortcut (.lnk) files for
the given paths.
"""

from pathlib import Path
from typing import Annotated

import typer

from tagmeta.actions.base import ActionAbortedError
from tagmeta.actions.create_shortcut import CreateShortcutAction, OutputDirectoryNotFoundError
from tagmeta.cli.display import stream_outcomes
from tagmeta.cli.types import build_confirmer, collect_paths, load_settings, resolve_confirm_mode
from tagmeta.core.config import ConfirmMode, OutputFormat
from tagmeta.core.processor import ItemProcessor
from tagmeta.utils.formatting import print_error

app = typer.Typer(
    help="Create shortcut files.",
    no_args_is_help=True,
)


@app.command("create")
def create(
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            help="Paths to link to. Wildcards (*, ?, [...]) are expanded.",
            show_default=False,
        ),
    ] = None,
    literal_paths: Annotated[
        list[str] | None,
        typer.Option(
            "--literal-path",
            "-L",
            help="Path used exactly as typed; wildcards are not expanded. Repeatable.",
            show_default=False,
        ),
    ] = None,
    output_path: Annotated[
        Path | None,
        typer.Option(
            "--output-path",
            "-o",
            help="Existing directory for the shortcuts. Defaults to the current directory.",
            show_default=False,
        ),
    ] = None,
    what_if: Annotated[
        bool,
        typer.Option("--what-if", help="Show what would be created without creating anything."),
    ] = False,
    confirm: Annotated[
        bool,
        typer.Option("--confirm", help="Ask before creating each shortcut."),
    ] = False,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format: text, json or table.",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Create a <name>.lnk shortcut for every matching file.

    Shortcuts are written through the Windows Script Host and are only
    available on Windows; elsewhere each file reports an error.

    Examples:
        tagmeta shortcut create "docs/*.pdf" -o ~/Desktop
        tagmeta shortcut create report.docx --what-if
        tagmeta shortcut create -L "notes[1].txt" --confirm
    """
    settings = load_settings()
    mode = resolve_confirm_mode(what_if, confirm, settings.confirm_mode)
    arguments, expansion_mode = collect_paths(
        paths, literal_paths, prompting=mode == ConfirmMode.PROMPT
    )

    output_dir = (output_path or settings.shortcut_output_dir or Path.cwd()).expanduser().resolve()
    action = CreateShortcutAction(output_dir, confirm=build_confirmer(mode))
    processor = ItemProcessor(action)

    try:
        outcomes = processor.process(arguments, expansion_mode)
    except OutputDirectoryNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        summary = stream_outcomes(outcomes, output_format or settings.output_format)
    except ActionAbortedError as e:
        print_error(f"Aborted. {e}")
        raise typer.Exit(code=1) from e

    if summary.failed:
        raise typer.Exit(code=1)
