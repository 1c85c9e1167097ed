"""Image keyword commands.

Provides the command that reads embedded keywords from image files
matching the given paths.
"""

from typing import Annotated

import typer

from tagmeta.actions.read_tags import ReadTagAction
from tagmeta.cli.display import stream_outcomes
from tagmeta.cli.types import collect_paths, load_settings
from tagmeta.core.config import OutputFormat
from tagmeta.core.processor import ItemProcessor

app = typer.Typer(
    help="Read embedded image keywords.",
    no_args_is_help=True,
)


@app.command("get")
def get_tags(
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            help="Paths to image files. Wildcards (*, ?, [...]) are expanded.",
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
    """Read keywords embedded in image files.

    Supported formats: bmp, gif, jpeg, jpg, pbm, pgm, ppm, pnm, pcx, png,
    tiff, dng, svg. Other files matched by a wildcard are skipped.

    Examples:
        tagmeta tags get "photos/*.jpg"          # Expand a wildcard
        tagmeta tags get -L "photos/[draft].png"  # Take the path literally
        tagmeta tags get ~/Pictures/*.png -f json
        find . -name '*.png' | tagmeta tags get   # Read paths from stdin
    """
    settings = load_settings()
    arguments, mode = collect_paths(paths, literal_paths)

    processor = ItemProcessor(ReadTagAction())
    summary = stream_outcomes(
        processor.process(arguments, mode),
        output_format or settings.output_format,
    )

    if summary.failed:
        raise typer.Exit(code=1)
