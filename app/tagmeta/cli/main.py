"""tagmeta command-line entry point."""

from typing import Annotated

import typer

from tagmeta import __version__
from tagmeta.cli.commands import config, shortcut, tags
from tagmeta.core.log import configure_logging

app = typer.Typer(
    name="tagmeta",
    help="Read image keywords and create shortcuts from shell paths.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(tags.app, name="tags")
app.add_typer(shortcut.app, name="shortcut")
app.add_typer(config.app, name="config")


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"tagmeta version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=_show_version,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Trace how every path is resolved and processed."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log errors."),
    ] = False,
) -> None:
    """Read image keywords and create shortcuts from shell paths.

    Paths are wildcard patterns unless given with --literal-path. A path
    that fails is reported and the remaining paths are still processed.
    """
    ctx.ensure_object(dict)
    ctx.obj.update(verbose=verbose, quiet=quiet)
    configure_logging(verbose=verbose, quiet=quiet)


if __name__ == "__main__":
    app()
