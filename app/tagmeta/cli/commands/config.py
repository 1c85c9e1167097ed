"""Settings commands.

Provides commands to locate, show and initialize the tagmeta config file.
"""

import json
from typing import Annotated

import typer
from rich.table import Table

from tagmeta.cli.types import load_settings
from tagmeta.core.config import ConfigError, TagmetaConfig, config_to_dict, save_config
from tagmeta.core.paths import ensure_config_dir, get_config_path
from tagmeta.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show and initialize settings.",
    no_args_is_help=True,
)


@app.command()
def path() -> None:
    """Print the config file path."""
    typer.echo(str(get_config_path()))


@app.command()
def show(
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print settings as JSON."),
    ] = False,
) -> None:
    """Show the effective settings."""
    settings = load_settings()
    data = settings.model_dump(mode="json")

    if as_json:
        typer.echo(json.dumps(data))
        return

    config_path = get_config_path()
    source = str(config_path) if config_path.exists() else "defaults (no config file)"

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="text")
    table.add_column("Value", style="info")
    for key, value in data.items():
        table.add_row(key, "-" if value is None else str(value))

    console.print(table)
    console.print(f"[dim]Source: {source}[/dim]", soft_wrap=True)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_warning(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    config = TagmetaConfig()
    try:
        ensure_config_dir()
        saved = save_config(config, config_path)
    except (ConfigError, RuntimeError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
    console.print_json(json.dumps(config_to_dict(config)))
