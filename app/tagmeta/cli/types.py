"""Shared types and utilities for CLI commands.

This module provides the path argument handling, confirmation modes and
settings access shared by the tags and shortcut commands.
"""

import sys

import typer

from tagmeta.actions.base import ActionAbortedError
from tagmeta.actions.create_shortcut import Confirmer, always_confirm
from tagmeta.core.config import ConfigError, ConfirmMode, TagmetaConfig, load_config_or_default
from tagmeta.resolution.expander import ExpansionMode
from tagmeta.utils.formatting import err_console, print_error

# Exit code for invalid command-line usage (matches Click)
USAGE_ERROR = 2


def load_settings() -> TagmetaConfig:
    """Load settings, exiting with an error if the config file is invalid.

    Returns:
        Loaded or default TagmetaConfig.

    Raises:
        typer.Exit: If the config file cannot be parsed or validated.
    """
    try:
        return load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def collect_paths(
    paths: list[str] | None,
    literal_paths: list[str] | None,
    *,
    prompting: bool = False,
) -> tuple[list[str], ExpansionMode]:
    """Pick the path arguments and expansion mode for one invocation.

    PATH arguments and --literal-path are mutually exclusive. When neither
    is given and stdin is not a terminal, paths are read from stdin one
    per line and expanded like PATH arguments. Stdin stays reserved for
    answers when the command prompts.

    Args:
        paths: Positional path patterns.
        literal_paths: Values of --literal-path.
        prompting: Whether the command will ask for confirmation.

    Returns:
        Tuple of (arguments, mode).

    Raises:
        typer.Exit: With code 2 on conflicting or missing paths, or when
            paths would have to come from stdin while prompting.
    """
    if paths and literal_paths:
        print_error("Specify either PATH arguments or --literal-path, not both.")
        raise typer.Exit(code=USAGE_ERROR)

    if literal_paths:
        return list(literal_paths), ExpansionMode.LITERAL

    if paths:
        return list(paths), ExpansionMode.WILDCARD

    if prompting:
        print_error("--confirm needs PATH arguments or --literal-path; stdin is used for answers.")
        raise typer.Exit(code=USAGE_ERROR)

    if not sys.stdin.isatty():
        piped = [line.strip() for line in sys.stdin]
        piped = [line for line in piped if line]
        if piped:
            return piped, ExpansionMode.WILDCARD

    print_error("No paths specified. Pass PATH arguments, --literal-path, or pipe paths on stdin.")
    raise typer.Exit(code=USAGE_ERROR)


def resolve_confirm_mode(what_if: bool, confirm: bool, default: ConfirmMode) -> ConfirmMode:
    """Pick the confirmation mode from CLI flags and settings.

    Args:
        what_if: Value of --what-if.
        confirm: Value of --confirm.
        default: Mode from settings, used when no flag is given.

    Returns:
        The effective ConfirmMode.

    Raises:
        typer.Exit: With code 2 if both flags are given.
    """
    if what_if and confirm:
        print_error("--what-if and --confirm cannot be used together.")
        raise typer.Exit(code=USAGE_ERROR)
    if what_if:
        return ConfirmMode.WHAT_IF
    if confirm:
        return ConfirmMode.PROMPT
    return default


def _what_if(target: str, operation: str) -> bool:
    err_console.print(
        f'What if: Performing the operation "{operation}" on target "{target}".',
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
    return False


def _prompt(target: str, operation: str) -> bool:
    try:
        return typer.confirm(
            f'Performing the operation "{operation}" on target "{target}". Continue?',
            default=False,
        )
    except typer.Abort as e:
        raise ActionAbortedError(f"Stopped at {target}") from e


def build_confirmer(mode: ConfirmMode) -> Confirmer:
    """Create the confirmation callback for a mode.

    Args:
        mode: Confirmation mode.

    Returns:
        Callback taking (target, operation) and returning whether to proceed.
    """
    if mode == ConfirmMode.WHAT_IF:
        return _what_if
    if mode == ConfirmMode.PROMPT:
        return _prompt
    return always_confirm
