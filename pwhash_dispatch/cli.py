# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Command line interface module."""

# flake8: noqa: E501
# pylint: disable=too-many-arguments,too-many-positional-arguments
import logging
import logging.config
from typing import Any, Dict, Optional

import typer
from pydantic import ValidationError

from pwhash_dispatch._logging import LogLevel, get_log_level, get_logging_config
from pwhash_dispatch._version import __version__
from pwhash_dispatch.config import ENV_PREFIX, Settings
from pwhash_dispatch.hashing import (
    ComparisonStatus,
    PasswordDispatcher,
    TypeUnavailableError,
    create_dispatcher,
)

APP_NAME = "pwhash-dispatch"
APP_HELP = "Create and check versioned password hashes"

EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_FAILURE = 2

LOG = logging.getLogger(__name__)

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_short=True,
)


def _dispatcher(ctx: typer.Context) -> PasswordDispatcher:
    dispatcher = ctx.obj
    if not isinstance(dispatcher, PasswordDispatcher):  # pragma: no cover
        raise typer.Exit(code=EXIT_FAILURE)
    return dispatcher


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    secret_key: Optional[str] = typer.Option(
        None,
        envvar=f"{ENV_PREFIX}SECRET_KEY",
        show_default=False,
        help="The site-wide secret key (enables the keyed PBKHM type)",
    ),
    preferred_type: Optional[str] = typer.Option(
        None,
        envvar=f"{ENV_PREFIX}PREFERRED_TYPE",
        help="The password type to use for new hashes",
    ),
    log_level: LogLevel = typer.Option(
        default=get_log_level(),
        help="The log level",
        case_sensitive=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Versioned password hashes (:<type>:<payload>)."""
    if version:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    if debug:
        log_level = LogLevel.DEBUG
    logging.config.dictConfig(get_logging_config(log_level.value))
    overrides: Dict[str, Any] = {"log_level": log_level.value}
    if secret_key is not None:
        overrides["secret_key"] = secret_key
    if preferred_type is not None:
        overrides["preferred_type"] = preferred_type
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        typer.echo(f"Invalid settings: {exc}", err=True)
        raise typer.Exit(code=EXIT_FAILURE) from exc
    LOG.debug("Creating the password dispatcher")
    ctx.obj = create_dispatcher(settings)


@app.command("hash")
def hash_password(
    ctx: typer.Context,
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="The password to hash",
    ),
    type_name: Optional[str] = typer.Option(
        None,
        "--type",
        help="Hash with this type instead of the preferred one",
    ),
) -> None:
    """Hash a password and print the stored hash."""
    dispatcher = _dispatcher(ctx)
    try:
        if type_name:
            stored = dispatcher.crypt_with(type_name, password)
        else:
            stored = dispatcher.crypt(password)
    except TypeUnavailableError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=EXIT_FAILURE) from exc
    typer.echo(stored)


@app.command("verify")
def verify_password(
    ctx: typer.Context,
    stored: str = typer.Argument(..., help="The stored hash"),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        help="The password to check",
    ),
) -> None:
    """Check a password against a stored hash.

    Exits with 0 on a match, 1 on a wrong password and 2 when the stored
    hash cannot be checked.
    """
    dispatcher = _dispatcher(ctx)
    result = dispatcher.compare(stored, password)
    if result.status is ComparisonStatus.FAILURE:
        reason = result.reason.value if result.reason else "unknown"
        typer.echo(f"{result.status.value}: {reason} {result.message}".strip())
        raise typer.Exit(code=EXIT_FAILURE)
    typer.echo(result.status.value)
    if result.matched and dispatcher.needs_rehash(stored):
        typer.echo("rehash recommended")
    raise typer.Exit(code=EXIT_MATCH if result.matched else EXIT_NO_MATCH)


@app.command("check")
def check_format(
    ctx: typer.Context,
    stored: str = typer.Argument(..., help="The stored hash"),
) -> None:
    """Check if a stored hash is in the preferred format."""
    dispatcher = _dispatcher(ctx)
    if dispatcher.is_preferred_format(stored):
        typer.echo("preferred")
        raise typer.Exit(code=0)
    typer.echo("outdated")
    raise typer.Exit(code=1)


@app.command("types")
def list_types(ctx: typer.Context) -> None:
    """List the registered password types (* marks the preferred one)."""
    registry = _dispatcher(ctx).registry
    preferred = registry.preferred_type
    for name in registry.types:
        marker = "*" if name == preferred else " "
        typer.echo(f"{marker} {name}")
    if preferred not in registry:
        typer.echo(f"! preferred type {preferred} is not registered", err=True)


if __name__ == "__main__":
    app()
