from __future__ import annotations

import logging
from pathlib import Path
import sys

import click
from pydantic import ValidationError
import yaml

from until_connected.errors import ConnectionFailedError, InvalidTargetError
from until_connected.models import DEFAULT_MAX_RETRIES, CommandFile
from until_connected.poll import until_connected
from until_connected.target import Target, resolve_target
from until_connected.utils.cli import run_coroutine
from until_connected.utils.logger import configure_logging, logger

format_message = (
    "Command file does not match the expected format. Please edit the file so that it provides a"
    " 'target' and, optionally, 'max_retries', 'connection_interval' and 'timeout'."
)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
if sys.platform == "win32":
    # Allow Windows users to get help via "/?".
    # To avoid ambiguity with actual paths, only support this on Windows.
    CONTEXT_SETTINGS["help_option_names"].append("/?")


def set_logging_config(v: int, q: int, log_file: Path | None = None):
    logger.setLevel(max(1, logging.WARNING - 10 * (v - q)))
    if log_file:
        logger.handlers.clear()
        file_handler = logging.FileHandler(log_file)
        logger.addHandler(file_handler)


def parse_target(value: int | str) -> Target:
    """Treat a string of ASCII digits as a port number, and anything else as a URL."""
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return value


def load_command_file(command_file: Path) -> dict:
    if command_file.suffix not in [".yaml", ".yml"]:
        raise click.BadParameter(
            click.wrap_text(format_message), param_hint="'-c' / '--command-file'"
        )

    with command_file.open() as f:
        file_contents = yaml.safe_load(f)
    try:
        command = CommandFile.model_validate(file_contents)
    except ValidationError as error:
        raise click.BadParameter(
            click.wrap_text(format_message), param_hint="'-c' / '--command-file'"
        ) from error
    return command.model_dump(exclude_none=True)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(prog_name="until-connected")
@click.argument("target", required=False)
@click.option(
    "-n",
    "--max-retries",
    type=click.IntRange(min=1),
    show_default=str(DEFAULT_MAX_RETRIES),
    help="Total number of connection attempts before giving up.",
)
@click.option(
    "-i",
    "--interval",
    "connection_interval",
    type=click.IntRange(min=0),
    help="Milliseconds to wait before each attempt after the first.",
)
@click.option(
    "-t",
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    help="Seconds allowed for a single connection attempt.",
)
@click.option(
    "-c",
    "--command-file",
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path),
    help="YAML file containing the target and retry options. "
    "Options given on the command line take precedence.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="""\b
    Defaults to WARNING level logging
    -v  Show INFO level logging
    -vv Show DEBUG level logging""",
)
@click.option("-q", "--quiet", count=True, help="Show ERROR and CRITICAL level logging")
@click.option(
    "-l",
    "--log-file",
    help="Path where log file will be created",
    type=click.Path(dir_okay=False, path_type=Path),
)
@run_coroutine
async def until_connected_cli(
    target: str | None,
    max_retries: int | None,
    connection_interval: int | None,
    timeout: float | None,
    command_file: Path | None,
    verbose: int,
    quiet: int,
    log_file: Path | None,
) -> None:
    """
    Wait until TARGET accepts TCP connections.

    TARGET is either a port number on the local machine, or a URL such as
    http://127.0.0.1:8080.
    """
    configure_logging()
    if verbose or quiet or log_file:
        set_logging_config(verbose, quiet, log_file)

    options = load_command_file(command_file) if command_file else {}
    cli_options = {
        "target": target,
        "max_retries": max_retries,
        "connection_interval": connection_interval,
        "timeout": timeout,
    }
    options.update({key: value for key, value in cli_options.items() if value is not None})
    if "target" not in options:
        raise click.UsageError("A target must be provided as an argument or in the command file.")

    parsed_target = parse_target(options.pop("target"))
    try:
        params = resolve_target(parsed_target)
    except InvalidTargetError as error:
        raise click.BadParameter(str(error), param_hint="'TARGET'") from error

    try:
        await until_connected(parsed_target, **options)
    except ConnectionFailedError as error:
        logger.info(f"Last connection error: {error.__cause__}")
        raise click.ClickException(str(error)) from error

    click.echo(f"Connected to {params.host or ''}:{params.port}.")
