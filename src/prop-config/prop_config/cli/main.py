"""CLI entrypoint for prop-config — typer app with `show`, `get` and `watch`."""

import logging
import sys
import time
from enum import StrEnum
from pathlib import Path

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console

from prop_config.cli.output.table import build_snapshot_table
from prop_config.core.errors import PropConfigError
from prop_config.dynamic.application.loader import DynamicConfigLoader
from prop_config.dynamic.application.watcher import PollingConfigWatcher
from prop_config.dynamic.domain.config import DynamicConfig
from prop_config.dynamic.infrastructure.file_config import FileDynamicConfig
from prop_config.dynamic.infrastructure.observer import (
    StructlogDynamicConfigObserver,
    StructlogWatcherObserver,
)
from prop_config.settings.domain.options import StoreOptions, WatcherOptions

app = typer.Typer(add_completion=False)


class ValueType(StrEnum):
    STRING = "string"
    INT = "int"
    LONG = "long"
    DOUBLE = "double"
    BOOLEAN = "boolean"


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog based on the requested format and level."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = logging.getLevelNamesMapping().get(log_level.upper())
    if level is None:
        typer.echo(f"Invalid log level: {log_level!r}.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_required(path: Path) -> FileDynamicConfig:
    loader = DynamicConfigLoader(
        observer=StructlogDynamicConfigObserver(),
        options=StoreOptions(fail_on_missing=True),
    )
    return loader.load(name=str(path))


def _read_typed(
    config: DynamicConfig,
    key: str,
    value_type: ValueType,
    default: str | None,
) -> object:
    """Read ``key`` as ``value_type``; a given default is converted the same way."""
    if default is None:
        match value_type:
            case ValueType.STRING:
                return config.get_string(key)
            case ValueType.INT:
                return config.get_int(key)
            case ValueType.LONG:
                return config.get_long(key)
            case ValueType.DOUBLE:
                return config.get_double(key)
            case ValueType.BOOLEAN:
                return config.get_boolean(key)

    match value_type:
        case ValueType.STRING:
            return config.get_string(key, default)
        case ValueType.INT:
            return config.get_int(key, int(default))
        case ValueType.LONG:
            return config.get_long(key, int(default))
        case ValueType.DOUBLE:
            return config.get_double(key, float(default))
        case ValueType.BOOLEAN:
            return config.get_boolean(key, default.lower() == "true")


_CONFIG_PATH_ARGUMENT = typer.Argument(..., help="Path to a properties file")
_PREFIX_OPTION = typer.Option(
    None, "--prefix", "-p", help="Only show keys starting with this prefix"
)
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


@app.command()
def show(
    config_path: Path = _CONFIG_PATH_ARGUMENT,
    prefix: str | None = _PREFIX_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    log_level: str = typer.Option("warning", "--log-level", help="Minimum log level"),
) -> None:
    """Print every key/value of a properties file as a table."""
    _configure_structlog(log_format=log_format, log_level=log_level)
    try:
        config = _load_required(path=config_path)
    except PropConfigError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    Console().print(build_snapshot_table(snapshot=config.snapshot(), prefix=prefix))


@app.command()
def get(
    config_path: Path = _CONFIG_PATH_ARGUMENT,
    key: str = typer.Argument(..., help="Key to read"),
    value_type: ValueType = typer.Option(
        ValueType.STRING, "--type", "-t", help="Type to read the value as"
    ),
    default: str | None = typer.Option(
        None, "--default", "-d", help="Value used when the key is missing or blank"
    ),
    log_format: str = _LOG_FORMAT_OPTION,
    log_level: str = typer.Option("warning", "--log-level", help="Minimum log level"),
) -> None:
    """Print one value of a properties file, read as the requested type."""
    _configure_structlog(log_format=log_format, log_level=log_level)
    try:
        config = _load_required(path=config_path)
        value = _read_typed(
            config=config, key=key, value_type=value_type, default=default
        )
    except PropConfigError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        typer.echo(f"Failed to parse default {default!r} as {value_type.value}")
        raise typer.Exit(code=1) from exc

    typer.echo(str(value))


@app.command()
def watch(
    config_path: Path = _CONFIG_PATH_ARGUMENT,
    interval: float = typer.Option(
        2.0, "--interval", "-i", help="Seconds between polls"
    ),
    prefix: str | None = _PREFIX_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    log_level: str = typer.Option("info", "--log-level", help="Minimum log level"),
) -> None:
    """Print a properties file as a table, and again every time it changes."""
    _configure_structlog(log_format=log_format, log_level=log_level)
    console = Console()

    def _print_snapshot(config: DynamicConfig) -> None:
        console.print(build_snapshot_table(snapshot=config.snapshot(), prefix=prefix))

    try:
        watcher = PollingConfigWatcher(
            observer=StructlogWatcherObserver(),
            options=WatcherOptions(interval_seconds=interval),
        )
        loader = DynamicConfigLoader(
            observer=StructlogDynamicConfigObserver(),
            options=StoreOptions(fail_on_missing=True),
            watcher=watcher,
        )
        loader.load(name=str(config_path)).add_listener(_print_snapshot)
    except (PropConfigError, ValidationError) as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    with watcher:
        try:
            while watcher.running:
                time.sleep(interval)
        except KeyboardInterrupt:
            typer.echo("Stopped watching.")


if __name__ == "__main__":
    app()
