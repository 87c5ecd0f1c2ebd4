"""Command line entry point for tzmoment."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Annotated, Optional, Union

import typer

from . import dst, formatting, host, relative
from .settings import get_settings, load_defaults
from .utils import setup_logging

LOGGER = logging.getLogger(__name__)

_EPOCH_MS = re.compile(r"^-?\d+$")

app = typer.Typer(
    help="Timezone aware date formatting and DST lookup",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)


def _moment_arg(value: Optional[str]) -> Union[str, int, None]:
    """Interpret ``now``, epoch milliseconds or date strings given on the command line."""

    if value is None or value.strip().lower() == "now":
        return None
    if _EPOCH_MS.match(value.strip()):
        return int(value)
    return value


@app.callback()
def configure(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level (default from TZMOMENT_LOG_LEVEL)")] = None,
    log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Also write logs to this file")] = None,
) -> None:
    setup_logging(log_level or get_settings().log_level, log_file)


@app.command("format")
def format_command(
    value: Annotated[str, typer.Argument(help="ISO date, epoch milliseconds or 'now'")],
    pattern: Annotated[Optional[str], typer.Option("-p", "--pattern", help="Format pattern")] = None,
    locale: Annotated[Optional[str], typer.Option("-l", "--locale", help="Locale such as en-US")] = None,
    zone: Annotated[Optional[str], typer.Option("-z", "--tz", help="Timezone identifier")] = None,
    hour12: Annotated[Optional[bool], typer.Option("--hour12/--no-hour12", help="Force the 12-hour clock")] = None,
    config: Annotated[Optional[Path], typer.Option("-c", "--config", help="YAML file with formatting defaults")] = None,
) -> None:
    """Render a date with a token pattern."""

    if config is not None:
        defaults = load_defaults(config)
        LOGGER.debug("Loaded formatting defaults from %s", config)
        pattern = pattern if pattern is not None else defaults.pattern
        locale = locale or defaults.locale
        zone = zone or defaults.timezone
        hour12 = hour12 if hour12 is not None else defaults.hour12

    typer.echo(
        formatting.format_date(
            _moment_arg(value),
            pattern,
            locale=locale,
            timezone=zone,
            hour12=hour12,
        )
    )


@app.command("info")
def info_command(
    value: Annotated[str, typer.Argument(help="ISO date, epoch milliseconds or 'now'")],
    zone: Annotated[str, typer.Option("-z", "--tz", help="Timezone identifier")] = "UTC",
) -> None:
    """Show the offset, DST flag and abbreviation of a zone at a moment."""

    info = dst.get_timezone_info(_moment_arg(value), zone)
    typer.echo(f"name: {info.name}")
    typer.echo(f"offset: {info.offset}")
    typer.echo(f"is_dst: {str(info.is_dst).lower()}")
    typer.echo(f"abbreviation: {info.abbreviation}")


@app.command("transitions")
def transitions_command(
    zone: Annotated[str, typer.Argument(help="Timezone identifier")],
    year: Annotated[Optional[int], typer.Option("-y", "--year", help="Year to scan (default: current year)")] = None,
) -> None:
    """List the days on which a zone changes DST status."""

    window = dst.dst_transitions(zone, year)
    typer.echo(f"start: {window.start if window.start is not None else '-'}")
    typer.echo(f"end: {window.end if window.end is not None else '-'}")


@app.command("relative")
def relative_command(
    value: Annotated[str, typer.Argument(help="ISO date or epoch milliseconds")],
    now: Annotated[Optional[str], typer.Option("--now", help="Reference moment (default: current time)")] = None,
    locale: Annotated[Optional[str], typer.Option("-l", "--locale", help="Locale such as en-US")] = None,
) -> None:
    """Describe a moment relative to now."""

    typer.echo(relative.from_now(_moment_arg(value), _moment_arg(now), locale=locale))


@app.command("zones")
def zones_command(
    prefix: Annotated[Optional[str], typer.Option("-f", "--filter", help="Only zones starting with this prefix")] = None,
) -> None:
    """List supported timezone identifiers."""

    for name in host.supported_zones():
        if prefix is None or name.startswith(prefix):
            typer.echo(name)


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
