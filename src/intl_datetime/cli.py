"""Command-line interface for intl_datetime."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer
from rich.console import Console
from rich.table import Table

from intl_datetime.config import FormatterSettings, load_settings
from intl_datetime.exceptions import DateTimeFormatError
from intl_datetime.formatter import DateTimeFormatter
from intl_datetime.protocols import (
    DEFAULT_DATE_VERBOSITY,
    DEFAULT_TIME_VERBOSITY,
    SUPPORTED_FORMATS,
)

app = typer.Typer(
    name="intl-datetime",
    help="Locale-aware date and time formatting",
    add_completion=False,
)

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Configuration file (json, toml, yaml)"),
]
LocaleOption = Annotated[
    Optional[str],
    typer.Option("--locale", "-l", help="Locale, e.g. en_US or de-DE"),
]
TimezoneOption = Annotated[
    Optional[str],
    typer.Option("--timezone", "-z", help="Convert the value to this IANA timezone first"),
]


def _settings(config: Optional[Path]) -> FormatterSettings:
    try:
        settings = load_settings(config)
    except DateTimeFormatError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return settings


def _parse_value(value: str, tz_name: Optional[str]) -> datetime:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        typer.echo(f"Error: Not an ISO 8601 timestamp: {value}", err=True)
        raise typer.Exit(1)

    if tz_name:
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=ZoneInfo("UTC"))
        try:
            parsed = parsed.astimezone(ZoneInfo(tz_name))
        except (ZoneInfoNotFoundError, ValueError):
            typer.echo(f"Error: Unknown timezone: {tz_name}", err=True)
            raise typer.Exit(1)
    return parsed


@app.command(name="render")
def render_cmd(
    value: Annotated[str, typer.Argument(help="ISO 8601 timestamp")],
    locale: LocaleOption = None,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="Date verbosity (none, short, medium, long, full)"),
    ] = None,
    time: Annotated[
        Optional[str],
        typer.Option("--time", "-t", help="Time verbosity (none, short, medium, long, full)"),
    ] = None,
    timezone: TimezoneOption = None,
    config: ConfigOption = None,
) -> None:
    """Format a timestamp.

    Without --date and --time the configured formats are used. Giving only one of
    them leaves the other part out.
    """
    settings = _settings(config)
    formatter = DateTimeFormatter(locale or settings.locale)
    parsed = _parse_value(value, timezone)

    try:
        if date is None and time is None:
            result = formatter.format_datetime(
                parsed, settings.date_format, settings.time_format
            )
        elif time is None:
            result = formatter.format_date(parsed, date)
        elif date is None:
            result = formatter.format_time(parsed, time)
        else:
            result = formatter.format_datetime(parsed, date, time)
    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(result)


@app.command(name="styles")
def styles_cmd(
    value: Annotated[str, typer.Argument(help="ISO 8601 timestamp")],
    locale: LocaleOption = None,
    timezone: TimezoneOption = None,
    config: ConfigOption = None,
) -> None:
    """Show a timestamp in every date/time verbosity pairing."""
    settings = _settings(config)
    formatter = DateTimeFormatter(locale or settings.locale)
    parsed = _parse_value(value, timezone)

    table = Table(show_header=True, header_style="bold", title=formatter.locale)
    table.add_column("Date", style="cyan")
    table.add_column("Time", style="cyan")
    table.add_column("Output", style="white", no_wrap=True)

    try:
        for date_name in SUPPORTED_FORMATS:
            for time_name in SUPPORTED_FORMATS:
                table.add_row(
                    date_name,
                    time_name,
                    formatter.format_datetime(parsed, date_name, time_name),
                )
    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    Console().print(table)


@app.command(name="formats")
def formats_cmd() -> None:
    """List the accepted verbosity names."""
    for name, verbosity in SUPPORTED_FORMATS.items():
        defaults = (DEFAULT_DATE_VERBOSITY, DEFAULT_TIME_VERBOSITY)
        suffix = " (default)" if verbosity in defaults else ""
        typer.echo(f"{name}{suffix}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
