"""
Command-line interface.

Prints timestamps in the compact and calendar forms, either for the
current time or for raw values given on the command line.
"""

import logging
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import orjson
import typer
from pydantic import ValidationError

from timepoint.config.constants import LOCAL_TIMEZONE
from timepoint.config.settings import Settings, get_settings
from timepoint.core.exceptions import TimePointError
from timepoint.core.timestamp import TimePoint
from timepoint.core.types import FormatMode
from timepoint.telemetry.logger import setup_logging


logger = logging.getLogger(__name__)

app = typer.Typer(help="Microsecond timestamp converter", add_completion=False)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1) from e


def _resolve_zone(name: str | None, settings: Settings) -> tzinfo | None:
    if name is None:
        return settings.tzinfo
    if name.lower() == LOCAL_TIMEZONE:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        typer.echo(f"Unknown time zone: {name!r}", err=True)
        raise typer.Exit(code=1) from e


@app.command(context_settings={"ignore_unknown_options": True})
def show(
    values: list[int] | None = typer.Argument(
        None,
        help="Raw microsecond counts (whole seconds with --unix), negative before 1970. "
        "Defaults to now.",
    ),
    unix: bool = typer.Option(False, "--unix", help="Read values as whole Unix seconds."),
    no_micros: bool = typer.Option(False, "--no-micros", help="Omit the fraction."),
    tz: str | None = typer.Option(None, "--tz", help="'local' or an IANA zone name."),
    legacy: bool = typer.Option(
        False, "--legacy", help="Take calendar fields from the live clock."
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON object per value."),
) -> None:
    """Print timestamps in compact and calendar form."""
    settings = _load_settings()
    zone = _resolve_zone(tz, settings)
    show_micros = settings.show_microseconds and not no_micros
    mode = FormatMode.LIVE_CLOCK if legacy else settings.format_mode

    log = setup_logging(settings.log_level, settings.log_file, zone)
    try:
        if values:
            points = [TimePoint.from_unix_time(v) if unix else TimePoint(v) for v in values]
        else:
            points = [TimePoint.now()]
        logger.debug("Formatting %d value(s) in %s mode", len(points), mode.value)

        for point in points:
            formatted = point.to_formatted_string(show_micros, tz=zone, mode=mode)
            if as_json:
                payload = {
                    "microseconds": point.microseconds_since_epoch,
                    "seconds": point.seconds_since_epoch,
                    "compact": point.to_string(),
                    "formatted": formatted,
                }
                typer.echo(orjson.dumps(payload).decode())
            else:
                typer.echo(f"{point.to_string()}  {formatted}")
    except TimePointError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    finally:
        log.stop()
