"""Command-line interface for solar event calculations."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date, datetime, timezone

from solar_events import __version__
from solar_events.astronomy.calculator import get_sun_position, get_twilight_times
from solar_events.astronomy.errors import SolarCalculationError
from solar_events.astronomy.events import EVENTS, event_by_name
from solar_events.astronomy.riseset import (
    diurnal_arc_hours,
    rise_set_hours,
    utc_hours_to_datetime,
)
from solar_events.config import configure_logging, get_settings
from solar_events.models.location import Coordinates

logger = logging.getLogger(__name__)


def _coordinates(value: str) -> Coordinates:
    try:
        return Coordinates.from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date: '{value}'. Expected YYYY-MM-DD"
        ) from None


def _time(value: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid time: '{value}'. Expected ISO 8601"
        ) from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _format_hours(hours: float) -> str:
    """Format a duration in hours as H:MM:SS."""
    seconds = round(hours * 3600)
    return f"{seconds // 3600}:{seconds % 3600 // 60:02d}:{seconds % 60:02d}"


def _format_time(value: datetime | None) -> str:
    return value.isoformat() if value else "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solar-events",
        description="Solar Events - Sunrise, sunset and twilight times",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_location_and_date(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "location",
            type=_coordinates,
            help="Location as lat,lon coordinates (east positive)",
        )
        sub.add_argument(
            "--date",
            type=_date,
            default=None,
            help="Calendar date, YYYY-MM-DD (default: today, UTC)",
        )

    def add_event(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--event",
            choices=list(EVENTS),
            default=None,
            help="Altitude event (default: DEFAULT_EVENT setting)",
        )

    # Day length command
    daylength_parser = subparsers.add_parser(
        "daylength", help="Hours the Sun spends above an event altitude"
    )
    add_location_and_date(daylength_parser)
    add_event(daylength_parser)

    # Rise/set command
    riseset_parser = subparsers.add_parser(
        "riseset", help="Rise and set times of an event in UTC"
    )
    add_location_and_date(riseset_parser)
    add_event(riseset_parser)

    # Twilight command
    twilight_parser = subparsers.add_parser(
        "twilight", help="Sunrise, sunset and all twilight boundaries"
    )
    add_location_and_date(twilight_parser)

    # Position command
    position_parser = subparsers.add_parser(
        "position", help="Sun altitude and azimuth at an instant"
    )
    position_parser.add_argument("location", type=_coordinates, help="lat,lon")
    position_parser.add_argument(
        "--time",
        type=_time,
        default=None,
        help="ISO 8601 instant; naive means UTC (default: now)",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")

    return parser


def _run_daylength(args: argparse.Namespace, on: date) -> None:
    event = event_by_name(args.event or get_settings().default_event)
    hours = diurnal_arc_hours(on.year, on.month, on.day, args.location, event)
    print(f"{event.name} day length on {on} at {args.location}: "
          f"{hours:.4f} h ({_format_hours(hours)})")


def _run_riseset(args: argparse.Namespace, on: date) -> None:
    event = event_by_name(args.event or get_settings().default_event)
    hours = rise_set_hours(on.year, on.month, on.day, args.location, event)
    rise = utc_hours_to_datetime(on.year, on.month, on.day, hours.rise)
    setting = utc_hours_to_datetime(on.year, on.month, on.day, hours.set)
    print(f"{event.name} on {on} at {args.location}")
    print(f"  rise: {rise.isoformat()} ({hours.rise:+.4f} h UTC)")
    print(f"  set:  {setting.isoformat()} ({hours.set:+.4f} h UTC)")


def _run_twilight(args: argparse.Namespace, on: date) -> None:
    times = get_twilight_times(args.location, on)
    print(f"Sun events on {on} at {args.location} (UTC)")
    rows = [
        ("astronomical dawn", times.astronomical_twilight_start),
        ("nautical dawn", times.nautical_twilight_start),
        ("civil dawn", times.civil_twilight_start),
        ("sunrise", times.sunrise),
        ("solar noon", times.solar_noon),
        ("sunset", times.sunset),
        ("civil dusk", times.civil_twilight_end),
        ("nautical dusk", times.nautical_twilight_end),
        ("astronomical dusk", times.astronomical_twilight_end),
    ]
    for label, value in rows:
        print(f"  {label:<18} {_format_time(value)}")


def _run_position(args: argparse.Namespace) -> None:
    when = args.time or datetime.now(timezone.utc)
    sun = get_sun_position(args.location, when)
    print(f"Sun at {when.isoformat()} from {args.location}: "
          f"altitude {sun.altitude_deg:.2f}°, azimuth {sun.azimuth_deg:.2f}°")


def _run_serve(args: argparse.Namespace) -> None:
    import uvicorn

    from solar_events.api import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(),
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level=settings.log_level.lower(),
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging()

    try:
        if args.command == "serve":
            _run_serve(args)
        elif args.command == "position":
            _run_position(args)
        else:
            on = args.date or datetime.now(timezone.utc).date()
            if args.command == "daylength":
                _run_daylength(args, on)
            elif args.command == "riseset":
                _run_riseset(args, on)
            else:
                _run_twilight(args, on)
    except SolarCalculationError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
