"""Command-line entrypoint for sunriset."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from sunriset.astro.series import ephemeris_series, sample_epochs, series_to_lists
from sunriset.astro.solar import solar_snapshot
from sunriset.config import config_from_env
from sunriset.contracts import Location, SunAngle
from sunriset.observation import ObservationContext, observe
from sunriset.time.civil import CivilClockError
from sunriset.time.clock import create_clock, detect_local_offset
from sunriset.time.instant import Instant

logger = logging.getLogger(__name__)


def _sun_angle(value: str) -> SunAngle:
    """Parse a sun-angle name for argparse."""
    try:
        return SunAngle.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _add_instant_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--epoch", type=float, default=None, help="Unix epoch seconds (default: now).")
    parser.add_argument(
        "--tz-offset",
        type=int,
        default=None,
        help="Timezone offset in seconds east of UTC (default: detected from the clock).",
    )


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sunriset",
        description="Solar ephemeris and Julian date command-line interface.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument("--clock", choices=["system", "fixed"], default=None)

    subparsers = parser.add_subparsers(dest="command")

    julian = subparsers.add_parser("julian", help="Print Julian date, century and day number.")
    _add_instant_arguments(julian)

    ephemeris = subparsers.add_parser("ephemeris", help="Print the solar ephemeris for an instant.")
    _add_instant_arguments(ephemeris)

    position = subparsers.add_parser("position", help="Print the sun position for a location.")
    _add_instant_arguments(position)
    position.add_argument("--lat", type=float, required=True)
    position.add_argument("--lon", type=float, required=True)
    position.add_argument("--elevation-m", type=float, default=0.0)
    position.add_argument("--sun-angle", type=_sun_angle, default=None)

    series = subparsers.add_parser("series", help="Print ephemeris columns on a regular grid.")
    series.add_argument("--start", type=float, required=True)
    series.add_argument("--step", type=float, required=True)
    series.add_argument("--count", type=int, required=True)

    return parser


def _print_json(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, sort_keys=True))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = config_from_env()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        return 0

    if args.command == "series":
        try:
            epochs = sample_epochs(args.start, args.step, args.count)
        except ValueError as exc:
            parser.error(str(exc))
        _print_json(series_to_lists(ephemeris_series(epochs)))
        return 0

    clock = create_clock(args.clock or config.clock_mode, config.fixed_epoch)
    tz_offset = args.tz_offset if args.tz_offset is not None else config.tz_offset_seconds
    try:
        if args.epoch is None:
            instant = Instant.now(clock, tz_offset)
        elif tz_offset is None:
            instant = Instant(args.epoch, detect_local_offset(clock, at=args.epoch))
        else:
            instant = Instant(args.epoch, tz_offset)
    except CivilClockError as exc:
        logger.debug("clock failure", exc_info=True)
        print(f"sunriset: error: {exc}", file=sys.stderr)
        return 1

    if args.command == "julian":
        _print_json(instant.to_dict())
    elif args.command == "ephemeris":
        _print_json({"instant": instant.to_dict(), "solar": solar_snapshot(instant.julian_century).to_dict()})
    elif args.command == "position":
        try:
            location = Location(args.lat, args.lon, args.elevation_m)
        except ValueError as exc:
            parser.error(str(exc))
        context = ObservationContext(
            location=location,
            instant=instant,
            sun_angle=args.sun_angle or config.sun_angle,
        )
        _print_json({"instant": instant.to_dict(), "position": observe(context).to_dict()})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
