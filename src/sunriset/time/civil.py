"""Civil calendar breakdowns and the errors raised at the clock boundary."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

from sunriset.contracts import CivilBreakdown

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class CivilClockError(RuntimeError):
    """Base class for failures of the civil clock boundary."""


class ClockReadError(CivilClockError):
    """The real-time clock could not be read."""


class CalendarConversionError(CivilClockError):
    """An epoch value could not be broken down into calendar fields."""


def breakdown_from_datetime(dt: datetime) -> CivilBreakdown:
    """Copy calendar fields out of a datetime."""
    return CivilBreakdown(
        year=dt.year,
        month=dt.month,
        day=dt.day,
        hour=dt.hour,
        minute=dt.minute,
        second=dt.second,
    )


def utc_breakdown(epoch_seconds: float, offset_seconds: int = 0) -> CivilBreakdown:
    """Break `round(epoch_seconds) + offset_seconds` into UTC calendar fields.

    Passing a timezone offset yields the local wall-clock fields for that
    offset without consulting the operating system.
    """
    try:
        whole = round(epoch_seconds) + offset_seconds
        dt = _UNIX_EPOCH + timedelta(seconds=whole)
    except (OverflowError, ValueError) as exc:
        raise CalendarConversionError(
            f"cannot convert epoch {epoch_seconds!r} (offset {offset_seconds}) to a calendar date"
        ) from exc
    return breakdown_from_datetime(dt)


def local_offset_seconds(utc: CivilBreakdown, local: CivilBreakdown) -> int:
    """Derive the UTC offset in seconds east from two breakdowns of the same instant."""
    day_delta = (
        date(local.year, local.month, local.day) - date(utc.year, utc.month, utc.day)
    ).days
    return (
        day_delta * 86400
        + (local.hour - utc.hour) * 3600
        + (local.minute - utc.minute) * 60
    )
