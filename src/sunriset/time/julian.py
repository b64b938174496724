"""Conversions between Unix epoch seconds and Julian date representations.

All functions are pure and accept any float. Non-finite inputs propagate to
non-finite outputs; nothing here validates its arguments.
"""

from __future__ import annotations

from math import floor

from sunriset.contracts import CivilBreakdown, JulianRepresentation

SECONDS_PER_DAY = 86400.0
DAYS_PER_CENTURY = 36525.0
UNIX_EPOCH_JD = 2440587.5  # 1970-01-01T00:00:00 UTC
J2000_JD = 2451545.0  # 2000-01-01T12:00:00 UTC


def julian_date_from_timestamp(epoch_seconds: float) -> float:
    """Return the Julian date for Unix epoch seconds."""
    return epoch_seconds / SECONDS_PER_DAY + UNIX_EPOCH_JD


def timestamp_from_julian_date(julian_date: float) -> float:
    """Return Unix epoch seconds for a Julian date."""
    return (julian_date - UNIX_EPOCH_JD) * SECONDS_PER_DAY


def julian_century_from_julian_date(julian_date: float) -> float:
    """Return Julian centuries elapsed since J2000.0."""
    return (julian_date - J2000_JD) / DAYS_PER_CENTURY


def julian_date_from_julian_century(t: float) -> float:
    """Return the Julian date for Julian centuries since J2000.0."""
    return t * DAYS_PER_CENTURY + J2000_JD


def julian_day_number(
    epoch_seconds: float, utc_hour: int, utc_minute: int, utc_second: int
) -> int:
    """Return the integer Julian day number of the UTC calendar date holding an instant.

    The intraday part implied by the UTC clock time is removed from the Julian
    date and the result is shifted to the noon that labels the civil day.
    """
    julian_date = julian_date_from_timestamp(epoch_seconds)
    day_start = (
        julian_date
        + (12.0 - utc_hour) / 24.0
        - utc_minute / 1440.0
        - utc_second / SECONDS_PER_DAY
    )
    return floor(day_start + 0.5)


def julian_representation(epoch_seconds: float, utc: CivilBreakdown) -> JulianRepresentation:
    """Build the Julian representation of an instant from its UTC breakdown."""
    julian_date = julian_date_from_timestamp(epoch_seconds)
    return JulianRepresentation(
        julian_date=julian_date,
        julian_century=julian_century_from_julian_date(julian_date),
        julian_day_number=julian_day_number(epoch_seconds, utc.hour, utc.minute, utc.second),
    )


def is_leap_year(year: int) -> bool:
    """Return whether `year` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
