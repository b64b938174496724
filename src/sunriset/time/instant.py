"""Immutable instant carrying its own Julian and calendar representations."""

from __future__ import annotations

from dataclasses import dataclass, field

from sunriset.contracts import CivilBreakdown, JulianRepresentation
from sunriset.time.civil import utc_breakdown
from sunriset.time.clock import CivilClock, detect_local_offset
from sunriset.time.julian import julian_representation


@dataclass(frozen=True, slots=True)
class Instant:
    """Unix epoch seconds plus a timezone offset in seconds east of UTC.

    Derived quantities are computed once in ``__post_init__`` and owned by
    this instance only.
    """

    epoch_seconds: float
    tz_offset_seconds: int = 0
    utc: CivilBreakdown = field(init=False, repr=False, compare=False)
    local: CivilBreakdown = field(init=False, repr=False, compare=False)
    julian: JulianRepresentation = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compute calendar breakdowns and the Julian representation."""
        utc = utc_breakdown(self.epoch_seconds)
        object.__setattr__(self, "utc", utc)
        object.__setattr__(self, "local", utc_breakdown(self.epoch_seconds, self.tz_offset_seconds))
        object.__setattr__(self, "julian", julian_representation(self.epoch_seconds, utc))

    @property
    def julian_date(self) -> float:
        return self.julian.julian_date

    @property
    def julian_century(self) -> float:
        return self.julian.julian_century

    @property
    def julian_day_number(self) -> int:
        return self.julian.julian_day_number

    @classmethod
    def now(cls, clock: CivilClock, tz_offset_seconds: int | None = None) -> Instant:
        """Read the clock once; detect the local offset when none is given."""
        epoch = clock.read_now()
        if tz_offset_seconds is None:
            tz_offset_seconds = detect_local_offset(clock, at=epoch)
        return cls(epoch, tz_offset_seconds)

    def to_dict(self) -> dict[str, object]:
        """Serialize the instant and its derived fields."""
        return {
            "epoch_seconds": self.epoch_seconds,
            "tz_offset_seconds": self.tz_offset_seconds,
            **self.julian.to_dict(),
            "utc": self.utc.to_dict(),
            "local": self.local.to_dict(),
        }
