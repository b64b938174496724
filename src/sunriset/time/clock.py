"""Civil clock capability and its system/fixed implementations."""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Protocol

from sunriset.config import resolve_clock_mode, resolve_fixed_epoch
from sunriset.contracts import CivilBreakdown
from sunriset.time.civil import (
    CalendarConversionError,
    ClockReadError,
    breakdown_from_datetime,
    local_offset_seconds,
    utc_breakdown,
)

logger = logging.getLogger(__name__)


class CivilClock(Protocol):
    """Interface for reading the current instant and breaking instants into calendar fields."""

    def read_now(self) -> float:
        """Return the current Unix epoch seconds."""

    def civil_breakdown(self, epoch_seconds: float, use_local_offset: bool) -> CivilBreakdown:
        """Return UTC (or local, when requested) calendar fields for an instant."""


class SystemCivilClock(CivilClock):
    """Clock backed by the operating system real-time clock and local timezone."""

    def read_now(self) -> float:
        """Read the OS real-time clock once."""
        try:
            now = time.time()
        except OSError as exc:
            raise ClockReadError("real-time clock is unavailable") from exc
        logger.debug("read system clock: %.6f", now)
        return now

    def civil_breakdown(self, epoch_seconds: float, use_local_offset: bool) -> CivilBreakdown:
        """Break an instant down with the OS calendar (local) or in pure UTC."""
        if not use_local_offset:
            return utc_breakdown(epoch_seconds)
        try:
            local_dt = datetime.fromtimestamp(round(epoch_seconds))
        except (OverflowError, OSError, ValueError) as exc:
            raise CalendarConversionError(
                f"cannot convert epoch {epoch_seconds!r} to local time"
            ) from exc
        return breakdown_from_datetime(local_dt)


class FixedCivilClock(CivilClock):
    """Deterministic clock frozen at one instant with a fixed local offset."""

    def __init__(self, epoch_seconds: float, offset_seconds: int = 0) -> None:
        """Initialize the clock with its frozen instant and local offset."""
        self.epoch_seconds = float(epoch_seconds)
        self.offset_seconds = int(offset_seconds)

    def read_now(self) -> float:
        """Return the frozen instant."""
        return self.epoch_seconds

    def civil_breakdown(self, epoch_seconds: float, use_local_offset: bool) -> CivilBreakdown:
        """Break an instant down in UTC, shifted by the fixed offset when local."""
        offset = self.offset_seconds if use_local_offset else 0
        return utc_breakdown(epoch_seconds, offset)


def create_clock(
    mode: str | None = None,
    fixed_epoch: float | None = None,
    fixed_offset_seconds: int = 0,
) -> CivilClock:
    """Create a civil clock for the selected mode."""
    resolved = resolve_clock_mode(mode)
    if resolved == "fixed":
        epoch = resolve_fixed_epoch(fixed_epoch)
        logger.debug("using fixed clock at epoch %.3f", epoch)
        return FixedCivilClock(epoch, fixed_offset_seconds)
    return SystemCivilClock()


def detect_local_offset(clock: CivilClock, at: float | None = None) -> int:
    """Return the clock's local UTC offset in seconds east.

    The offset is taken at epoch `at`; the clock is read only when `at` is
    None.
    """
    epoch = clock.read_now() if at is None else at
    utc = clock.civil_breakdown(epoch, use_local_offset=False)
    local = clock.civil_breakdown(epoch, use_local_offset=True)
    offset = local_offset_seconds(utc, local)
    logger.debug("detected local offset %d s at epoch %.3f", offset, epoch)
    return offset
