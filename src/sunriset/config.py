"""Environment-driven runtime configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from sunriset.contracts import SunAngle

DEFAULT_FIXED_EPOCH = 946728000.0  # 2000-01-01T12:00:00 UTC


@dataclass(frozen=True)
class RuntimeConfig:
    """Runtime settings for the clock, default threshold and logging."""

    clock_mode: str = "system"
    fixed_epoch: float = DEFAULT_FIXED_EPOCH
    tz_offset_seconds: int | None = None
    sun_angle: SunAngle = SunAngle.OFFICIAL
    log_level: int = logging.WARNING


def resolve_clock_mode(mode: str | None) -> str:
    """Resolve clock mode from argument or environment."""
    raw = mode or os.getenv("SUNRISET_CLOCK", "system")
    resolved = raw.strip().lower()
    if resolved not in {"system", "fixed"}:
        raise ValueError("SUNRISET_CLOCK must be one of: system, fixed")
    return resolved


def resolve_fixed_epoch(value: float | None) -> float:
    """Resolve the fixed-clock epoch from argument or environment."""
    if value is not None:
        return float(value)
    raw = os.getenv("SUNRISET_FIXED_EPOCH")
    if raw is None or not raw.strip():
        return DEFAULT_FIXED_EPOCH
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"SUNRISET_FIXED_EPOCH must be a number, got {raw!r}") from exc


def _tz_offset_from_env() -> int | None:
    raw = os.getenv("SUNRISET_TZ_OFFSET")
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"SUNRISET_TZ_OFFSET must be an integer, got {raw!r}") from exc


def _log_level_from_env() -> int:
    raw = os.getenv("SUNRISET_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(f"SUNRISET_LOG_LEVEL is not a logging level: {raw!r}")
    return level


def config_from_env() -> RuntimeConfig:
    """Build a RuntimeConfig from SUNRISET_* environment variables."""
    return RuntimeConfig(
        clock_mode=resolve_clock_mode(None),
        fixed_epoch=resolve_fixed_epoch(None),
        tz_offset_seconds=_tz_offset_from_env(),
        sun_angle=SunAngle.parse(os.getenv("SUNRISET_SUN_ANGLE", "official")),
        log_level=_log_level_from_env(),
    )
