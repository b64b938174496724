"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging

import pytest

from sunriset.config import DEFAULT_FIXED_EPOCH, config_from_env
from sunriset.contracts import SunAngle

_VARS = (
    "SUNRISET_CLOCK",
    "SUNRISET_FIXED_EPOCH",
    "SUNRISET_TZ_OFFSET",
    "SUNRISET_SUN_ANGLE",
    "SUNRISET_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    """Without environment overrides the system clock and official angle are used."""
    cfg = config_from_env()

    assert cfg.clock_mode == "system"
    assert cfg.fixed_epoch == DEFAULT_FIXED_EPOCH
    assert cfg.tz_offset_seconds is None
    assert cfg.sun_angle is SunAngle.OFFICIAL
    assert cfg.log_level == logging.WARNING


def test_overrides(monkeypatch) -> None:
    """Every setting can be overridden from the environment."""
    monkeypatch.setenv("SUNRISET_CLOCK", "fixed")
    monkeypatch.setenv("SUNRISET_FIXED_EPOCH", "1700000000.5")
    monkeypatch.setenv("SUNRISET_TZ_OFFSET", "-18000")
    monkeypatch.setenv("SUNRISET_SUN_ANGLE", "civil")
    monkeypatch.setenv("SUNRISET_LOG_LEVEL", "debug")

    cfg = config_from_env()

    assert cfg.clock_mode == "fixed"
    assert cfg.fixed_epoch == 1700000000.5
    assert cfg.tz_offset_seconds == -18000
    assert cfg.sun_angle is SunAngle.CIVIL
    assert cfg.log_level == logging.DEBUG


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("SUNRISET_CLOCK", "atomic"),
        ("SUNRISET_FIXED_EPOCH", "yesterday"),
        ("SUNRISET_TZ_OFFSET", "+5:30"),
        ("SUNRISET_SUN_ANGLE", "dusk"),
        ("SUNRISET_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_raise(monkeypatch, name: str, value: str) -> None:
    """Malformed settings fail fast with ValueError."""
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        config_from_env()
