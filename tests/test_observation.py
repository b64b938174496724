"""Tests for the observation context and instantaneous sun position."""

from __future__ import annotations

import pytest

from sunriset.contracts import Location, SunAngle
from sunriset.observation import ObservationContext, observe
from sunriset.time.instant import Instant

_EQUINOX_NOON = 953553600.0  # 2000-03-20T12:00:00Z
_NYC = Location(40.7128, -74.0060, 10.0)


def _context(location: Location, epoch: float, sun_angle: SunAngle = SunAngle.OFFICIAL) -> ObservationContext:
    return ObservationContext(location=location, instant=Instant(epoch, 0), sun_angle=sun_angle)


def test_location_rejects_out_of_range_coordinates() -> None:
    """Latitude and longitude must be within their geographic ranges."""
    with pytest.raises(ValueError, match="latitude"):
        Location(91.0, 0.0)
    with pytest.raises(ValueError, match="longitude"):
        Location(0.0, -180.5)


def test_context_exposes_location_fields() -> None:
    """Context proxies latitude, longitude and elevation from its location."""
    context = _context(_NYC, _EQUINOX_NOON)

    assert context.latitude == 40.7128
    assert context.longitude == -74.0060
    assert context.elevation_m == 10.0
    assert context.sun_angle is SunAngle.OFFICIAL


def test_equatorial_equinox_noon_sun_is_overhead() -> None:
    """At the equator near the equinox the noon sun is close to the zenith."""
    position = observe(_context(Location(0.0, 0.0), _EQUINOX_NOON))

    assert position.true_elevation_deg > 85.0
    assert position.refraction_deg == 0.0
    assert abs(position.hour_angle_deg) < 5.0
    assert position.past_threshold is False


def test_midnight_sun_is_below_horizon() -> None:
    """At local midnight in New York the sun is past the official threshold."""
    position = observe(_context(_NYC, 961563600.0))  # 2000-06-21T05:00:00Z

    assert position.true_elevation_deg < 0.0
    assert position.apparent_zenith_deg > SunAngle.OFFICIAL.zenith_deg
    assert position.past_threshold is True


def test_twilight_thresholds_are_ordered() -> None:
    """A sun a few degrees below the horizon is past official but not astronomical threshold."""
    # About 25 minutes after sunset at the equator on the equinox.
    epoch = _EQUINOX_NOON + 6 * 3600 + 35 * 60
    official = observe(_context(Location(0.0, 0.0), epoch, SunAngle.OFFICIAL))
    astronomical = observe(_context(Location(0.0, 0.0), epoch, SunAngle.ASTRONOMICAL))

    assert official.past_threshold is True
    assert astronomical.past_threshold is False


def test_azimuth_morning_east_afternoon_west() -> None:
    """On the equinox at the equator the sun rises east and sets west."""
    morning = observe(_context(Location(0.0, 0.0), _EQUINOX_NOON - 3 * 3600))
    afternoon = observe(_context(Location(0.0, 0.0), _EQUINOX_NOON + 3 * 3600))

    assert 80.0 < morning.azimuth_deg < 100.0
    assert 260.0 < afternoon.azimuth_deg < 280.0


def test_northern_noon_sun_is_south() -> None:
    """At mid-northern latitudes the noon sun stands due south."""
    position = observe(_context(Location(45.0, 0.0), _EQUINOX_NOON))

    assert 170.0 < position.azimuth_deg < 190.0
    assert 40.0 < position.true_elevation_deg < 50.0


def test_pole_azimuth_fallback() -> None:
    """At the north pole azimuth is undefined and reported as south."""
    position = observe(_context(Location(90.0, 0.0), _EQUINOX_NOON))

    assert position.azimuth_deg == 180.0


def test_apparent_elevation_includes_refraction() -> None:
    """Apparent elevation is true elevation plus refraction."""
    position = observe(_context(_NYC, 961606800.0))  # 2000-06-21T17:00:00Z
    payload = position.to_dict()

    assert position.apparent_elevation_deg == pytest.approx(
        position.true_elevation_deg + position.refraction_deg
    )
    assert position.apparent_zenith_deg == pytest.approx(90.0 - position.apparent_elevation_deg)
    assert payload["sun_angle"] == "official"
    assert 0.0 <= payload["azimuth_deg"] < 360.0
