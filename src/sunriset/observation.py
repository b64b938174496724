"""Observation context and the instantaneous sun position it implies."""

from __future__ import annotations

from dataclasses import dataclass
from math import acos, cos, degrees, radians, sin

from sunriset.astro.refraction import calc_refraction
from sunriset.astro.solar import equation_of_time, sun_declination
from sunriset.contracts import Location, SolarPosition, SunAngle
from sunriset.time.instant import Instant
from sunriset.time.julian import SECONDS_PER_DAY


def _clamp(value: float, lower: float, upper: float) -> float:
    """Clamp a numeric value to [lower, upper]."""
    return max(lower, min(upper, value))


@dataclass(frozen=True, slots=True)
class ObservationContext:
    """Where, when and against which sun-angle threshold the sun is observed."""

    location: Location
    instant: Instant
    sun_angle: SunAngle = SunAngle.OFFICIAL

    @property
    def latitude(self) -> float:
        return self.location.latitude

    @property
    def longitude(self) -> float:
        return self.location.longitude

    @property
    def elevation_m(self) -> float:
        return self.location.elevation_m


def observe(context: ObservationContext) -> SolarPosition:
    """Compute the sun's hour angle, elevation and azimuth for the context.

    Uses the NOAA hour-angle method: true solar time from UTC minutes of the
    day, the equation of time and the observer longitude.
    """
    t = context.instant.julian_century
    eot_min = equation_of_time(t)
    decl_rad = radians(sun_declination(t))
    lat_rad = radians(context.latitude)

    utc_minutes = (context.instant.epoch_seconds % SECONDS_PER_DAY) / 60.0
    true_solar_time = (utc_minutes + eot_min + 4.0 * context.longitude) % 1440.0
    hour_angle_deg = true_solar_time / 4.0 - 180.0
    ha_rad = radians(hour_angle_deg)

    cos_zenith = sin(lat_rad) * sin(decl_rad) + cos(lat_rad) * cos(decl_rad) * cos(ha_rad)
    zenith_rad = acos(_clamp(cos_zenith, -1.0, 1.0))
    true_elevation = 90.0 - degrees(zenith_rad)

    az_denom = cos(lat_rad) * sin(zenith_rad)
    if abs(az_denom) > 0.001:
        cos_az = (sin(lat_rad) * cos(zenith_rad) - sin(decl_rad)) / az_denom
        azimuth = 180.0 - degrees(acos(_clamp(cos_az, -1.0, 1.0)))
        if hour_angle_deg > 0.0:
            azimuth = -azimuth
    else:
        # Sun at the zenith or observer at a pole.
        azimuth = 180.0 if context.latitude > 0.0 else 0.0
    azimuth %= 360.0

    refraction = calc_refraction(true_elevation)
    apparent = true_elevation + refraction
    apparent_zenith = 90.0 - apparent

    return SolarPosition(
        hour_angle_deg=hour_angle_deg,
        true_elevation_deg=true_elevation,
        refraction_deg=refraction,
        apparent_elevation_deg=apparent,
        apparent_zenith_deg=apparent_zenith,
        azimuth_deg=azimuth,
        sun_angle=context.sun_angle,
        past_threshold=apparent_zenith >= context.sun_angle.zenith_deg,
    )
