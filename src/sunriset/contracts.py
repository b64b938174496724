"""Core value types shared across the sunriset package."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True, slots=True)
class CivilBreakdown:
    """Calendar fields for one instant, either UTC or shifted by an offset."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    def to_dict(self) -> dict[str, int]:
        """Serialize the breakdown to a JSON-compatible dictionary."""
        return asdict(self)


class SunAngle(Enum):
    """Sun zenith-angle thresholds, in degrees, for rise/set and twilight phases."""

    OFFICIAL = 90.833
    CIVIL = 96.0
    NAUTICAL = 102.0
    ASTRONOMICAL = 108.0

    @property
    def zenith_deg(self) -> float:
        """Zenith angle of the threshold."""
        return float(self.value)

    @property
    def depression_deg(self) -> float:
        """Degrees below the geometric horizon."""
        return float(self.value) - 90.0

    @classmethod
    def parse(cls, name: str) -> SunAngle:
        """Look up a threshold by case-insensitive name."""
        key = name.strip().upper()
        try:
            return cls[key]
        except KeyError as exc:
            choices = ", ".join(member.name.lower() for member in cls)
            raise ValueError(f"sun angle must be one of: {choices}") from exc


@dataclass(frozen=True, slots=True)
class JulianRepresentation:
    """Julian date, century and day number derived from one instant."""

    julian_date: float
    julian_century: float
    julian_day_number: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Location:
    """Observer location on the WGS84 ellipsoid."""

    latitude: float
    longitude: float
    elevation_m: float = 0.0

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError("latitude must be within [-90, 90] degrees.")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError("longitude must be within [-180, 180] degrees.")


@dataclass(frozen=True, slots=True)
class SolarSnapshot:
    """Every solar ephemeris quantity for a single Julian century."""

    julian_century: float
    geom_mean_long_deg: float
    geom_mean_anomaly_deg: float
    eccentricity: float
    eq_of_center_deg: float
    true_long_deg: float
    true_anomaly_deg: float
    rad_vector_au: float
    apparent_long_deg: float
    mean_obliquity_deg: float
    obliquity_corr_deg: float
    right_ascension_deg: float
    declination_deg: float
    equation_of_time_min: float

    def to_dict(self) -> dict[str, float]:
        """Serialize to a JSON-compatible dictionary."""
        return asdict(self)


@dataclass(frozen=True, slots=True)
class SolarPosition:
    """Instantaneous sun position seen by an observer."""

    hour_angle_deg: float
    true_elevation_deg: float
    refraction_deg: float
    apparent_elevation_deg: float
    apparent_zenith_deg: float
    azimuth_deg: float
    sun_angle: SunAngle
    past_threshold: bool

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "hour_angle_deg": self.hour_angle_deg,
            "true_elevation_deg": self.true_elevation_deg,
            "refraction_deg": self.refraction_deg,
            "apparent_elevation_deg": self.apparent_elevation_deg,
            "apparent_zenith_deg": self.apparent_zenith_deg,
            "azimuth_deg": self.azimuth_deg,
            "sun_angle": self.sun_angle.name.lower(),
            "sun_angle_zenith_deg": self.sun_angle.zenith_deg,
            "past_threshold": self.past_threshold,
        }
