"""Vectorized ephemeris sampling over many instants with NumPy."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from sunriset.astro.solar import (
    ABERRATION_DEG,
    NUTATION_LONG_DEG,
    NUTATION_OBLIQUITY_DEG,
    eccentricity_earth_orbit,
    eq_of_center_terms,
    equation_of_time_rad,
    geom_mean_anomaly_sun,
    geom_mean_long_sun,
    mean_obliquity_of_ecliptic,
    moon_node_longitude,
    rad_vector_from,
)
from sunriset.time.julian import DAYS_PER_CENTURY, J2000_JD, SECONDS_PER_DAY, UNIX_EPOCH_JD

MAX_SAMPLES = 100_000


def sample_epochs(start_epoch: float, step_seconds: float, count: int) -> np.ndarray:
    """Return `count` epoch seconds starting at `start_epoch`, `step_seconds` apart."""
    if step_seconds <= 0.0:
        raise ValueError("step_seconds must be positive")
    if count < 1:
        raise ValueError("count must be at least 1")
    if count > MAX_SAMPLES:
        raise ValueError(f"count must not exceed {MAX_SAMPLES}")
    return start_epoch + step_seconds * np.arange(count, dtype=float)


def ephemeris_series(epochs: Sequence[float] | np.ndarray) -> dict[str, np.ndarray]:
    """Evaluate the solar ephemeris for each epoch.

    Returns column arrays keyed like ``SolarSnapshot.to_dict()`` plus
    ``epoch_seconds`` and ``julian_date``.
    """
    epoch = np.asarray(epochs, dtype=float)
    if epoch.ndim != 1:
        raise ValueError("epochs must be a 1-D sequence")

    jd = epoch / SECONDS_PER_DAY + UNIX_EPOCH_JD
    t = (jd - J2000_JD) / DAYS_PER_CENTURY

    l0 = geom_mean_long_sun(t)
    m = geom_mean_anomaly_sun(t)
    e = eccentricity_earth_orbit(t)

    mrad = np.radians(m)
    c1, c2, c3 = eq_of_center_terms(t)
    center = np.sin(mrad) * c1 + np.sin(2.0 * mrad) * c2 + np.sin(3.0 * mrad) * c3
    true_long = l0 + center
    true_anomaly = m + center
    rad_vector = rad_vector_from(e, np.cos(np.radians(true_anomaly)))

    omega = np.radians(moon_node_longitude(t))
    apparent_long = true_long - ABERRATION_DEG - NUTATION_LONG_DEG * np.sin(omega)
    mean_obliquity = mean_obliquity_of_ecliptic(t)
    obliquity = mean_obliquity + NUTATION_OBLIQUITY_DEG * np.cos(omega)

    lam = np.radians(apparent_long)
    eps = np.radians(obliquity)
    right_ascension = np.degrees(np.arctan2(np.cos(eps) * np.sin(lam), np.cos(lam)))
    declination = np.degrees(np.arcsin(np.sin(eps) * np.sin(lam)))

    y = np.tan(eps / 2.0) ** 2
    l0_twice = 2.0 * np.radians(l0)
    eq_of_time = 4.0 * np.degrees(
        equation_of_time_rad(
            y,
            e,
            np.sin(mrad),
            np.sin(2.0 * mrad),
            np.sin(l0_twice),
            np.cos(l0_twice),
            np.sin(2.0 * l0_twice),
        )
    )

    return {
        "epoch_seconds": epoch,
        "julian_date": jd,
        "julian_century": t,
        "geom_mean_long_deg": l0,
        "geom_mean_anomaly_deg": m,
        "eccentricity": e,
        "eq_of_center_deg": center,
        "true_long_deg": true_long,
        "true_anomaly_deg": true_anomaly,
        "rad_vector_au": rad_vector,
        "apparent_long_deg": apparent_long,
        "mean_obliquity_deg": mean_obliquity,
        "obliquity_corr_deg": obliquity,
        "right_ascension_deg": right_ascension,
        "declination_deg": declination,
        "equation_of_time_min": eq_of_time,
    }


def series_to_lists(series: dict[str, np.ndarray]) -> dict[str, list[float]]:
    """Convert column arrays into JSON-compatible lists."""
    return {name: values.tolist() for name, values in series.items()}
