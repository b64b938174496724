"""Low-precision solar ephemeris.

NOAA solar calculator formulas (after Meeus, "Astronomical Algorithms").
Every function takes `t`, Julian centuries since J2000.0, and is valid
roughly for the civil era. Angles are in degrees unless noted.

The polynomial terms and the combining formulas below use only arithmetic,
so they accept NumPy arrays as well as floats; `sunriset.astro.series`
evaluates them over whole epoch grids.
"""

from __future__ import annotations

from math import asin, atan2, cos, degrees, radians, sin, tan

from sunriset.contracts import SolarSnapshot

ABERRATION_DEG = 0.00569
NUTATION_LONG_DEG = 0.00478
NUTATION_OBLIQUITY_DEG = 0.00256
SEMI_MAJOR_AXIS_AU = 1.000001018


def moon_node_longitude(t: float) -> float:
    """Longitude of the Moon's ascending node (unnormalized)."""
    return 125.04 - 1934.136 * t


def eq_of_center_terms(t: float) -> tuple[float, float, float]:
    """Coefficients of sin(M), sin(2M) and sin(3M) in the equation of center."""
    return (
        1.914602 - t * (0.004817 + 0.000014 * t),
        0.019993 - 0.000101 * t,
        0.000289,
    )


def rad_vector_from(e: float, cos_true_anomaly: float) -> float:
    return (SEMI_MAJOR_AXIS_AU * (1.0 - e * e)) / (1.0 + e * cos_true_anomaly)


def equation_of_time_rad(
    y: float,
    e: float,
    sin_m: float,
    sin_2m: float,
    sin_2l0: float,
    cos_2l0: float,
    sin_4l0: float,
) -> float:
    """Equation of time in radians from the obliquity term `y` and trig terms."""
    return (
        y * sin_2l0
        - 2.0 * e * sin_m
        + 4.0 * e * y * sin_m * cos_2l0
        - 0.5 * y * y * sin_4l0
        - 1.25 * e * e * sin_2m
    )


def geom_mean_long_sun(t: float) -> float:
    """Geometric mean longitude of the Sun, normalized to [0, 360)."""
    return (280.46646 + t * (36000.76983 + t * 0.0003032)) % 360.0


def geom_mean_anomaly_sun(t: float) -> float:
    """Geometric mean anomaly of the Sun."""
    return 357.52911 + t * (35999.05029 - 0.0001537 * t)


def eccentricity_earth_orbit(t: float) -> float:
    """Eccentricity of Earth's orbit (unitless)."""
    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def sun_eq_of_center(t: float) -> float:
    """Equation of center of the Sun."""
    mrad = radians(geom_mean_anomaly_sun(t))
    c1, c2, c3 = eq_of_center_terms(t)
    return sin(mrad) * c1 + sin(2.0 * mrad) * c2 + sin(3.0 * mrad) * c3


def sun_true_long(t: float) -> float:
    return geom_mean_long_sun(t) + sun_eq_of_center(t)


def sun_true_anomaly(t: float) -> float:
    return geom_mean_anomaly_sun(t) + sun_eq_of_center(t)


def sun_rad_vector(t: float) -> float:
    """Sun-Earth distance in astronomical units."""
    return rad_vector_from(eccentricity_earth_orbit(t), cos(radians(sun_true_anomaly(t))))


def sun_apparent_long(t: float) -> float:
    """Apparent longitude, corrected for nutation and aberration."""
    omega = radians(moon_node_longitude(t))
    return sun_true_long(t) - ABERRATION_DEG - NUTATION_LONG_DEG * sin(omega)


def mean_obliquity_of_ecliptic(t: float) -> float:
    seconds = 21.448 - t * (46.815 + t * (0.00059 - t * 0.001813))
    return 23.0 + (26.0 + seconds / 60.0) / 60.0


def obliquity_correction(t: float) -> float:
    omega = radians(moon_node_longitude(t))
    return mean_obliquity_of_ecliptic(t) + NUTATION_OBLIQUITY_DEG * cos(omega)


def sun_right_ascension(t: float) -> float:
    """Right ascension in degrees, (-180, 180]; atan2 keeps the quadrant."""
    lam = radians(sun_apparent_long(t))
    eps = radians(obliquity_correction(t))
    return degrees(atan2(cos(eps) * sin(lam), cos(lam)))


def sun_declination(t: float) -> float:
    lam = radians(sun_apparent_long(t))
    eps = radians(obliquity_correction(t))
    return degrees(asin(sin(eps) * sin(lam)))


def equation_of_time(t: float) -> float:
    """Apparent minus mean solar time, in minutes of time."""
    l0 = 2.0 * radians(geom_mean_long_sun(t))
    m = radians(geom_mean_anomaly_sun(t))
    y = tan(radians(obliquity_correction(t)) / 2.0) ** 2
    return 4.0 * degrees(
        equation_of_time_rad(
            y,
            eccentricity_earth_orbit(t),
            sin(m),
            sin(2.0 * m),
            sin(l0),
            cos(l0),
            sin(2.0 * l0),
        )
    )


def solar_snapshot(t: float) -> SolarSnapshot:
    """Evaluate the full ephemeris pipeline for one Julian century."""
    return SolarSnapshot(
        julian_century=t,
        geom_mean_long_deg=geom_mean_long_sun(t),
        geom_mean_anomaly_deg=geom_mean_anomaly_sun(t),
        eccentricity=eccentricity_earth_orbit(t),
        eq_of_center_deg=sun_eq_of_center(t),
        true_long_deg=sun_true_long(t),
        true_anomaly_deg=sun_true_anomaly(t),
        rad_vector_au=sun_rad_vector(t),
        apparent_long_deg=sun_apparent_long(t),
        mean_obliquity_deg=mean_obliquity_of_ecliptic(t),
        obliquity_corr_deg=obliquity_correction(t),
        right_ascension_deg=sun_right_ascension(t),
        declination_deg=sun_declination(t),
        equation_of_time_min=equation_of_time(t),
    )
