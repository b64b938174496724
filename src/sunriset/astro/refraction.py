"""Atmospheric refraction correction for solar elevation."""

from __future__ import annotations

from math import radians, tan


def calc_refraction(elevation_deg: float) -> float:
    """Return the refraction correction, in degrees, for a true elevation.

    Piecewise model used by the NOAA solar calculator. Above 85 degrees the
    correction is taken as zero.
    """
    if elevation_deg > 85.0:
        return 0.0
    te = tan(radians(elevation_deg))
    if elevation_deg > 5.0:
        arcsec = 58.1 / te - 0.07 / te**3 + 0.000086 / te**5
    elif elevation_deg > -0.575:
        arcsec = 1735.0 + elevation_deg * (
            -518.2 + elevation_deg * (103.4 + elevation_deg * (-12.79 + elevation_deg * 0.711))
        )
    else:
        arcsec = -20.774 / te
    return arcsec / 3600.0


def apparent_elevation(true_elevation_deg: float) -> float:
    """True elevation raised by atmospheric refraction."""
    return true_elevation_deg + calc_refraction(true_elevation_deg)
