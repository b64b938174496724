"""Tests for vectorized ephemeris sampling."""

from __future__ import annotations

import numpy as np
import pytest

from sunriset.astro.series import ephemeris_series, sample_epochs, series_to_lists
from sunriset.astro.solar import (
    eccentricity_earth_orbit,
    eq_of_center_terms,
    geom_mean_anomaly_sun,
    geom_mean_long_sun,
    mean_obliquity_of_ecliptic,
    moon_node_longitude,
    solar_snapshot,
)
from sunriset.time.julian import julian_century_from_julian_date, julian_date_from_timestamp


def test_sample_epochs_grid() -> None:
    """Epoch grid starts at start and advances by step."""
    epochs = sample_epochs(946728000.0, 3600.0, 4)

    assert epochs.tolist() == [946728000.0, 946731600.0, 946735200.0, 946738800.0]


@pytest.mark.parametrize(
    ("step", "count", "message"),
    [(0.0, 3, "step_seconds"), (-1.0, 3, "step_seconds"), (60.0, 0, "count"), (60.0, 10**6, "count")],
)
def test_sample_epochs_rejects_bad_grids(step: float, count: int, message: str) -> None:
    """Grid parameters must be positive and bounded."""
    with pytest.raises(ValueError, match=message):
        sample_epochs(0.0, step, count)


def test_series_matches_scalar_pipeline() -> None:
    """Every column agrees with the scalar ephemeris functions."""
    epochs = [-2.0e9, 0.0, 946728000.0, 1.0e9, 1.7e9, 4.0e9]
    series = ephemeris_series(epochs)

    for i, epoch in enumerate(epochs):
        t = julian_century_from_julian_date(julian_date_from_timestamp(epoch))
        expected = solar_snapshot(t).to_dict()
        for name, value in expected.items():
            assert series[name][i] == pytest.approx(value, abs=1e-9), name


def test_polynomial_terms_accept_arrays() -> None:
    """The shared polynomial terms evaluate elementwise over century arrays."""
    centuries = np.array([-2.0, -0.5, 0.0, 0.37, 2.0])

    for term in (
        geom_mean_long_sun,
        geom_mean_anomaly_sun,
        eccentricity_earth_orbit,
        mean_obliquity_of_ecliptic,
        moon_node_longitude,
    ):
        values = term(centuries)
        assert values.shape == centuries.shape
        assert values.tolist() == pytest.approx([term(float(t)) for t in centuries])

    c1, c2, _ = eq_of_center_terms(centuries)
    assert c1[2] == pytest.approx(1.914602)
    assert c2[2] == pytest.approx(0.019993)


def test_series_rejects_two_dimensional_input() -> None:
    """Only flat epoch sequences are accepted."""
    with pytest.raises(ValueError, match="1-D"):
        ephemeris_series(np.zeros((2, 2)))


def test_series_to_lists_is_json_compatible() -> None:
    """Column arrays convert into plain lists of floats."""
    columns = series_to_lists(ephemeris_series(sample_epochs(0.0, 86400.0, 3)))

    assert isinstance(columns["declination_deg"], list)
    assert len(columns["equation_of_time_min"]) == 3
    assert columns["julian_date"][0] == 2440587.5
