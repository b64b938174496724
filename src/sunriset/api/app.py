"""FastAPI app exposing Julian conversion, ephemeris and sun position endpoints."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from sunriset.astro.series import ephemeris_series, sample_epochs, series_to_lists
from sunriset.astro.solar import solar_snapshot
from sunriset.config import RuntimeConfig, config_from_env
from sunriset.contracts import Location, SunAngle
from sunriset.observation import ObservationContext, observe
from sunriset.time.civil import CalendarConversionError, ClockReadError
from sunriset.time.clock import CivilClock, create_clock, detect_local_offset
from sunriset.time.instant import Instant

logger = logging.getLogger(__name__)

_MAX_SERIES_COUNT = 10_000
_MAX_TZ_OFFSET_SECONDS = 14 * 3600

SunAngleName = Literal["official", "civil", "nautical", "astronomical"]


class InstantRequest(BaseModel):
    """Request schema for one instant; a missing epoch means now."""

    epoch_seconds: float | None = Field(default=None, allow_inf_nan=False)
    tz_offset_seconds: int | None = Field(
        default=None, ge=-_MAX_TZ_OFFSET_SECONDS, le=_MAX_TZ_OFFSET_SECONDS
    )


class PositionRequest(InstantRequest):
    """Request schema for an instantaneous sun position."""

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    elevation_m: float = 0.0
    sun_angle: SunAngleName | None = None


class SeriesRequest(BaseModel):
    """Request schema for a regularly sampled ephemeris series."""

    start_epoch: float = Field(allow_inf_nan=False)
    step_seconds: float = Field(gt=0.0, allow_inf_nan=False)
    count: int = Field(ge=1, le=_MAX_SERIES_COUNT)


class CivilBreakdownResponse(BaseModel):
    """Calendar fields of an instant."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int


class InstantResponse(BaseModel):
    """Response schema aligned with the Instant value type."""

    epoch_seconds: float
    tz_offset_seconds: int
    julian_date: float
    julian_century: float
    julian_day_number: int
    utc: CivilBreakdownResponse
    local: CivilBreakdownResponse


class SolarSnapshotResponse(BaseModel):
    """Response schema aligned with the SolarSnapshot contract."""

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


class EphemerisResponse(BaseModel):
    """Instant plus the solar ephemeris evaluated at it."""

    instant: InstantResponse
    solar: SolarSnapshotResponse


class PositionResponse(BaseModel):
    """Instant plus the sun position seen from the requested location."""

    instant: InstantResponse
    hour_angle_deg: float
    true_elevation_deg: float
    refraction_deg: float
    apparent_elevation_deg: float
    apparent_zenith_deg: float
    azimuth_deg: float
    sun_angle: SunAngleName
    sun_angle_zenith_deg: float
    past_threshold: bool


class SeriesResponse(BaseModel):
    """Column-oriented ephemeris samples."""

    count: int
    columns: dict[str, list[float]]


def _resolve_instant(
    clock: CivilClock,
    config: RuntimeConfig,
    epoch_seconds: float | None,
    tz_offset_seconds: int | None,
) -> Instant:
    """Build an Instant from request fields, reading the clock when needed."""
    try:
        epoch = clock.read_now() if epoch_seconds is None else epoch_seconds
        offset = tz_offset_seconds if tz_offset_seconds is not None else config.tz_offset_seconds
        if offset is None:
            offset = detect_local_offset(clock, at=epoch)
        return Instant(epoch, offset)
    except ClockReadError as exc:
        logger.warning("clock read failed: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except CalendarConversionError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def create_app(clock_mode: str | None = None) -> FastAPI:
    """Create and configure the FastAPI app."""
    app = FastAPI(title="Sunriset API", version="0.1.0")

    config = config_from_env()
    clock = create_clock(clock_mode or config.clock_mode, config.fixed_epoch)

    app.state.config = config
    app.state.clock = clock

    @app.get("/sun-angles")
    def get_sun_angles() -> dict[str, float]:
        """List the supported sun-angle thresholds as zenith degrees."""
        return {angle.name.lower(): angle.zenith_deg for angle in SunAngle}

    @app.post("/julian", response_model=InstantResponse)
    def post_julian(payload: InstantRequest) -> InstantResponse:
        """Convert an instant into its Julian and calendar representations."""
        instant = _resolve_instant(clock, config, payload.epoch_seconds, payload.tz_offset_seconds)
        return InstantResponse(**instant.to_dict())

    @app.post("/ephemeris", response_model=EphemerisResponse)
    def post_ephemeris(payload: InstantRequest) -> EphemerisResponse:
        """Evaluate the solar ephemeris at an instant."""
        instant = _resolve_instant(clock, config, payload.epoch_seconds, payload.tz_offset_seconds)
        snapshot = solar_snapshot(instant.julian_century)
        return EphemerisResponse(
            instant=InstantResponse(**instant.to_dict()),
            solar=SolarSnapshotResponse(**snapshot.to_dict()),
        )

    @app.post("/position", response_model=PositionResponse)
    def post_position(payload: PositionRequest) -> PositionResponse:
        """Compute the sun position for a location and instant."""
        instant = _resolve_instant(clock, config, payload.epoch_seconds, payload.tz_offset_seconds)
        sun_angle = SunAngle.parse(payload.sun_angle) if payload.sun_angle else config.sun_angle
        context = ObservationContext(
            location=Location(payload.lat, payload.lon, payload.elevation_m),
            instant=instant,
            sun_angle=sun_angle,
        )
        position = observe(context)
        return PositionResponse(instant=InstantResponse(**instant.to_dict()), **position.to_dict())

    @app.post("/ephemeris/series", response_model=SeriesResponse)
    def post_series(payload: SeriesRequest) -> SeriesResponse:
        """Sample the solar ephemeris on a regular epoch grid."""
        epochs = sample_epochs(payload.start_epoch, payload.step_seconds, payload.count)
        columns = series_to_lists(ephemeris_series(epochs))
        return SeriesResponse(count=payload.count, columns=columns)

    return app


app = create_app()
