"""
API routes.

Endpoints:
- POST `/api/point-along-line`: closest point, clipped sub-path and lengths.
- POST `/api/line-length`: total length of a line.
- GET  `/api/settings`: public settings (defaults used when a request omits them).
- GET  `/api/health`: liveness probe.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from alongline.config.overrides import apply_settings_overrides
from alongline.config.settings import get_settings
from alongline.domain.models import (
    AlongLineRequest,
    AlongLineResult,
    LineLengthRequest,
    coerce_line,
    line_coordinates,
)
from alongline.geometry.length import line_length
from alongline.measure import measure_along_line

router = APIRouter()


def _validation_error(e: Exception) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"code": "VALIDATION_ERROR", "message": str(e)},
    )


def _internal_error(e: Exception) -> HTTPException:
    return HTTPException(
        status_code=500,
        detail={"code": "INTERNAL_ERROR", "message": str(e)},
    )


@router.get("/api/health")
def get_health() -> dict:
    return {"status": "ok"}


@router.post("/api/point-along-line", response_model=AlongLineResult)
def post_point_along_line(request: AlongLineRequest) -> AlongLineResult:
    """Project the request point onto the request line and return the full measurement."""
    try:
        settings = apply_settings_overrides(get_settings(), request.settings_overrides)
        return measure_along_line(request.point, request.line, request.units, settings=settings)
    except ValueError as e:
        raise _validation_error(e) from e
    except Exception as e:
        raise _internal_error(e) from e


@router.post("/api/line-length")
def post_line_length(request: LineLengthRequest) -> dict:
    """Return the total length of the request line."""
    units = request.units or get_settings().projection.default_units
    try:
        coords = line_coordinates(coerce_line(request.line))
        return {"length": line_length(coords, units), "units": units}
    except ValueError as e:
        raise _validation_error(e) from e


@router.get("/api/settings")
def get_public_settings() -> dict:
    """Return the projection defaults a client can expect."""
    settings = get_settings()
    return {
        "app": {"name": settings.app.name},
        "projection": settings.projection.model_dump(mode="json"),
    }
