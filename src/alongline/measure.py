"""
Point-along-line measurement service.

This module wires together:
- input validation (GeoJSON point + LineString Feature/Geometry)
- the closest-point projection (`alongline.geometry.project`)
- the clipped sub-path up to that point (`alongline.geometry.clip`)
- line lengths (`alongline.geometry.length`)

`point_along_line` keeps its historical contract and returns the total length of
the line. `measure_along_line` returns everything that was computed, including the
distance travelled along the line up to the closest point.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from alongline.config.settings import Settings, get_settings
from alongline.core.geo import Units
from alongline.domain.models import (
    AlongLineResult,
    LineFeature,
    LineStringGeometry,
    Point,
    coerce_line,
    coerce_point,
    line_coordinates,
)
from alongline.geometry.clip import clip_line
from alongline.geometry.length import line_length
from alongline.geometry.project import project_point

logger = logging.getLogger(__name__)

CLIPPED_STROKE = "#f00"


def measure_along_line(
    point: Any,
    line: Any,
    units: Units | None = None,
    *,
    settings: Settings | None = None,
) -> AlongLineResult:
    """Project `point` onto `line` and measure the line up to and including the projection.

    Raises `InvalidGeometryKind` when `line` is neither a LineString Feature nor a
    bare LineString, and pydantic's `ValidationError` for malformed coordinates.
    """
    settings = settings or get_settings()
    units = units or settings.projection.default_units

    pt = coerce_point(point)
    coords = line_coordinates(coerce_line(line))

    projection = project_point(
        pt.coordinates,
        coords,
        units,
        probe_distance=settings.projection.probe_distance,
        probe_units=settings.projection.probe_units,
    )
    clipped_coords = clip_line(coords, projection.index, projection.coordinates)
    clipped = LineFeature(
        geometry=LineStringGeometry(coordinates=clipped_coords),
        properties={"stroke": CLIPPED_STROKE},
    )

    logger.debug("Winning segment index=%s", projection.index)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Clipped line: %s", json.dumps(clipped.model_dump(mode="json")))

    return AlongLineResult(
        units=units,
        point=pt,
        closest=Point.at(projection.coordinates, distance=projection.distance, index=projection.index),
        index=projection.index,
        distance_to_line=projection.distance,
        travelled=line_length(clipped_coords, units),
        total_length=line_length(coords, units),
        clipped=clipped,
    )


def point_along_line(
    point: Any,
    line: Any,
    units: Units | None = None,
    *,
    settings: Settings | None = None,
) -> float:
    """Return the total length of `line` in `units` (default from settings, `miles`).

    The closest point is still computed and logged; use `measure_along_line` to get
    the distance travelled up to it.
    """
    return measure_along_line(point, line, units, settings=settings).total_length
