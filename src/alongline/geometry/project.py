"""
Closest point on a polyline.

For each segment we consider three candidates: the segment start, the segment end,
and the perpendicular foot of the query point. The foot is found by casting a long
probe from the query point at right angles to the segment bearing (first +90, then
-90) and intersecting it with the segment in lon/lat space.

The probe length must exceed the largest point-to-segment offset; otherwise the
foot is missed and only the vertices compete.

A query point lying inside a segment (not on a vertex) gets no foot either: the
probe starts on the segment, and a crossing at the probe's own start is not an
intersection. The nearest vertex wins instead, with a non-zero distance.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from alongline.core.geo import bearing, destination, distance
from alongline.geometry.intersect import intersect_segments

logger = logging.getLogger(__name__)

DEFAULT_PROBE_DISTANCE = 1000.0


@dataclass(frozen=True)
class Projection:
    """The closest candidate found on a line, tied to the segment it came from."""

    coordinates: tuple[float, float]
    distance: float
    index: int


def perpendicular_foot(
    point: Sequence[float],
    start: Sequence[float],
    stop: Sequence[float],
    *,
    probe_distance: float = DEFAULT_PROBE_DISTANCE,
    probe_units: str = "miles",
) -> tuple[float, float] | None:
    """Return where a perpendicular probe from `point` crosses `start`->`stop`, or None."""
    direction = bearing(start, stop)
    for offset in (90, -90):
        probe = destination(point, probe_distance, direction + offset, probe_units)
        hit = intersect_segments(point, probe, start, stop)
        if hit is not None:
            return hit
    return None


def project_point(
    point: Sequence[float],
    coords: Sequence[Sequence[float]],
    units: str = "miles",
    *,
    probe_distance: float = DEFAULT_PROBE_DISTANCE,
    probe_units: str = "miles",
) -> Projection:
    """Find the point on the polyline `coords` closest to `point`.

    Ties keep the earliest candidate; the returned index is the segment that
    produced the winning candidate.
    """
    if len(coords) < 2:
        raise ValueError("a line needs at least 2 coordinates")

    best = Projection(coordinates=(math.inf, math.inf), distance=math.inf, index=-1)
    for i in range(len(coords) - 1):
        start = (float(coords[i][0]), float(coords[i][1]))
        stop = (float(coords[i + 1][0]), float(coords[i + 1][1]))

        candidates = [start, stop]
        foot = perpendicular_foot(
            point, start, stop, probe_distance=probe_distance, probe_units=probe_units
        )
        if foot is not None:
            candidates.append(foot)

        for candidate in candidates:
            dist = distance(point, candidate, units)
            if dist < best.distance:
                best = Projection(coordinates=candidate, distance=dist, index=i)

    logger.debug("Closest segment index=%s distance=%s", best.index, best.distance)
    return best
