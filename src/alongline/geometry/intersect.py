"""
Finite segment/segment intersection in the plane.

Both inputs are treated as infinite lines first (cross-product determinant of the
direction vectors), then the intersection is kept only if it falls strictly inside
both finite segments. Touching exactly at an endpoint is not an intersection.
"""

from __future__ import annotations

from typing import Sequence


def intersect_segments(
    line1_start: Sequence[float],
    line1_end: Sequence[float],
    line2_start: Sequence[float],
    line2_end: Sequence[float],
) -> tuple[float, float] | None:
    """Return the `(x, y)` where the two segments cross, or None."""
    x1, y1 = line1_start[0], line1_start[1]
    x2, y2 = line1_end[0], line1_end[1]
    x3, y3 = line2_start[0], line2_start[1]
    x4, y4 = line2_end[0], line2_end[1]

    denominator = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if denominator == 0:
        # Parallel or coincident.
        return None

    dy = y1 - y3
    dx = x1 - x3
    a = ((x4 - x3) * dy - (y4 - y3) * dx) / denominator
    b = ((x2 - x1) * dy - (y2 - y1) * dx) / denominator

    if not (0 < a < 1 and 0 < b < 1):
        return None

    return x1 + a * (x2 - x1), y1 + a * (y2 - y1)
