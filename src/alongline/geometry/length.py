"""Polyline length."""

from __future__ import annotations

from typing import Sequence

from alongline.core.geo import distance


def line_length(coords: Sequence[Sequence[float]], units: str = "miles") -> float:
    """Sum of great-circle distances between consecutive vertices."""
    return sum((distance(a, b, units) for a, b in zip(coords, coords[1:])), 0.0)
