"""Rebuild the sub-path from a line's first vertex up to a projected point."""

from __future__ import annotations

from typing import Sequence


def clip_line(
    coords: Sequence[Sequence[float]], index: int, closest: Sequence[float]
) -> list[tuple[float, float]]:
    """Return `coords[0..index]` followed by `closest` (a new list, input untouched)."""
    if not 0 <= index < len(coords) - 1:
        raise ValueError(f"segment index {index} out of range for {len(coords)} coordinates")
    path = [(float(c[0]), float(c[1])) for c in coords[: index + 1]]
    path.append((float(closest[0]), float(closest[1])))
    return path
