"""Domain errors raised on invalid geometry input."""

from __future__ import annotations


class InvalidGeometryKind(ValueError):
    """Raised when a line input is neither a LineString Feature nor a bare LineString."""

    def __init__(self, message: str = "input must be a LineString Feature or Geometry", *, kind: object = None):
        super().__init__(message)
        self.kind = kind
