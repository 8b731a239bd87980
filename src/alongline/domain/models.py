"""
Domain models (Pydantic).

These types represent the stable "contract" between layers:
- GeoJSON-shaped inputs (`Point`, `LineFeature`, `LineStringGeometry`)
- API request payloads (`AlongLineRequest`, `LineLengthRequest`)
- the measurement output (`AlongLineResult`)

A line input is a tagged union with exactly two shapes (`Feature` wrapping a
LineString, or a bare `LineString` geometry); both unwrap to the same coordinate list.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, Field, TypeAdapter, model_validator

from alongline.core.geo import Units
from alongline.domain.errors import InvalidGeometryKind

Coordinate = tuple[float, float]


class PointGeometry(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: Coordinate


class Point(BaseModel):
    """A GeoJSON Point Feature; `properties` is an open-ended bag."""

    type: Literal["Feature"] = "Feature"
    geometry: PointGeometry
    properties: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _accept_shorthand(cls, data: Any) -> Any:
        # Accept `[lon, lat]` and bare Point geometries as well as full Features.
        if isinstance(data, (list, tuple)):
            return {"geometry": {"type": "Point", "coordinates": data}}
        if isinstance(data, Mapping) and data.get("type") == "Point":
            return {"geometry": dict(data)}
        return data

    @property
    def coordinates(self) -> Coordinate:
        return self.geometry.coordinates

    @classmethod
    def at(cls, coordinates: Coordinate, **properties: Any) -> "Point":
        return cls(geometry=PointGeometry(coordinates=coordinates), properties=properties)


class LineStringGeometry(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: list[Coordinate] = Field(..., min_length=2)


class LineFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    geometry: LineStringGeometry
    properties: dict[str, Any] = Field(default_factory=dict)


LineInput = Annotated[Union[LineFeature, LineStringGeometry], Field(discriminator="type")]

_LINE_ADAPTER: TypeAdapter[LineFeature | LineStringGeometry] = TypeAdapter(LineInput)
_POINT_ADAPTER = TypeAdapter(Point)


def coerce_point(value: Any) -> Point:
    """Validate a point given as a model, `[lon, lat]`, Point geometry or Point Feature."""
    if isinstance(value, Point):
        return value
    return _POINT_ADAPTER.validate_python(value)


def coerce_line(value: Any) -> LineFeature | LineStringGeometry:
    """Validate a line input, rejecting unknown `type` tags with `InvalidGeometryKind`."""
    if isinstance(value, (LineFeature, LineStringGeometry)):
        return value
    kind = value.get("type") if isinstance(value, Mapping) else type(value).__name__
    if kind not in ("Feature", "LineString"):
        raise InvalidGeometryKind(kind=kind)
    return _LINE_ADAPTER.validate_python(value)


def line_coordinates(line: LineFeature | LineStringGeometry) -> list[Coordinate]:
    """Unwrap either line shape to its coordinate list."""
    if isinstance(line, LineFeature):
        return line.geometry.coordinates
    return line.coordinates


class AlongLineRequest(BaseModel):
    """API payload for measuring a point against a line."""

    point: Point
    line: dict[str, Any]
    units: Units | None = None
    settings_overrides: dict[str, Any] | None = None


class LineLengthRequest(BaseModel):
    line: dict[str, Any]
    units: Units | None = None


class AlongLineResult(BaseModel):
    """Closest point on the line, the clipped sub-path leading to it, and line lengths."""

    units: Units
    point: Point
    closest: Point
    index: int = Field(..., ge=0)
    distance_to_line: float = Field(..., ge=0)
    travelled: float = Field(..., ge=0)
    total_length: float = Field(..., ge=0)
    clipped: LineFeature
