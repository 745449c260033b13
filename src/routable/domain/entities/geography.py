from collections.abc import Mapping
from dataclasses import dataclass

# Core geometry types consumed by the resolver.
# Coordinates are (lon, lat) in decimal degrees throughout.
Coord = tuple[float, float]


@dataclass(frozen=True)
class Point:
    lon: float
    lat: float
    interpolated: bool = False  # synthesized along a range, not snapped to a line

    @property
    def coordinates(self) -> Coord:
        return (self.lon, self.lat)


@dataclass(frozen=True)
class LineString:
    coordinates: tuple[Coord, ...]
    type: str = "LineString"


@dataclass(frozen=True)
class MultiLineString:
    coordinates: tuple[tuple[Coord, ...], ...]
    type: str = "MultiLineString"

    def parts(self) -> tuple[tuple[Coord, ...], ...]:
        return self.coordinates


@dataclass(frozen=True)
class GeometryCollection:
    geometries: tuple["Geometry", ...]
    type: str = "GeometryCollection"


@dataclass(frozen=True)
class OtherGeometry:
    """Any geometry the resolver never projects onto (Point, MultiPoint, Polygon, ...)."""

    type: str


Geometry = LineString | MultiLineString | GeometryCollection | OtherGeometry
Line = LineString | MultiLineString


@dataclass(frozen=True)
class Feature:
    # raw GeoJSON mapping is accepted and parsed only when a line is selected
    geometry: Geometry | Mapping | None = None


def line_parts(line: Line) -> tuple[tuple[Coord, ...], ...]:
    if isinstance(line, MultiLineString):
        return line.parts()
    return (line.coordinates,)
