# domain/geometry/normalize.py
"""
Boundary normalizers: loose GeoJSON-ish input -> typed geography entities.

Callers hand the resolver whatever their pipeline produced (coordinate arrays,
GeoJSON dicts, already-typed entities). Everything past this module works on
the tagged union in ``routable.domain.entities.geography`` only.
"""

from collections.abc import Mapping, Sequence
from math import isfinite

import numpy as np

from routable.domain.entities.geography import (
    Coord,
    Feature,
    Geometry,
    GeometryCollection,
    Line,
    LineString,
    MultiLineString,
    OtherGeometry,
    Point,
)
from routable.domain.entities.routable import RoutablePoint


LINE_TYPES = ("LineString", "MultiLineString")


class GeometryError(ValueError):
    """Input could be read as a point/feature/override, but its content is malformed."""


def _is_empty(raw) -> bool:
    if raw is None:
        return True
    if isinstance(raw, np.ndarray):
        return raw.size == 0
    if isinstance(raw, Mapping | Sequence) and not isinstance(raw, str):
        return len(raw) == 0
    return False


def parse_coord(raw) -> Coord:
    if isinstance(raw, np.ndarray):
        raw = raw.tolist()
    if isinstance(raw, str | bytes) or not isinstance(raw, Sequence) or len(raw) < 2:
        raise GeometryError(f"expected [lon, lat], got {raw!r}")
    try:
        lon, lat = float(raw[0]), float(raw[1])
    except (TypeError, ValueError) as exc:
        raise GeometryError(f"non-numeric coordinate {raw!r}") from exc
    if not (isfinite(lon) and isfinite(lat)):
        raise GeometryError(f"non-finite coordinate {raw!r}")
    return (lon, lat)


def _parse_path(raw) -> tuple[Coord, ...]:
    if isinstance(raw, str) or not isinstance(raw, Sequence):
        raise GeometryError(f"expected a coordinate list, got {raw!r}")
    return tuple(parse_coord(c) for c in raw)


def parse_point(raw) -> Point | None:
    """None for absent/empty input; GeometryError when present but unusable."""
    if isinstance(raw, Point):
        return raw
    if _is_empty(raw):
        return None
    if isinstance(raw, Mapping):
        if "coordinates" not in raw:
            raise GeometryError("point has no coordinates")
        lon, lat = parse_coord(raw["coordinates"])
        return Point(lon, lat, interpolated=bool(raw.get("interpolated", False)))
    lon, lat = parse_coord(raw)
    return Point(lon, lat)


def _is_collection(raw: Mapping) -> bool:
    # any geometry carrying members is treated as a collection
    return raw.get("type") == "GeometryCollection" or "geometries" in raw


def _members(raw: Mapping) -> Sequence:
    members = raw.get("geometries") or ()
    if isinstance(members, str) or not isinstance(members, Sequence):
        raise GeometryError("geometries must be a list")
    return members


def parse_geometry(raw) -> Geometry | None:
    if raw is None:
        return None
    if isinstance(raw, LineString | MultiLineString | GeometryCollection | OtherGeometry):
        return raw
    if not isinstance(raw, Mapping):
        raise GeometryError(f"geometry must be a mapping, got {type(raw).__name__}")

    gtype = raw.get("type")
    if _is_collection(raw):
        members = _members(raw)
        parsed = (parse_geometry(g) for g in members)
        return GeometryCollection(tuple(g for g in parsed if g is not None))
    if gtype == "LineString":
        return LineString(_parse_path(raw.get("coordinates") or ()))
    if gtype == "MultiLineString":
        parts = raw.get("coordinates") or ()
        if isinstance(parts, str) or not isinstance(parts, Sequence):
            raise GeometryError("MultiLineString coordinates must be a list of lines")
        return MultiLineString(tuple(_parse_path(p) for p in parts))
    return OtherGeometry(str(gtype))


def select_line(raw) -> Line | None:
    """
    First LineString/MultiLineString of a raw geometry, chosen by type tag.
    Only the chosen line is parsed; other members are never read.
    """
    if raw is None:
        return None
    if isinstance(raw, LineString | MultiLineString | GeometryCollection | OtherGeometry):
        raw_type = raw.type
    elif isinstance(raw, Mapping):
        raw_type = raw.get("type")
    else:
        raise GeometryError(f"geometry must be a mapping, got {type(raw).__name__}")

    if isinstance(raw, GeometryCollection):
        members = raw.geometries
    elif isinstance(raw, Mapping) and _is_collection(raw):
        members = _members(raw)
    else:
        return parse_geometry(raw) if raw_type in LINE_TYPES else None

    for m in members:
        mtype = m.get("type") if isinstance(m, Mapping) else getattr(m, "type", None)
        if mtype in LINE_TYPES:
            return parse_geometry(m)
    return None


def parse_feature(raw) -> Feature | None:
    if isinstance(raw, Feature):
        return raw
    if _is_empty(raw):
        return None
    if not isinstance(raw, Mapping):
        raise GeometryError(f"feature must be a mapping, got {type(raw).__name__}")
    # geometry stays raw until a line is actually needed
    return Feature(geometry=raw.get("geometry"))


def parse_override(raw) -> RoutablePoint:
    if isinstance(raw, RoutablePoint):
        return raw if raw.name else RoutablePoint(None, raw.coordinates)
    if not isinstance(raw, Mapping):
        raise GeometryError(f"override must be a mapping, got {type(raw).__name__}")
    name = raw.get("name") or None
    if name is not None and not isinstance(name, str):
        raise GeometryError(f"override name must be a string, got {name!r}")
    return RoutablePoint(name, parse_coord(raw.get("coordinates")))
