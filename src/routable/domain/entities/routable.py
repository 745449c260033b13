from dataclasses import dataclass, replace

from routable.domain.entities.geography import Coord

DEFAULT_ROUTABLE_POINT = "default_routable_point"


@dataclass(frozen=True)
class RoutablePoint:
    """A named candidate location for routing. Overrides may arrive unnamed."""

    name: str | None
    coordinates: Coord

    def renamed(self, name: str) -> "RoutablePoint":
        return replace(self, name=name)

    def to_dict(self) -> dict:
        return {"name": self.name, "coordinates": [self.coordinates[0], self.coordinates[1]]}


@dataclass(frozen=True)
class ProjectedPoint:
    coordinates: Coord  # unrounded
    distance: float  # in the projector's units
    part_index: int
    segment_index: int


@dataclass(frozen=True)
class RoutableResult:
    # None => evaluated, nothing routable. Otherwise non-empty, index 0 is the default.
    points: list[RoutablePoint] | None = None

    def to_dict(self) -> dict:
        if self.points is None:
            return {"points": None}
        return {"points": [p.to_dict() for p in self.points]}
