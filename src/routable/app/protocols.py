from typing import Protocol, runtime_checkable

from routable.domain.entities.geography import Feature, Line, Point
from routable.domain.entities.routable import ProjectedPoint


@runtime_checkable
class LineFinder(Protocol):
    """Locate the line geometry a feature's routable point is projected onto."""

    def find_line(self, feature: Feature) -> Line | None: ...


@runtime_checkable
class NearestPointProjector(Protocol):
    """
    Responsibilities:
      • Find the closest point on every segment of every component line.
      • Return the overall minimizer, unrounded, or None for degenerate lines.
    """

    def project(self, line: Line, point: Point) -> ProjectedPoint | None: ...
