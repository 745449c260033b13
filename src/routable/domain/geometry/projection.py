import math

import numpy as np

from routable.app.protocols import NearestPointProjector
from routable.domain.entities.geography import Line, Point, line_parts
from routable.domain.entities.routable import ProjectedPoint

EARTH_RADIUS_M = 6_371_008.8


def nearest_on_path(
    path: np.ndarray, p: np.ndarray, kx: float = 1.0
) -> tuple[int, float, np.ndarray]:
    """
    Closest point to p on the polyline `path` (shape (n, 2), n >= 2).

    kx scales x-differences before measuring; 1.0 is plain planar distance.
    Returns (segment_index, distance, foot). Ties go to the earliest segment.
    """
    k = np.array([kx, 1.0])
    a, b = path[:-1], path[1:]
    ab = (b - a) * k
    ap = (p - a) * k
    denom = np.einsum("ij,ij->i", ab, ab)
    t = np.divide(
        np.einsum("ij,ij->i", ap, ab), denom, out=np.zeros_like(denom), where=denom > 0
    )
    t = np.clip(t, 0.0, 1.0)
    feet = a + t[:, None] * (b - a)
    d = np.hypot(*((p - feet) * k).T)
    i = int(np.argmin(d))
    return i, float(d[i]), feet[i]


class PlanarProjector(NearestPointProjector):
    """Euclidean projection in degree space; distance reported in degrees."""

    def _kx(self, point: Point) -> float:
        return 1.0

    def _scale(self, d: float) -> float:
        return d

    def project(self, line: Line, point: Point) -> ProjectedPoint | None:
        p = np.array(point.coordinates, dtype=float)
        kx = self._kx(point)
        best: ProjectedPoint | None = None
        for part_index, part in enumerate(line_parts(line)):
            if len(part) < 2:
                continue
            seg, d, foot = nearest_on_path(np.asarray(part, dtype=float), p, kx)
            d = self._scale(d)
            if best is None or d < best.distance:
                best = ProjectedPoint(
                    coordinates=(float(foot[0]), float(foot[1])),
                    distance=d,
                    part_index=part_index,
                    segment_index=seg,
                )
        return best


class EquirectangularProjector(PlanarProjector):
    """
    Local equirectangular approximation around the input point.
    Longitude spans shrink by cos(lat); distance reported in meters.
    """

    def __init__(self, earth_radius_m: float = EARTH_RADIUS_M):
        self.earth_radius_m = earth_radius_m

    def _kx(self, point: Point) -> float:
        return math.cos(math.radians(point.lat))

    def _scale(self, d: float) -> float:
        return math.radians(d) * self.earth_radius_m


def round_half_away(value: float, precision: int = 6) -> float:
    scale = 10**precision
    r = math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale
    return r + 0.0  # drop negative zero
