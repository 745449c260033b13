# app/resolver.py
from collections.abc import Mapping, Sequence

from routable.app.hooks import NoopHooks, ResolverHooks
from routable.app.protocols import LineFinder, NearestPointProjector
from routable.domain.entities.routable import (
    DEFAULT_ROUTABLE_POINT,
    RoutablePoint,
    RoutableResult,
)
from routable.domain.geometry.line_finder import FirstLineFinder
from routable.domain.geometry.normalize import (
    GeometryError,
    parse_feature,
    parse_override,
    parse_point,
)
from routable.domain.geometry.projection import PlanarProjector, round_half_away


class RoutablePointResolver:
    """
    Resolve the routable point(s) for one geocoded feature.

    Outcome is three-way and never raised:
      • None                        -> point or feature missing/malformed
      • RoutableResult(points=None) -> no line to project onto
      • RoutableResult(points=[..]) -> index 0 is the default routable point
    Holds no per-call state; one instance can serve concurrent callers.
    """

    def __init__(
        self,
        *,
        line_finder: LineFinder | None = None,
        projector: NearestPointProjector | None = None,
        precision: int = 6,
        default_name: str = DEFAULT_ROUTABLE_POINT,
        hooks: ResolverHooks | None = None,
    ):
        self.line_finder = line_finder or FirstLineFinder()
        self.projector = projector or PlanarProjector()
        self.precision, self.default_name = precision, default_name
        self.hooks = hooks or NoopHooks()

    # --------------- Helpers -----------------------------

    def _overrides(self, raw) -> list[RoutablePoint]:
        if not raw:
            return []
        out = []
        for i, o in enumerate(raw):
            try:
                out.append(parse_override(o))
            except GeometryError as exc:
                self.hooks.override_dropped(index=i, reason=str(exc))
        return out

    def _from_overrides(self, overrides: list[RoutablePoint]) -> RoutableResult | None:
        primary = (o.name == DEFAULT_ROUTABLE_POINT or not o.name for o in overrides)
        idx = next((i for i, hit in enumerate(primary) if hit), None)
        if idx is None:
            return None
        # the sentinel name marks the primary override whatever label is emitted;
        # filter on names as given, later unnamed overrides pass through as-is
        rest = [
            o for i, o in enumerate(overrides) if i != idx and o.name != DEFAULT_ROUTABLE_POINT
        ]
        return RoutableResult([overrides[idx].renamed(self.default_name), *rest])

    def _rounded(self, coords) -> tuple[float, float]:
        return (
            round_half_away(coords[0], self.precision),
            round_half_away(coords[1], self.precision),
        )

    # --------------------------------------------------------

    def resolve(self, point, feature, overrides=None) -> RoutableResult | None:
        try:
            pt = parse_point(point)
            feat = parse_feature(feature)
        except GeometryError as exc:
            self.hooks.rejected(reason=str(exc))
            return None
        if pt is None or feat is None:
            self.hooks.rejected(reason="missing point" if pt is None else "missing feature")
            return None

        ovr = self._overrides(overrides)
        result = self._from_overrides(ovr)
        if result is not None:
            self.hooks.resolved(branch="override", points=len(result.points))
            return result

        if pt.interpolated:
            self.hooks.resolved(branch="interpolated", points=1)
            return RoutableResult([RoutablePoint(self.default_name, pt.coordinates)])

        try:
            line = self.line_finder.find_line(feat)
        except GeometryError as exc:
            self.hooks.rejected(reason=str(exc))
            return None
        nearest = self.projector.project(line, pt) if line is not None else None
        if nearest is None:
            self.hooks.resolved(branch="no_line", points=None)
            return RoutableResult(points=None)

        # overrides appended verbatim, no default-name filtering here
        points = [RoutablePoint(self.default_name, self._rounded(nearest.coordinates)), *ovr]
        self.hooks.resolved(branch="projected", points=len(points))
        return RoutableResult(points)

    __call__ = resolve

    def attach(
        self, record: Mapping, point, overrides: Sequence | None = None, *, key="routable_points"
    ) -> dict:
        """Copy of a GeoJSON feature record with its resolution stored under `key`."""
        out = dict(record)
        result = self.resolve(point, record, overrides)
        if result is not None:
            out[key] = result.to_dict()
        return out


_default_resolver = RoutablePointResolver()


def routable_points(point, feature, overrides=None) -> RoutableResult | None:
    return _default_resolver.resolve(point, feature, overrides)
