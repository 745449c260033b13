# runtime/registries.py
from collections.abc import Callable

from routable.app.protocols import NearestPointProjector
from routable.config.models import (
    ProjectionEquirectangularModel,
    ProjectionPlanarModel,
    ProjectionUnion,
)
from routable.domain.geometry.projection import EquirectangularProjector, PlanarProjector

ProjectorFactory = Callable[[ProjectionUnion], NearestPointProjector]

_projector_registry: dict[str, ProjectorFactory] = {}


# ------------------- Projector registries ---------------------------


def register_projector(kind: str):
    def deco(fn: ProjectorFactory):
        _projector_registry[kind] = fn
        return fn

    return deco


def make_projector(cfg: ProjectionUnion) -> NearestPointProjector:
    try:
        factory = _projector_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown projection kind {cfg.kind!r}")
    return factory(cfg)


@register_projector("planar")
def _make_planar(cfg: ProjectionPlanarModel):
    return PlanarProjector()


@register_projector("equirectangular")
def _make_equirectangular(cfg: ProjectionEquirectangularModel):
    return EquirectangularProjector(cfg.earth_radius_m)
