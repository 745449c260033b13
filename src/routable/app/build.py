# routable/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from routable.app.hooks import NoopHooks, ResolverHooks
from routable.app.resolver import RoutablePointResolver
from routable.config.models import ResolverModel
from routable.domain.geometry.line_finder import FirstLineFinder
from routable.io.resolver_logging import ResolverLogging
from routable.runtime.registries import make_projector


@dataclass
class App:
    config: ResolverModel
    hooks: ResolverHooks
    resolver: RoutablePointResolver


def build(cfg: ResolverModel | Mapping | None = None, *, use_logging: bool = True) -> App:
    # 0) Validate config
    if cfg is None:
        model = ResolverModel()
    else:
        model = cfg if isinstance(cfg, ResolverModel) else ResolverModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        ResolverLogging(name=model.name, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 2) Geometry components
    projector = make_projector(model.projection)

    resolver = RoutablePointResolver(
        line_finder=FirstLineFinder(),
        projector=projector,
        precision=model.precision,
        default_name=model.default_name,
        hooks=hooks,
    )
    return App(model, hooks, resolver)
