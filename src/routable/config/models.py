from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from routable.domain.entities.routable import DEFAULT_ROUTABLE_POINT
from routable.domain.geometry.projection import EARTH_RADIUS_M


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False  # also log every successful resolution


# ----------------- PROJECTION ---------------------


class ProjectionPlanarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["planar"] = "planar"


class ProjectionEquirectangularModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["equirectangular"] = "equirectangular"
    earth_radius_m: float = Field(default=EARTH_RADIUS_M, gt=0)


ProjectionUnion = Annotated[
    ProjectionPlanarModel | ProjectionEquirectangularModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class ResolverModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "routable"
    precision: int = 6  # decimal places kept on projected coordinates
    default_name: str = DEFAULT_ROUTABLE_POINT  # output label; overrides match the sentinel
    log: LogModel = LogModel()
    projection: ProjectionUnion = Field(default_factory=ProjectionPlanarModel)

    @field_validator("precision")
    @classmethod
    def _precision_range(cls, v: int) -> int:
        # beyond 15 digits a double has nothing left to round
        if not 0 <= v <= 15:
            raise ValueError(f"precision must be within 0..15, got {v}")
        return v

    @field_validator("default_name")
    @classmethod
    def _non_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_name must not be blank")
        return v
