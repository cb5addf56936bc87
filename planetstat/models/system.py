"""Star system record returned by the cube-systems endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.geometry import Vec3

# Tagged so an id64 never collides with a plain id or a name:
# ("id64", 10477373803), ("id", 27) or ("name", "Sol")
Identity = tuple[str, int | str]


def identity_of(id64: int | None, id: int | None, name: str) -> Identity:
    if id64 is not None:
        return ("id64", id64)
    if id is not None:
        return ("id", id)
    return ("name", name)


class PrimaryStar(BaseModel):
    """Primary star summary attached to a system listing."""

    type: str = ""
    name: str = ""
    is_scoopable: bool = Field(default=False, alias="isScoopable")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class System(BaseModel):
    """Star system listing.

    Identity is the catalog's ``id64`` when present, falling back to ``id``
    and finally the system name, tagged with which one it is.
    """

    name: str = Field(..., min_length=1)
    id: int | None = None
    id64: int | None = None
    coords: Vec3
    coords_locked: bool = Field(default=False, alias="coordsLocked")
    require_permit: bool = Field(default=False, alias="requirePermit")
    permit_name: str | None = Field(default=None, alias="permitName")
    primary_star: PrimaryStar = Field(default_factory=PrimaryStar, alias="primaryStar")

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    @field_validator("primary_star", mode="before")
    @classmethod
    def validate_primary_star(cls, v: Any) -> Any:
        """EDSM sends ``[]`` instead of an object when the star is unknown."""
        if v is None or v == []:
            return {}
        return v

    @property
    def identity(self) -> Identity:
        return identity_of(self.id64, self.id, self.name)
