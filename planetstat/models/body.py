"""Celestial body and per-system body listing models."""

from __future__ import annotations

from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from .system import Identity, identity_of

TERRAFORM_CANDIDATE = "Candidate for terraforming"


class Body(BaseModel):
    """Single star or planet inside a system."""

    name: str = Field(..., min_length=1)
    id: int | None = None
    body_id: int | None = Field(default=None, alias="bodyId")
    type: str = ""
    sub_type: str = Field(default="", alias="subType")
    is_main_star: bool | None = Field(default=None, alias="isMainStar")
    distance_to_arrival: float | None = Field(default=None, alias="distanceToArrival")
    surface_temperature: float | None = Field(default=None, alias="surfaceTemperature")
    terraforming_state: str | None = Field(default=None, alias="terraformingState")

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    @property
    def is_star(self) -> bool:
        return self.type == "Star"

    @property
    def is_planet(self) -> bool:
        return self.type == "Planet"

    @property
    def is_terraform_candidate(self) -> bool:
        return self.terraforming_state == TERRAFORM_CANDIDATE


class SystemInfo(BaseModel):
    """Body listing for one system, cached under ``system/<identity>``."""

    name: str = Field(..., min_length=1)
    id: int | None = None
    id64: int | None = None
    bodies: list[Body] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    @property
    def identity(self) -> Identity:
        return identity_of(self.id64, self.id, self.name)

    @property
    def cache_key(self) -> str:
        return system_info_key(self.identity)

    def stars(self) -> list[Body]:
        """Stars, main star first when the catalog flags one."""
        stars = [b for b in self.bodies if b.is_star]
        return sorted(stars, key=lambda b: not b.is_main_star)

    def planets(self) -> list[Body]:
        return [b for b in self.bodies if b.is_planet]

    def star_count(self) -> int:
        return len(self.stars())


def system_info_key(identity: Identity) -> str:
    """Cache key for a system's body listing.

    Numeric ids are used as is. Names are lower-cased (catalog names are
    case-insensitive) and percent-encoded, so distinct names never share a
    file and the key stays safe as a file name.

    Examples:
        >>> system_info_key(("id64", 42))
        'system/id64-42'
        >>> system_info_key(("name", "Col 285 Sector AB-C d1/2"))
        'system/name-col%20285%20sector%20ab-c%20d1%2F2'
    """
    kind, value = identity
    if kind == "name":
        value = quote(str(value).lower(), safe="")
    return f"system/{kind}-{value}"
