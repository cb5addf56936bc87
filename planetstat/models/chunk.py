"""Cached unit of the spatial query engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..config import CHUNK_SIZE
from ..core.geometry import ChunkCoord
from .system import System


class Chunk(BaseModel):
    """All systems whose position falls in one grid cell.

    ``chunk_size`` is the grid edge the cell was cut from; the same
    coordinate names a different cell on another grid.
    """

    coord: ChunkCoord
    systems: list[System] = Field(default_factory=list)
    chunk_size: float = CHUNK_SIZE

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> str:
        return self.coord.key

    @property
    def cache_key(self) -> str:
        return self.coord.cache_key
