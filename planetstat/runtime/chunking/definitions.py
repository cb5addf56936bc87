"""Chunk plan and result structures.

This module defines the data structures passed between the partitioner and
the region query engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...core.geometry import ChunkCoord, Vec3

if TYPE_CHECKING:
    from ...models import System


@dataclass(frozen=True)
class ChunkPlan:
    """Plan for a single chunk.

    Attributes:
        coord: Grid coordinate of the chunk
        center: Geometric center of the cell, used as the query point
        window: Edge length of the query cube sent to the catalog
        chunk_index: Zero-based index of this chunk in the overall plan
    """

    coord: ChunkCoord
    center: Vec3
    window: float
    chunk_index: int = 0

    @property
    def key(self) -> str:
        return self.coord.key

    def contains(self, point: Vec3) -> bool:
        return ChunkCoord.from_point(point, self.window) == self.coord


@dataclass
class RegionResult:
    """Result of a region query.

    Attributes:
        systems: Systems inside the region, deduplicated, in chunk order
        chunks_used: Number of chunks covering the region
        cache_hits: Chunks served from the cache
        chunks_fetched: Chunks fetched from the catalog
        duplicates_dropped: Records skipped because their identity was already emitted
    """

    systems: list[System] = field(default_factory=list)
    chunks_used: int = 0
    cache_hits: int = 0
    chunks_fetched: int = 0
    duplicates_dropped: int = 0

    @property
    def total_systems(self) -> int:
        return len(self.systems)
