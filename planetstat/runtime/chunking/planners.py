"""Chunk planning for spatial region queries.

This module provides the ChunkPartitioner class that turns an arbitrary
region into the aligned grid cells that cover it.
"""

from __future__ import annotations

import math

from ...config import CHUNK_SIZE
from ...core.geometry import ChunkCoord, Region, Vec3
from .definitions import ChunkPlan
from .telemetry import log_chunk_plan


class ChunkPartitioner:
    """Plans the grid chunks covering a region.

    Bounds are expanded outward to grid lines (minimum corner floored,
    maximum corner ceiled) so regions that do not align to the grid are
    still fully covered. Chunks come out in x, then y, then z order.
    """

    def __init__(self, chunk_size: float = CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> float:
        return self._chunk_size

    def align(self, region: Region) -> Region:
        """Expand ``region`` to the enclosing grid boundaries."""
        lo_x, hi_x = self._axis_indices(region.pos.x, region.end.x)
        lo_y, hi_y = self._axis_indices(region.pos.y, region.end.y)
        lo_z, hi_z = self._axis_indices(region.pos.z, region.end.z)
        size = self._chunk_size
        pos = Vec3(lo_x * size, lo_y * size, lo_z * size)
        end = Vec3(hi_x * size, hi_y * size, hi_z * size)
        return Region(pos=pos, size=end.sub(pos))

    def coords(self, region: Region) -> list[ChunkCoord]:
        """Chunk coordinates covering ``region``."""
        lo_x, hi_x = self._axis_indices(region.pos.x, region.end.x)
        lo_y, hi_y = self._axis_indices(region.pos.y, region.end.y)
        lo_z, hi_z = self._axis_indices(region.pos.z, region.end.z)
        return [
            ChunkCoord(x, y, z)
            for x in range(lo_x, hi_x)
            for y in range(lo_y, hi_y)
            for z in range(lo_z, hi_z)
        ]

    def plan(self, region: Region) -> list[ChunkPlan]:
        """Plan chunks for a region.

        Args:
            region: Query region (any alignment, any size)

        Returns:
            One ChunkPlan per covering cell, with its center and query window
        """
        plans = [
            ChunkPlan(
                coord=coord,
                center=coord.center(self._chunk_size),
                window=self._chunk_size,
                chunk_index=i,
            )
            for i, coord in enumerate(self.coords(region))
        ]

        log_chunk_plan(
            total_chunks=len(plans),
            chunk_size=self._chunk_size,
            region_pos=region.pos.as_tuple(),
            region_size=region.size.as_tuple(),
        )

        return plans

    def _axis_indices(self, lo: float, hi: float) -> tuple[int, int]:
        """Half-open chunk index range ``[first, last)`` spanning ``[lo, hi)``."""
        first = math.floor(lo / self._chunk_size)
        last = math.ceil(hi / self._chunk_size)
        # A zero-width axis still lands in the cell holding ``lo``
        return first, max(last, first + 1)
