"""Region query execution over cached grid chunks.

This module provides the RegionQueryEngine class that loads or fetches
every chunk covering a region, filters records back to the region and
deduplicates them.
"""

from __future__ import annotations

import logging
from time import perf_counter
from typing import TYPE_CHECKING, Protocol

from ...config import CHUNK_CACHE_VERSION, MAX_REGION_SIZE
from ...core.geometry import Region, Vec3
from ...models import Chunk, Identity, System
from .definitions import ChunkPlan, RegionResult
from .planners import ChunkPartitioner
from .telemetry import (
    log_chunk_cache_hit,
    log_chunk_error,
    log_chunk_fetched,
    log_region_query_complete,
)

if TYPE_CHECKING:
    from ...cache import ChunkCache
    from ..retry import RetryingFetcher

logger = logging.getLogger(__name__)


class SystemSource(Protocol):
    """Remote source answering cube queries."""

    async def fetch_cube(self, center: Vec3, size: float) -> tuple[list[System], bool]:
        """Return systems in the cube and whether the answer was non-empty."""
        ...


class RegionQueryEngine:
    """Executes region queries chunk by chunk.

    Chunks are processed sequentially in plan order. Every remote call goes
    through the shared RetryingFetcher, so nothing is fanned out in parallel.
    """

    def __init__(
        self,
        source: SystemSource,
        fetcher: RetryingFetcher[list[System]],
        cache: ChunkCache | None = None,
        *,
        partitioner: ChunkPartitioner | None = None,
        version: int = CHUNK_CACHE_VERSION,
        max_region_size: float = MAX_REGION_SIZE,
    ) -> None:
        """Initialize region query engine.

        Args:
            source: Catalog answering cube queries
            fetcher: Retry/backoff wrapper used for every cube query
            cache: Optional chunk cache (None disables caching)
            partitioner: Chunk partitioner (defaults to the global grid)
            version: Cache version expected for chunk entries
            max_region_size: Region edge above which a warning is logged
        """
        self._source = source
        self._fetcher = fetcher
        self._cache = cache
        self._partitioner = partitioner or ChunkPartitioner()
        self._version = version
        self._max_region_size = max_region_size

    @property
    def partitioner(self) -> ChunkPartitioner:
        return self._partitioner

    async def query_region(self, region: Region) -> list[System]:
        """Systems inside ``region``, each identity once."""
        result = await self.execute(region)
        return result.systems

    async def execute(self, region: Region) -> RegionResult:
        """Run a region query and report how it was served.

        Raises:
            ProviderError: If any chunk fetch fails; no partial result is returned
        """
        start = perf_counter()
        size = region.size
        if max(size.x, size.y, size.z) > self._max_region_size:
            logger.warning(
                "region_exceeds_max_size",
                extra={"region_size": size.as_tuple(), "max_region_size": self._max_region_size},
            )

        plans = self._partitioner.plan(region)
        result = RegionResult(chunks_used=len(plans))
        seen: set[Identity] = set()

        for plan in plans:
            chunk, from_cache = await self.load_chunk(plan)
            if from_cache:
                result.cache_hits += 1
            else:
                result.chunks_fetched += 1

            for system in chunk.systems:
                if not region.contains(system.coords):
                    continue
                if system.identity in seen:
                    result.duplicates_dropped += 1
                    continue
                seen.add(system.identity)
                result.systems.append(system)

        log_region_query_complete(
            result=result,
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )
        return result

    async def load_chunk(self, plan: ChunkPlan) -> tuple[Chunk, bool]:
        """Return the chunk for ``plan`` and whether it came from the cache."""
        if self._cache is not None:
            cached = self._cache.find(self._version, plan.key, plan.window)
            if cached is not None:
                log_chunk_cache_hit(
                    chunk_key=plan.key,
                    chunk_index=plan.chunk_index,
                    systems=len(cached.systems),
                )
                return cached, True

        chunk = await self.fetch_chunk(plan)
        if self._cache is not None:
            self._cache.store(self._version, chunk)
        return chunk, False

    async def fetch_chunk(self, plan: ChunkPlan) -> Chunk:
        """Fetch one chunk from the catalog and keep only its own members."""
        chunk_start = perf_counter()

        async def query() -> tuple[list[System], bool]:
            return await self._source.fetch_cube(plan.center, plan.window)

        try:
            raw = await self._fetcher.fetch(query)
        except Exception as e:
            log_chunk_error(
                chunk_key=plan.key,
                chunk_index=plan.chunk_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        # The catalog may answer with a wider neighbourhood than requested
        members = [s for s in raw if plan.contains(s.coords)]

        log_chunk_fetched(
            chunk_key=plan.key,
            chunk_index=plan.chunk_index,
            raw_systems=len(raw),
            kept_systems=len(members),
            latency_ms=(perf_counter() - chunk_start) * 1000.0,
        )
        return Chunk(coord=plan.coord, systems=members, chunk_size=plan.window)
