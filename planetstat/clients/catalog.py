"""High-level catalog session tying the connector, pacing and cache together.

A SystemCatalog owns exactly one RateController, so every request it makes
(cube queries, body lookups, lock probes) shares the same delay and the
same one-call-in-flight lock.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from ..cache import CacheStore, ChunkCache
from ..config import (
    CHUNK_CACHE_VERSION,
    CHUNK_SIZE,
    RETRY_COUNT,
    SYSTEM_INFO_CACHE_VERSION,
    default_cache_dir,
)
from ..connectors.edsm import EDSMRESTConnector
from ..core.exceptions import SystemNotFoundError
from ..core.geometry import Region
from ..models import System, SystemInfo, identity_of, system_info_key
from ..runtime.chunking import ChunkPartitioner, RegionQueryEngine, RegionResult
from ..runtime.rate import RateController
from ..runtime.retry import RetryingFetcher

logger = logging.getLogger(__name__)


class SystemCatalog:
    """Cached, rate-limited access to star systems and their bodies."""

    def __init__(
        self,
        connector: Any | None = None,
        *,
        cache_dir: str | os.PathLike[str] | None = None,
        store: CacheStore | None = None,
        rate: RateController | None = None,
        retry_count: int = RETRY_COUNT,
        chunk_size: float = CHUNK_SIZE,
        chunk_version: int = CHUNK_CACHE_VERSION,
        system_info_version: int = SYSTEM_INFO_CACHE_VERSION,
    ) -> None:
        """Initialize catalog.

        Args:
            connector: Source with ``fetch_cube``, ``fetch_bodies`` and
                ``check_api_locked`` (defaults to EDSMRESTConnector)
            cache_dir: Cache root (defaults to ``default_cache_dir()``)
            store: Prebuilt cache store, takes precedence over cache_dir
            rate: Shared rate controller (defaults to a new one)
            retry_count: Extra attempts while the API looks locked
            chunk_size: Grid edge length
            chunk_version: Cache version for chunk entries
            system_info_version: Cache version for body listings

        Raises:
            CacheError: If the cache directory cannot be used
        """
        self._connector = connector or EDSMRESTConnector()
        self._store = store or CacheStore(cache_dir if cache_dir is not None else default_cache_dir())
        self._rate = rate or RateController()
        self._system_info_version = system_info_version
        self._fetcher: RetryingFetcher[list[System]] = RetryingFetcher(
            self._rate,
            self._connector.check_api_locked,
            retry_count=retry_count,
        )
        self._engine = RegionQueryEngine(
            self._connector,
            self._fetcher,
            ChunkCache(self._store),
            partitioner=ChunkPartitioner(chunk_size),
            version=chunk_version,
        )

    @property
    def rate(self) -> RateController:
        return self._rate

    @property
    def engine(self) -> RegionQueryEngine:
        return self._engine

    @property
    def store(self) -> CacheStore:
        return self._store

    async def get_systems(self, region: Region) -> list[System]:
        """Systems inside ``region``, deduplicated, in chunk order."""
        return await self._engine.query_region(region)

    async def query(self, region: Region) -> RegionResult:
        return await self._engine.execute(region)

    async def get_system_info(self, system: System | str) -> SystemInfo:
        """Body listing for a system, served from the cache when possible.

        Raises:
            SystemNotFoundError: If the catalog has no body data for the system
            ProviderError: On transport failures
        """
        if isinstance(system, System):
            name, id64, identity = system.name, system.id64, system.identity
        else:
            name, id64, identity = system, None, identity_of(None, None, system)

        key = system_info_key(identity)
        cached = self._store.find(self._system_info_version, key, SystemInfo)
        if cached is not None:
            return cached

        info = await self._rate.paced(lambda: self._connector.fetch_bodies(name, id64))
        if info is None:
            raise SystemNotFoundError(f"No body data for system {name!r}", system_name=name)

        # Keyed by the identity we were asked for so repeat lookups hit
        self._store.store(self._system_info_version, info, key=key)
        return info

    async def check_api_locked(self) -> bool:
        """Run the reference probe through the shared pacing."""
        return await self._rate.paced(self._connector.check_api_locked)

    async def close(self) -> None:
        await self._connector.close()

    async def __aenter__(self) -> SystemCatalog:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
