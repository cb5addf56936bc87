"""Chunk-level view over the cache store."""

from __future__ import annotations

import logging

from ..config import CHUNK_SIZE
from ..core.geometry import ChunkCoord
from ..models import Chunk
from .store import CacheStore

logger = logging.getLogger(__name__)


class ChunkCache:
    """Stores and loads one ``Chunk`` per grid cell.

    Lookups never raise: a missing, corrupt or stale entry is a miss. An
    entry cut from a different grid size is stale.
    """

    def __init__(self, store: CacheStore) -> None:
        self._store = store

    @property
    def store_backend(self) -> CacheStore:
        return self._store

    def store(self, version: int, chunk: Chunk) -> bool:
        return self._store.store(version, chunk)

    def find(self, version: int, key: str, chunk_size: float = CHUNK_SIZE) -> Chunk | None:
        """Load the chunk for a ``ChunkCoord.key`` string (``"p3n7p0"``)."""
        cache_key = f"chunk/{key}"
        chunk = self._store.find(version, cache_key, Chunk)
        if chunk is None:
            return None
        if chunk.key != key:
            # Entry written under the wrong name
            self._store.delete(cache_key)
            return None
        if chunk.chunk_size != chunk_size:
            logger.info(
                "chunk_size_mismatch",
                extra={"key": cache_key, "stored_chunk_size": chunk.chunk_size, "chunk_size": chunk_size},
            )
            self._store.delete(cache_key)
            return None
        return chunk

    def find_coord(self, version: int, coord: ChunkCoord, chunk_size: float = CHUNK_SIZE) -> Chunk | None:
        return self.find(version, coord.key, chunk_size)
