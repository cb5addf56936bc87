"""On-disk cache for chunks and system body listings."""

from .chunks import ChunkCache
from .store import CacheEnvelope, Cacheable, CacheStore

__all__ = [
    "CacheEnvelope",
    "CacheStore",
    "Cacheable",
    "ChunkCache",
]
