"""Chunked spatial query layer.

This module splits a region query into fixed-size grid chunks, serves each
chunk from the cache or the catalog, and merges the results.

Architecture:
    The chunking layer consists of:
    - definitions.py: Chunk plan and result structures (ChunkPlan, RegionResult)
    - planners.py: Chunk planning logic (which grid cells cover a region)
    - executors.py: Region execution (cache lookup, fetch, filter, dedup)
    - telemetry.py: Structured logging

Usage:
    Build a RegionQueryEngine with a catalog source, a RetryingFetcher and an
    optional ChunkCache, then call ``query_region(region)``.
"""

from __future__ import annotations

from .definitions import ChunkPlan, RegionResult
from .executors import RegionQueryEngine, SystemSource
from .planners import ChunkPartitioner

__all__ = [
    "ChunkPlan",
    "RegionResult",
    "ChunkPartitioner",
    "RegionQueryEngine",
    "SystemSource",
]
