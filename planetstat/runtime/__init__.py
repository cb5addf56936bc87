"""Runtime: pacing, retries, chunked region queries and REST plumbing."""

from .chunking import ChunkPartitioner, ChunkPlan, RegionQueryEngine, RegionResult
from .rate import RateController
from .retry import FetchState, RetryingFetcher

__all__ = [
    "ChunkPartitioner",
    "ChunkPlan",
    "FetchState",
    "RateController",
    "RegionQueryEngine",
    "RegionResult",
    "RetryingFetcher",
]
