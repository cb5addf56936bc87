"""Core components."""

from .exceptions import (
    CacheError,
    PlanetStatError,
    ProviderError,
    RateLimitError,
    SourceLockedError,
    SystemNotFoundError,
    ValidationError,
)
from .geometry import ONE, ZERO, ChunkCoord, Region, Vec3

__all__ = [
    "Vec3",
    "Region",
    "ChunkCoord",
    "ONE",
    "ZERO",
    "PlanetStatError",
    "ProviderError",
    "RateLimitError",
    "SourceLockedError",
    "SystemNotFoundError",
    "CacheError",
    "ValidationError",
]
