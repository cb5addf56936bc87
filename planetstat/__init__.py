"""planetstat - cached, rate-limited EDSM region queries and planet statistics."""

from .cache import CacheStore, ChunkCache
from .clients import SystemCatalog
from .connectors.edsm import EDSMRESTConnector
from .core import (
    ONE,
    ZERO,
    CacheError,
    ChunkCoord,
    PlanetStatError,
    ProviderError,
    RateLimitError,
    Region,
    SourceLockedError,
    SystemNotFoundError,
    ValidationError,
    Vec3,
)
from .models import Body, Chunk, PrimaryStar, System, SystemInfo
from .runtime import (
    ChunkPartitioner,
    ChunkPlan,
    FetchState,
    RateController,
    RegionQueryEngine,
    RegionResult,
    RetryingFetcher,
)

__version__ = "0.1.0"

__all__ = [
    # Geometry
    "Vec3",
    "Region",
    "ChunkCoord",
    "ONE",
    "ZERO",
    # Models
    "Body",
    "Chunk",
    "PrimaryStar",
    "System",
    "SystemInfo",
    # Runtime
    "ChunkPartitioner",
    "ChunkPlan",
    "FetchState",
    "RateController",
    "RegionQueryEngine",
    "RegionResult",
    "RetryingFetcher",
    # Cache
    "CacheStore",
    "ChunkCache",
    # Clients
    "EDSMRESTConnector",
    "SystemCatalog",
    # Exceptions
    "PlanetStatError",
    "ProviderError",
    "RateLimitError",
    "SourceLockedError",
    "SystemNotFoundError",
    "CacheError",
    "ValidationError",
]
