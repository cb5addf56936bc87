"""Structured logging for chunked region queries.

This module provides telemetry hooks for the partitioner and the region
query engine, emitting structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import RegionResult

logger = logging.getLogger(__name__)


def log_chunk_plan(
    *,
    total_chunks: int,
    chunk_size: float,
    region_pos: tuple[float, float, float] | None = None,
    region_size: tuple[float, float, float] | None = None,
) -> None:
    """Log chunk plan creation.

    Args:
        total_chunks: Total number of chunks planned
        chunk_size: Grid edge length
        region_pos: Minimum corner of the requested region
        region_size: Size of the requested region
    """
    logger.info(
        "chunk_plan_created",
        extra={
            "total_chunks": total_chunks,
            "chunk_size": chunk_size,
            "region_pos": region_pos,
            "region_size": region_size,
        },
    )


def log_chunk_cache_hit(*, chunk_key: str, chunk_index: int, systems: int) -> None:
    logger.debug(
        "chunk_cache_hit",
        extra={"chunk_key": chunk_key, "chunk_index": chunk_index, "systems": systems},
    )


def log_chunk_fetched(
    *,
    chunk_key: str,
    chunk_index: int,
    raw_systems: int,
    kept_systems: int,
    latency_ms: float | None = None,
) -> None:
    """Log a chunk fetched from the catalog.

    Args:
        chunk_key: Chunk key (``p3n7p0``)
        chunk_index: Zero-based index of the chunk
        raw_systems: Systems returned by the catalog
        kept_systems: Systems left after the membership filter
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "chunk_fetched",
        extra={
            "chunk_key": chunk_key,
            "chunk_index": chunk_index,
            "raw_systems": raw_systems,
            "kept_systems": kept_systems,
            "latency_ms": latency_ms,
        },
    )


def log_chunk_error(
    *,
    chunk_key: str,
    chunk_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log chunk fetch error.

    Args:
        chunk_key: Chunk key of the chunk that failed
        chunk_index: Zero-based index of the chunk that failed
        error_type: Type of error (e.g., "ProviderError", "SourceLockedError")
        error_message: Error message
    """
    logger.error(
        "chunk_error",
        extra={
            "chunk_key": chunk_key,
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_region_query_complete(
    *,
    result: RegionResult,
    total_latency_ms: float | None = None,
) -> None:
    logger.info(
        "region_query_complete",
        extra={
            "chunks_used": result.chunks_used,
            "cache_hits": result.cache_hits,
            "chunks_fetched": result.chunks_fetched,
            "total_systems": result.total_systems,
            "duplicates_dropped": result.duplicates_dropped,
            "total_latency_ms": total_latency_ms,
        },
    )
