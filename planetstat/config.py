"""Shared planetstat constants and defaults.

This module centralizes grid geometry, pacing and cache settings so the
runtime components can stay small and take keyword overrides instead of
reading globals.
"""

from __future__ import annotations

import os
from pathlib import Path

# Grid edge length of one cached chunk (light years)
CHUNK_SIZE = 10

# Largest cube the catalog answers in one request. Policy hint only,
# the partitioner does not enforce it.
MAX_REGION_SIZE = 200

# Inter-call pacing (seconds)
DEFAULT_DELAY = 1.0
DELAY_REWARD_FACTOR = 0.8
DELAY_PENALTY_FACTOR = 2.0

# Query attempts allowed after the first one while the source looks locked
RETRY_COUNT = 5

# Consecutive empty body lookups tolerated before probing for a lock
EMPTY_RESULT_LIMIT = 20

# Bump to invalidate entries written by older code
CHUNK_CACHE_VERSION = 1
SYSTEM_INFO_CACHE_VERSION = 1

# Carried in the store for reference; nothing evicts on age
CACHE_MAX_AGE = 3600 * 24 * 28 * 3

CACHE_TYPES = ("chunk", "system")

CACHE_DIR_ENV = "PLANETSTAT_CACHE_DIR"


def default_cache_dir() -> Path:
    """Resolve the cache directory used when none is given.

    Order: ``PLANETSTAT_CACHE_DIR``, then the Windows profile layout when
    ``USERPROFILE`` is set, then ``~/.cache/EDSMCache``.
    """
    override = os.environ.get(CACHE_DIR_ENV)
    if override:
        return Path(override)

    userprofile = os.environ.get("USERPROFILE")
    if userprofile:
        return Path(userprofile) / "AppData" / "Local" / "IgaguriMK" / "EDSMCache"

    return Path.home() / ".cache" / "EDSMCache"
