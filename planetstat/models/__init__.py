"""Data models for catalog records.

Architecture:
    This module exports the Pydantic v2 models used throughout the library.
    Models are immutable (frozen=True) and accept both the catalog's
    camelCase field names and snake_case names.

Model Categories:
    - Listings: System, PrimaryStar
    - Bodies: Body, SystemInfo
    - Cache units: Chunk
"""

from .body import TERRAFORM_CANDIDATE, Body, SystemInfo, system_info_key
from .chunk import Chunk
from .system import Identity, PrimaryStar, System, identity_of

__all__ = [
    "Body",
    "Chunk",
    "Identity",
    "PrimaryStar",
    "System",
    "SystemInfo",
    "TERRAFORM_CANDIDATE",
    "identity_of",
    "system_info_key",
]
