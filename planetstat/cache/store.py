"""Directory-backed, versioned key-value cache.

Architecture:
    Each entry lives in ``<dir>/<key>.json.gz`` as a gzip-compressed JSON
    envelope holding a timestamp, a version and the serialized payload.
    Keys are hierarchical (``chunk/p3n7p0``), the first segment naming a
    sub-directory created up front for every registered cache type.

Design Decisions:
    - Version check on read: a mismatch deletes the entry and reports a miss
    - Non-fatal errors: every read/write failure is logged and degrades to a
      miss, so a broken cache only costs a re-fetch
    - Replace-on-write: payloads are written to a temporary file and moved
      into place with ``os.replace``
"""

from __future__ import annotations

import gzip
import logging
import os
import tempfile
import time
import zlib
from collections.abc import Iterable
from contextlib import suppress
from pathlib import Path
from typing import Protocol, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ..config import CACHE_MAX_AGE, CACHE_TYPES
from ..core.exceptions import CacheError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class Cacheable(Protocol):
    """Anything the store can persist: a key plus JSON serialization."""

    @property
    def cache_key(self) -> str: ...

    def model_dump_json(self, *, by_alias: bool = ...) -> str: ...


class CacheEnvelope(BaseModel):
    """On-disk wrapper around a serialized payload."""

    timestamp: int
    version: int
    content: str

    model_config = ConfigDict(frozen=True)


class CacheStore:
    """Versioned JSON cache rooted at a directory."""

    def __init__(
        self,
        dir_name: str | os.PathLike[str],
        *,
        cache_types: Iterable[str] = CACHE_TYPES,
        max_age: int = CACHE_MAX_AGE,
    ) -> None:
        """Prepare the cache directory tree.

        Args:
            dir_name: Root directory, created if missing
            cache_types: Sub-directories to create (first key segments)
            max_age: Age policy in seconds; stored for callers, not enforced

        Raises:
            CacheError: If a required path exists and is not a directory
        """
        self.dir_name = Path(dir_name)
        self.max_age = max_age

        _ensure_dir(self.dir_name)
        for type_name in cache_types:
            _ensure_dir(self.dir_name / type_name)

    def path_for(self, key: str) -> Path:
        return self.dir_name / f"{key}.json.gz"

    def store(self, version: int, item: Cacheable, *, key: str | None = None) -> bool:
        """Persist ``item`` under ``key`` (defaults to its cache key).

        Returns:
            True if the entry was written, False if it was skipped
        """
        key = key or item.cache_key
        try:
            content = item.model_dump_json(by_alias=True)
        except (TypeError, ValueError) as e:
            logger.warning("cache_serialize_failed", extra={"key": key, "error": str(e)})
            return False

        envelope = CacheEnvelope(timestamp=int(time.time()), version=version, content=content)
        payload = gzip.compress(envelope.model_dump_json().encode("utf-8"))

        path = self.path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp-", suffix=".gz")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(payload)
                os.replace(tmp_name, path)
            except BaseException:
                with suppress(OSError):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            logger.warning("cache_write_failed", extra={"key": key, "error": str(e)})
            return False

        logger.debug("cache_stored", extra={"key": key, "version": version})
        return True

    def load_envelope(self, key: str) -> CacheEnvelope | None:
        """Read the raw envelope for ``key`` without checking its version."""
        path = self.path_for(key)
        try:
            raw = gzip.decompress(path.read_bytes())
        except FileNotFoundError:
            return None
        except (OSError, EOFError, zlib.error) as e:
            logger.warning("cache_read_failed", extra={"key": key, "error": str(e)})
            self.delete(key)
            return None

        try:
            return CacheEnvelope.model_validate_json(raw)
        except PydanticValidationError as e:
            logger.warning("cache_envelope_invalid", extra={"key": key, "error": str(e)})
            self.delete(key)
            return None

    def find(self, version: int, key: str, model: type[M]) -> M | None:
        """Load the entry for ``key`` as ``model``.

        A stale version, an unreadable file or a payload that no longer
        validates all report a miss and delete the entry.
        """
        envelope = self.load_envelope(key)
        if envelope is None:
            return None

        if envelope.version != version:
            logger.info(
                "cache_version_mismatch",
                extra={"key": key, "stored_version": envelope.version, "version": version},
            )
            self.delete(key)
            return None

        try:
            return model.model_validate_json(envelope.content)
        except PydanticValidationError as e:
            logger.warning("cache_content_invalid", extra={"key": key, "error": str(e)})
            self.delete(key)
            return None

    def delete(self, key: str) -> None:
        with suppress(OSError):
            self.path_for(key).unlink()


def _ensure_dir(path: Path) -> None:
    if path.exists():
        if not path.is_dir():
            raise CacheError(f"Cache path is not a directory: {path}")
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CacheError(f"Cannot create cache directory {path}: {e}") from e
