"""Vector, region and chunk coordinate primitives.

Architecture:
    All types are frozen dataclasses so they can be hashed, shared between
    chunk plans and embedded in pydantic models as field types.

Key Types:
    - Vec3: Immutable 3-D point / size
    - Region: Axis-aligned half-open box [pos, pos + size)
    - ChunkCoord: Integer cell index on the fixed chunk grid
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from ..config import CHUNK_SIZE
from .exceptions import ValidationError

_KEY_RE = re.compile(r"([pn])(\d+)([pn])(\d+)([pn])(\d+)")


@dataclass(frozen=True)
class Vec3:
    """Immutable 3-D vector."""

    x: float
    y: float
    z: float

    def add(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


ZERO = Vec3(0.0, 0.0, 0.0)
ONE = Vec3(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Region:
    """Axis-aligned query cube covering ``[pos, pos + size)`` on each axis."""

    pos: Vec3
    size: Vec3

    def __post_init__(self) -> None:
        if self.size.x < 0 or self.size.y < 0 or self.size.z < 0:
            raise ValidationError(f"Region size must be non-negative, got {self.size}")

    @classmethod
    def from_center(cls, center: Vec3, size: Vec3) -> Region:
        """Build a region of edge ``size`` centered on ``center``.

        Examples:
            >>> Region.from_center(Vec3(0, 0, 0), ONE.scale(20)).pos
            Vec3(x=-10.0, y=-10.0, z=-10.0)
        """
        return cls(pos=center.sub(size.scale(0.5)), size=size)

    @property
    def end(self) -> Vec3:
        return self.pos.add(self.size)

    @property
    def center(self) -> Vec3:
        return self.pos.add(self.size.scale(0.5))

    def contains(self, point: Vec3) -> bool:
        end = self.end
        return (
            self.pos.x <= point.x < end.x
            and self.pos.y <= point.y < end.y
            and self.pos.z <= point.z < end.z
        )


def _render_axis(value: int) -> str:
    return f"n{-value}" if value < 0 else f"p{value}"


def _parse_axis(sign: str, digits: str) -> int:
    value = int(digits)
    return -value if sign == "n" else value


@dataclass(frozen=True, order=True)
class ChunkCoord:
    """Integer index of one cell of the chunk grid.

    Two points share a coordinate iff they fall in the same grid cell. The
    string ``key`` prefixes every axis with its sign (``p`` or ``n``) so it can
    address a cache file without collisions between signs.
    """

    x: int
    y: int
    z: int

    @classmethod
    def from_point(cls, point: Vec3, chunk_size: float = CHUNK_SIZE) -> ChunkCoord:
        return cls(
            math.floor(point.x / chunk_size),
            math.floor(point.y / chunk_size),
            math.floor(point.z / chunk_size),
        )

    @classmethod
    def parse_key(cls, key: str) -> ChunkCoord:
        """Parse a key produced by ``ChunkCoord.key``.

        Examples:
            >>> ChunkCoord.parse_key("p3n7p0")
            ChunkCoord(x=3, y=-7, z=0)

        Raises:
            ValidationError: If the key is malformed
        """
        match = _KEY_RE.fullmatch(key)
        if match is None:
            raise ValidationError(f"Invalid chunk key: {key!r}")
        sx, dx, sy, dy, sz, dz = match.groups()
        return cls(_parse_axis(sx, dx), _parse_axis(sy, dy), _parse_axis(sz, dz))

    @property
    def key(self) -> str:
        return _render_axis(self.x) + _render_axis(self.y) + _render_axis(self.z)

    @property
    def cache_key(self) -> str:
        return f"chunk/{self.key}"

    def origin(self, chunk_size: float = CHUNK_SIZE) -> Vec3:
        return Vec3(self.x * chunk_size, self.y * chunk_size, self.z * chunk_size)

    def center(self, chunk_size: float = CHUNK_SIZE) -> Vec3:
        half = chunk_size / 2
        return self.origin(chunk_size).add(Vec3(half, half, half))

    def bounds(self, chunk_size: float = CHUNK_SIZE) -> Region:
        return Region(pos=self.origin(chunk_size), size=ONE.scale(chunk_size))

    def contains(self, point: Vec3, chunk_size: float = CHUNK_SIZE) -> bool:
        return ChunkCoord.from_point(point, chunk_size) == self
