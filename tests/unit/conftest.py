"""Shared fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from planetstat.core.geometry import Region, Vec3
from planetstat.models import System
from planetstat.runtime.rate import RateController


class FakeCubeSource:
    """In-memory stand-in for the catalog's cube-systems endpoint.

    Answers with every known system inside the requested cube, optionally
    widened by ``margin`` to mimic a catalog returning a larger neighbourhood.
    """

    def __init__(self, systems: list[System], *, margin: float = 0.0) -> None:
        self.systems = systems
        self.margin = margin
        self.calls: list[tuple[Vec3, float]] = []
        self.locked = False
        self.probe_calls = 0

    async def fetch_cube(self, center: Vec3, size: float) -> tuple[list[System], bool]:
        self.calls.append((center, size))
        if self.locked:
            return [], False
        edge = size + 2 * self.margin
        half = edge / 2
        cube = Region(pos=center.sub(Vec3(half, half, half)), size=Vec3(edge, edge, edge))
        found = [s for s in self.systems if cube.contains(s.coords)]
        return found, bool(found)

    async def check_api_locked(self) -> bool:
        self.probe_calls += 1
        return self.locked


class RecordingSleep:
    """Async sleep replacement that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def make_system() -> Callable[..., System]:
    def _make(name: str, x: float, y: float, z: float, id64: int | None = None, star: str = "") -> System:
        return System.model_validate(
            {
                "name": name,
                "id64": id64,
                "coords": {"x": x, "y": y, "z": z},
                "primaryStar": {"type": star, "name": name} if star else [],
            }
        )

    return _make


@pytest.fixture
def cube_source() -> Callable[..., FakeCubeSource]:
    return FakeCubeSource


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def rate(recording_sleep: RecordingSleep) -> RateController:
    return RateController(default_delay=1.0, sleep=recording_sleep)
