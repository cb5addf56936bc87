"""Unit tests for the planet survey."""

from __future__ import annotations

import pytest

from planetstat.core import SourceLockedError, SystemNotFoundError
from planetstat.models import SystemInfo
from planetstat.stats import PlanetRow, survey_planets


class FakeCatalog:
    """Catalog stub answering body lookups from a dict."""

    def __init__(self, infos: dict[str, dict], *, locked: bool = False) -> None:
        self.infos = infos
        self.locked = locked
        self.lookups: list[str] = []
        self.probes = 0

    async def get_system_info(self, system):
        self.lookups.append(system.name)
        payload = self.infos.get(system.name)
        if payload is None:
            raise SystemNotFoundError("missing", system_name=system.name)
        return SystemInfo.model_validate(payload)

    async def check_api_locked(self):
        self.probes += 1
        return self.locked


def _star(name, sub_type="K (Yellow-Orange) Star", temp=4500.0, main=True):
    return {"name": name, "type": "Star", "subType": sub_type, "surfaceTemperature": temp, "isMainStar": main}


def _planet(name, distance, state=None):
    return {"name": name, "type": "Planet", "distanceToArrival": distance, "terraformingState": state}


async def _collect(catalog, systems, **kwargs) -> list[PlanetRow]:
    return [row async for row in survey_planets(catalog, systems, **kwargs)]


class TestSurveyPlanets:
    """Test survey_planets row generation."""

    @pytest.mark.asyncio
    async def test_rows_for_single_star_system(self, make_system):
        catalog = FakeCatalog(
            {
                "Alpha": {
                    "name": "Alpha",
                    "bodies": [
                        _star("Alpha A"),
                        _planet("Alpha 1", 12.5, "Candidate for terraforming"),
                        _planet("Alpha 2", 300.0, "Not terraformable"),
                    ],
                }
            }
        )

        rows = await _collect(catalog, [make_system("Alpha", 0, 0, 0)])

        assert rows == [
            PlanetRow("Alpha", "Alpha 1", "K (Yellow-Orange) Star", "K", 4500.0, 12.5, True),
            PlanetRow("Alpha", "Alpha 2", "K (Yellow-Orange) Star", "K", 4500.0, 300.0, False),
        ]

    @pytest.mark.asyncio
    async def test_multi_star_systems_skipped(self, make_system):
        catalog = FakeCatalog(
            {
                "Binary": {
                    "name": "Binary",
                    "bodies": [_star("Binary A"), _star("Binary B", main=False), _planet("Binary 1", 5.0)],
                },
                "Empty": {"name": "Empty", "bodies": [_planet("Empty 1", 5.0)]},
            }
        )

        rows = await _collect(catalog, [make_system("Binary", 0, 0, 0), make_system("Empty", 1, 0, 0)])

        assert rows == []

    @pytest.mark.asyncio
    async def test_missing_systems_skipped_below_limit(self, make_system):
        catalog = FakeCatalog({"Alpha": {"name": "Alpha", "bodies": [_star("Alpha A"), _planet("Alpha 1", 1.0)]}})
        systems = [make_system("Ghost", 0, 0, 0), make_system("Alpha", 1, 0, 0)]

        rows = await _collect(catalog, systems, empty_result_limit=3)

        assert [r.planet_name for r in rows] == ["Alpha 1"]
        assert catalog.probes == 0

    @pytest.mark.asyncio
    async def test_probe_after_consecutive_misses_unlocked(self, make_system):
        catalog = FakeCatalog({})
        systems = [make_system(f"Ghost {i}", i, 0, 0) for i in range(5)]

        rows = await _collect(catalog, systems, empty_result_limit=2)

        assert rows == []
        assert catalog.probes == 2
        assert len(catalog.lookups) == 5

    @pytest.mark.asyncio
    async def test_probe_after_consecutive_misses_locked(self, make_system):
        catalog = FakeCatalog({}, locked=True)
        systems = [make_system(f"Ghost {i}", i, 0, 0) for i in range(5)]

        with pytest.raises(SourceLockedError) as exc_info:
            await _collect(catalog, systems, empty_result_limit=2)

        assert exc_info.value.attempts == 2
        assert catalog.lookups == ["Ghost 0", "Ghost 1"]

    @pytest.mark.asyncio
    async def test_hit_resets_miss_counter(self, make_system):
        catalog = FakeCatalog({"Alpha": {"name": "Alpha", "bodies": [_star("Alpha A")]}}, locked=True)
        systems = [
            make_system("Ghost 0", 0, 0, 0),
            make_system("Alpha", 1, 0, 0),
            make_system("Ghost 1", 2, 0, 0),
        ]

        rows = await _collect(catalog, systems, empty_result_limit=2)

        assert rows == []
        assert catalog.probes == 0
