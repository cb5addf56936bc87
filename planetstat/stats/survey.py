"""Per-planet statistics over the systems of a region."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config import EMPTY_RESULT_LIMIT
from ..core.exceptions import SourceLockedError, SystemNotFoundError
from ..models import Body, System
from .star_types import short_type

if TYPE_CHECKING:
    from ..clients.catalog import SystemCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanetRow:
    """One planet of a single-star system, with its star's data."""

    system_name: str
    planet_name: str
    star_sub_type: str
    star_type: str
    star_temperature: float | None
    distance: float | None
    terraformable: bool


def is_terraform_candidate(body: Body) -> bool:
    return body.is_terraform_candidate


async def survey_planets(
    catalog: SystemCatalog,
    systems: Iterable[System],
    *,
    empty_result_limit: int = EMPTY_RESULT_LIMIT,
) -> AsyncIterator[PlanetRow]:
    """Yield a PlanetRow for every planet of every single-star system.

    Systems without body data are skipped. After ``empty_result_limit``
    consecutive misses the catalog is probed; a locked catalog ends the
    survey with SourceLockedError, otherwise the counter starts over.

    Raises:
        SourceLockedError: If the catalog looks locked
        ProviderError: On transport failures
    """
    empty_count = 0
    for system in systems:
        try:
            info = await catalog.get_system_info(system)
        except SystemNotFoundError:
            empty_count += 1
            logger.info("system_info_empty", extra={"system": system.name, "empty_count": empty_count})
            if empty_count >= empty_result_limit:
                if await catalog.check_api_locked():
                    raise SourceLockedError(
                        f"Catalog locked after {empty_count} empty body lookups",
                        attempts=empty_count,
                    ) from None
                empty_count = 0
            continue
        empty_count = 0

        # Multi-star systems are skipped, planets cannot be attributed
        if info.star_count() != 1:
            continue

        star = info.stars()[0]
        for body in info.planets():
            yield PlanetRow(
                system_name=info.name,
                planet_name=body.name,
                star_sub_type=star.sub_type,
                star_type=short_type(star.sub_type),
                star_temperature=star.surface_temperature,
                distance=body.distance_to_arrival,
                terraformable=is_terraform_candidate(body),
            )
