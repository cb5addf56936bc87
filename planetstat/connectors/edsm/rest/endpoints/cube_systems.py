"""EDSM cube-systems endpoint definition and adapter.

Returns every known system inside a cube of edge ``size`` centered on
``(x, y, z)``. An empty list is ambiguous: either the cube is empty or the
API is rate limiting the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from planetstat.connectors.edsm.config import CUBE_SYSTEMS_PATH, MAX_CUBE_SIZE
from planetstat.core.exceptions import ProviderError, ValidationError
from planetstat.models import System
from planetstat.runtime.rest import ResponseAdapter, RestEndpointSpec

logger = logging.getLogger(__name__)


def build_path(_params: dict[str, Any]) -> str:
    return CUBE_SYSTEMS_PATH


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for cube-systems."""
    size = float(params["size"])
    if not 0 < size <= MAX_CUBE_SIZE:
        raise ValidationError(f"cube size must be in (0, {MAX_CUBE_SIZE}], got {size}")
    return {
        "x": params["x"],
        "y": params["y"],
        "z": params["z"],
        "size": size,
        "showId": 1,
        "showCoordinates": 1,
        "showPermit": 1,
        "showPrimaryStar": 1,
    }


# Endpoint definition
SPEC = RestEndpointSpec(
    id="cube_systems",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing cube-systems responses into System lists."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[System]:
        """Parse a cube-systems response.

        Args:
            response: Decoded JSON (a list, or ``{}`` / ``[]`` when empty)
            params: Request parameters

        Returns:
            Systems in response order; entries without coordinates are skipped
        """
        if not response:
            return []
        if not isinstance(response, list):
            raise ProviderError(f"Invalid cube-systems response: expected list, got {type(response).__name__}")

        systems: list[System] = []
        for item in response:
            try:
                systems.append(System.model_validate(item))
            except PydanticValidationError as e:
                logger.debug(
                    "cube_system_skipped",
                    extra={"item_name": item.get("name") if isinstance(item, dict) else None, "error": str(e)},
                )
        return systems
