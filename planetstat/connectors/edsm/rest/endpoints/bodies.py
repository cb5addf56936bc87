"""EDSM system bodies endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from planetstat.connectors.edsm.config import BODIES_PATH
from planetstat.core.exceptions import ProviderError
from planetstat.models import SystemInfo
from planetstat.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(_params: dict[str, Any]) -> str:
    return BODIES_PATH


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    query: dict[str, Any] = {"systemName": params["system_name"]}
    if params.get("system_id64") is not None:
        query["systemId64"] = params["system_id64"]
    return query


# Endpoint definition
SPEC = RestEndpointSpec(
    id="bodies",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a bodies response into SystemInfo."""

    def parse(self, response: Any, params: dict[str, Any]) -> SystemInfo | None:
        """Parse a bodies response.

        Returns:
            SystemInfo, or None when EDSM answers ``{}`` / ``[]`` (unknown system)
        """
        if not response:
            return None
        if not isinstance(response, dict):
            raise ProviderError(f"Invalid bodies response: expected dict, got {type(response).__name__}")
        if "name" not in response:
            response = {**response, "name": params["system_name"]}
        try:
            return SystemInfo.model_validate(response)
        except ValueError as e:
            raise ProviderError(f"Invalid bodies payload for {params['system_name']!r}: {e}") from e
