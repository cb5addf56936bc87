"""EDSM REST connector.

This connector provides direct access to the EDSM endpoints the library
needs: cube-systems listings, per-system bodies and the reference probe
used to detect a silently throttling API.

Architecture:
    This connector uses the endpoint registry to look up specs and adapters,
    then uses RestRunner to execute requests. It does no pacing of its own;
    callers route every call through a RateController.
"""

from __future__ import annotations

from typing import Any

from planetstat.connectors.edsm.config import (
    BASE_URL,
    DEFAULT_TIMEOUT,
    PROBE_CENTER,
    PROBE_SIZE,
    USER_AGENT,
)
from planetstat.core.geometry import Vec3
from planetstat.models import System, SystemInfo
from planetstat.runtime.rest import RestRunner, RESTTransport

from .endpoints import get_endpoint_adapter, get_endpoint_spec


class EDSMRESTConnector:
    """EDSM REST connector."""

    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize EDSM REST connector.

        Args:
            base_url: API root, overridable for mirrors and tests
            timeout: Total request timeout in seconds
            transport: Prebuilt transport (tests inject a mock here)
        """
        self._transport = transport or RESTTransport(
            base_url=base_url,
            timeout=timeout,
            headers={"User-Agent": USER_AGENT},
        )
        self._runner = RestRunner(self._transport)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from an EDSM endpoint.

        Args:
            endpoint_id: Endpoint identifier ("cube_systems", "bodies")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    async def fetch_cube(self, center: Vec3, size: float) -> tuple[list[System], bool]:
        """Systems in a cube of edge ``size`` centered on ``center``.

        Returns:
            ``(systems, succeeded)`` where ``succeeded`` is False for an empty answer
        """
        systems = await self.fetch(
            "cube_systems",
            {"x": center.x, "y": center.y, "z": center.z, "size": size},
        )
        return systems, bool(systems)

    async def fetch_bodies(self, system_name: str, system_id64: int | None = None) -> SystemInfo | None:
        """Body listing for one system, or None when EDSM has nothing."""
        return await self.fetch(
            "bodies",
            {"system_name": system_name, "system_id64": system_id64},
        )

    async def check_api_locked(self) -> bool:
        """True when the reference query comes back empty."""
        _, succeeded = await self.fetch_cube(PROBE_CENTER, PROBE_SIZE)
        return not succeeded

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> EDSMRESTConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
