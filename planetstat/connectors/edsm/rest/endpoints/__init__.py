"""EDSM REST endpoint registry."""

from __future__ import annotations

from planetstat.runtime.rest import ResponseAdapter, RestEndpointSpec

from .bodies import SPEC as BodiesSpec  # noqa: N811
from .bodies import Adapter as BodiesAdapter
from .cube_systems import SPEC as CubeSystemsSpec  # noqa: N811
from .cube_systems import Adapter as CubeSystemsAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "cube_systems": (CubeSystemsSpec, CubeSystemsAdapter),
    "bodies": (BodiesSpec, BodiesAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    return list(_ENDPOINT_REGISTRY.keys())


__all__ = [
    "get_endpoint_adapter",
    "get_endpoint_spec",
    "list_endpoints",
]
