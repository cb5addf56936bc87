"""REST transport delegating to HTTPClient."""

from __future__ import annotations

from typing import Any

from .http_client import HTTPClient


class RESTTransport:
    """Thin transport used by RestRunner; swap it out in tests."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, headers=headers)

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.get(path, params=params, headers=headers)

    async def close(self) -> None:
        await self._http.close()
