"""HTTP client helper."""

from __future__ import annotations

from typing import Any

import aiohttp

from ...core.exceptions import ProviderError, RateLimitError


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = headers or {}
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request returning decoded JSON.

        Raises:
            RateLimitError: On HTTP 429
            ProviderError: On any other HTTP or network failure
        """
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                if response.status == 429:
                    retry_after = response.headers.get("Retry-After", "60")
                    raise RateLimitError(
                        f"Rate limited by {url}",
                        retry_after=int(retry_after) if retry_after.isdigit() else 60,
                    )
                response.raise_for_status()
                # EDSM does not always label JSON bodies as application/json
                return await response.json(content_type=None)
        except aiohttp.ClientResponseError as e:
            raise ProviderError(f"HTTP {e.status} from {url}: {e.message}", status_code=e.status) from e
        except (aiohttp.ClientError, TimeoutError) as e:
            raise ProviderError(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise ProviderError(f"Invalid JSON from {url}: {e}") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
