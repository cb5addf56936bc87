"""Custom exception hierarchy."""

from __future__ import annotations


class PlanetStatError(Exception):
    """Base exception for all library errors."""

    pass


class ProviderError(PlanetStatError):
    """Error talking to the remote catalog."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(ProviderError):
    """Catalog answered with an explicit rate limit status."""

    def __init__(self, message: str, retry_after: int = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class SourceLockedError(ProviderError):
    """Catalog appears to be throttling every request.

    Raised once the retry budget is exhausted while the reference probe keeps
    coming back empty. Callers are expected to abort the whole run.
    """

    def __init__(self, message: str, attempts: int = 0, delay: float | None = None) -> None:
        super().__init__(message)
        self.attempts = attempts
        self.delay = delay


class SystemNotFoundError(ProviderError):
    """Catalog returned no body data for a system."""

    def __init__(self, message: str, system_name: str | None = None) -> None:
        super().__init__(message, status_code=None)
        self.system_name = system_name


class CacheError(PlanetStatError):
    """Cache directory cannot be used."""

    pass


class ValidationError(PlanetStatError):
    """Input validation failure."""

    pass
