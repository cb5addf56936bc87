"""Retry state machine for ambiguous empty responses.

The catalog answers an empty list both when a region really is empty and
when it is silently throttling the caller. RetryingFetcher tells the two
apart by probing a reference query that is known to return data.

State machine (per call):
    WAITING       wait the shared delay, issue the query
    PROBING       query came back empty; wait the delay, run the reference probe
    SUCCEEDED     payload accepted (data, or an empty result the probe vouched for)
    LOCKED_FATAL  retry budget exhausted while the probe kept reporting a lock

Transport errors raised by the query or the probe propagate unchanged and
are never retried.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Generic, TypeVar

from ..config import RETRY_COUNT
from ..core.exceptions import SourceLockedError
from .rate import RateController

logger = logging.getLogger(__name__)

T = TypeVar("T")

QueryFunc = Callable[[], Awaitable[tuple[T, bool]]]
ProbeFunc = Callable[[], Awaitable[bool]]


class FetchState(str, Enum):
    """States of one RetryingFetcher.fetch call."""

    IDLE = "idle"
    WAITING = "waiting"
    PROBING = "probing"
    SUCCEEDED = "succeeded"
    LOCKED_FATAL = "locked_fatal"


class RetryingFetcher(Generic[T]):
    """Wraps remote queries with lock detection and adaptive backoff."""

    def __init__(
        self,
        rate: RateController,
        probe: ProbeFunc,
        *,
        retry_count: int = RETRY_COUNT,
    ) -> None:
        """Initialize fetcher.

        Args:
            rate: Shared controller providing the delay and the call lock
            probe: Coroutine returning True when the source looks locked
            retry_count: Extra attempts allowed after the first one
        """
        if retry_count < 0:
            raise ValueError("retry_count must be >= 0")
        self._rate = rate
        self._probe = probe
        self._retry_count = retry_count
        self._state = FetchState.IDLE
        self._attempts = 0

    @property
    def state(self) -> FetchState:
        """State reached by the most recent fetch."""
        return self._state

    @property
    def attempts(self) -> int:
        """Query attempts made by the most recent fetch."""
        return self._attempts

    @property
    def retry_count(self) -> int:
        return self._retry_count

    async def fetch(self, query: QueryFunc[T]) -> T:
        """Run ``query`` until it succeeds or the source is declared locked.

        Args:
            query: Coroutine returning ``(payload, succeeded)``; ``succeeded``
                is False for an ambiguous empty answer

        Returns:
            The payload of the accepted attempt

        Raises:
            SourceLockedError: After ``retry_count + 1`` locked attempts
            Exception: Whatever ``query`` or the probe raise, unchanged
        """
        async with self._rate.lock:
            self._attempts = 0
            self._state = FetchState.WAITING
            await self._rate.wait()

            while True:
                self._attempts += 1
                payload, succeeded = await query()
                if succeeded:
                    return self._accept(payload)

                self._state = FetchState.PROBING
                await self._rate.wait()
                locked = await self._probe()
                if not locked:
                    # The reference answered normally, so the empty result is real
                    return self._accept(payload)

                delay = self._rate.penalize()
                logger.warning(
                    "source_probe_locked",
                    extra={"attempt": self._attempts, "delay": delay},
                )
                if self._attempts > self._retry_count:
                    self._state = FetchState.LOCKED_FATAL
                    raise SourceLockedError(
                        f"Catalog still locked after {self._attempts} attempts",
                        attempts=self._attempts,
                        delay=delay,
                    )

                self._state = FetchState.WAITING
                await self._rate.wait()

    def _accept(self, payload: T) -> T:
        self._state = FetchState.SUCCEEDED
        self._rate.reward()
        return payload
