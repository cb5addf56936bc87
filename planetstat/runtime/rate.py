"""Shared inter-call pacing for every request sent to the catalog.

Architecture:
    A single RateController instance is created per catalog session and
    passed to every fetch path. It owns:
    - the current inter-call delay, never below its default floor
    - one asyncio.Lock serializing every remote interaction

Design Decisions:
    - Delay-then-call: pacing is applied before a request goes out
    - Multiplicative tuning: success shrinks the delay by a fixed factor,
      a suspected lock doubles it
    - Injectable sleep: tests drive simulated time instead of sleeping
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from ..config import DEFAULT_DELAY, DELAY_PENALTY_FACTOR, DELAY_REWARD_FACTOR

logger = logging.getLogger(__name__)

T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[None]]


class RateController:
    """Adaptive inter-call delay plus the one-call-in-flight lock."""

    def __init__(
        self,
        *,
        default_delay: float = DEFAULT_DELAY,
        reward_factor: float = DELAY_REWARD_FACTOR,
        penalty_factor: float = DELAY_PENALTY_FACTOR,
        sleep: SleepFunc | None = None,
    ) -> None:
        """Initialize rate controller.

        Args:
            default_delay: Starting delay and floor, in seconds
            reward_factor: Multiplier applied on success (< 1)
            penalty_factor: Multiplier applied when the source looks locked (> 1)
            sleep: Coroutine used to wait (defaults to asyncio.sleep)
        """
        if default_delay < 0:
            raise ValueError("default_delay must be >= 0")
        if not 0 < reward_factor <= 1:
            raise ValueError("reward_factor must be in (0, 1]")
        if penalty_factor < 1:
            raise ValueError("penalty_factor must be >= 1")

        self._default_delay = default_delay
        self._delay = default_delay
        self._reward_factor = reward_factor
        self._penalty_factor = penalty_factor
        self._sleep: SleepFunc = sleep or asyncio.sleep
        self._lock = asyncio.Lock()

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def default_delay(self) -> float:
        return self._default_delay

    @property
    def lock(self) -> asyncio.Lock:
        return self._lock

    def reward(self) -> float:
        """Shrink the delay toward the floor after a successful call."""
        previous = self._delay
        self._delay = max(self._default_delay, self._delay * self._reward_factor)
        if self._delay != previous:
            logger.debug(
                "rate_delay_changed",
                extra={"reason": "reward", "previous_delay": previous, "delay": self._delay},
            )
        return self._delay

    def penalize(self) -> float:
        """Double the delay after the source appeared to throttle us."""
        previous = self._delay
        self._delay = self._delay * self._penalty_factor
        logger.info(
            "rate_delay_changed",
            extra={"reason": "penalize", "previous_delay": previous, "delay": self._delay},
        )
        return self._delay

    def reset(self) -> None:
        self._delay = self._default_delay

    async def wait(self) -> None:
        """Sleep the current delay."""
        if self._delay > 0:
            await self._sleep(self._delay)

    async def paced(self, call: Callable[[], Awaitable[T]]) -> T:
        """Run one remote call under the lock, after the current delay.

        The delay is rewarded when ``call`` returns. Exceptions propagate
        unchanged and leave the delay as it was.
        """
        async with self._lock:
            await self.wait()
            result = await call()
            self.reward()
            return result
