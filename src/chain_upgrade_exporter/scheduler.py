"""Fixed-interval driver for the refresh tick."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta
from logging import getLogger

from chain_upgrade_exporter.domain.ports.fetching import UpgradeSourceError

log = getLogger(__name__)

Tick = Callable[[], Awaitable[object]]
Sleep = Callable[[float], Awaitable[None]]


@dataclass(slots=True)
class Scheduler:
    """Run ``tick`` every ``interval`` without ever overlapping two ticks.

    The first tick fires immediately. A tick that overruns the interval is
    followed straight away by the next one; failures are logged and the loop
    carries on.
    """

    tick: Tick
    interval: timedelta
    sleep: Sleep = asyncio.sleep
    monotonic: Callable[[], float] = time.monotonic

    async def run(self, *, max_ticks: int | None = None) -> int:
        period = self.interval.total_seconds()
        if period <= 0:
            raise ValueError("Scheduler interval must be positive")

        ticks = 0
        next_start = self.monotonic()
        while max_ticks is None or ticks < max_ticks:
            delay = next_start - self.monotonic()
            if delay > 0:
                await self.sleep(delay)
            started = self.monotonic()
            await self._run_tick()
            ticks += 1
            next_start = started + period
        return ticks

    async def _run_tick(self) -> None:
        try:
            await self.tick()
        except UpgradeSourceError as exc:
            log.warning("Failed to update upgrade metrics: %s", exc)
        except Exception:
            log.exception("Unexpected error while updating upgrade metrics")


__all__ = ["Scheduler"]
