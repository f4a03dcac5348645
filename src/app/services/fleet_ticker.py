from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable

from src.app.services.fleet_service import FleetSimulationService
from src.domain.models.fleet import FleetState

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]
TickListener = Callable[[FleetState], None]


@dataclass(slots=True)
class FleetTicker:
    """Periodic driver for FleetSimulationService.tick.

    Ticks run one after another on the event loop and never overlap. The
    sleep coroutine is injectable so tests can drive ticks without waiting.
    """

    service: FleetSimulationService
    interval_s: float = 3.0
    elapsed_per_tick_s: float | None = None
    sleep: Sleep = asyncio.sleep
    on_tick: TickListener | None = None
    stop_event: asyncio.Event = field(default_factory=asyncio.Event)

    def stop(self) -> None:
        self.stop_event.set()

    async def run(self, *, max_ticks: int | None = None) -> int:
        """Tick until stopped (or max_ticks reached); return ticks applied."""

        done = 0
        while not self.stop_event.is_set():
            if max_ticks is not None and done >= max_ticks:
                break
            await self.sleep(self.interval_s)
            if self.stop_event.is_set():
                break
            state = await self.service.tick(self.elapsed_per_tick_s)
            done += 1
            if self.on_tick is not None:
                self.on_tick(state)
        logger.info("Fleet ticker stopped after %d ticks", done)
        return done
