from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass, field

from src.app.ports.output import IFleetConfigRepository
from src.domain.algorithms import fleet_simulation
from src.domain.exceptions import UnknownVehicle
from src.domain.models.fleet import (
    FleetState,
    SimulationSettings,
    TransitRoute,
    Vehicle,
    VehicleConfig,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FleetSimulationService:
    """Owns the live fleet state and hands out immutable snapshots.

    There is a single writer: every tick builds a new FleetState and swaps
    it in under the lock, so readers never see a half-updated fleet.
    """

    config_repository: IFleetConfigRepository
    settings: SimulationSettings = field(default_factory=SimulationSettings)
    rng: random.Random = field(default_factory=random.Random)

    _routes: tuple[TransitRoute, ...] = field(default=(), init=False, repr=False)
    _roster: tuple[VehicleConfig, ...] = field(default=(), init=False, repr=False)
    _state: FleetState = field(init=False, repr=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        # Configuration problems must surface at startup, not on first request.
        self._routes = self.config_repository.load_routes()
        self._roster = self.config_repository.load_vehicles()
        self._state = fleet_simulation.initialize(
            self._routes, self._roster, self.settings
        )
        logger.info(
            "Fleet initialized: %d routes, %d vehicles",
            len(self._routes),
            len(self._roster),
        )

    @property
    def state(self) -> FleetState:
        return self._state

    @property
    def routes(self) -> tuple[TransitRoute, ...]:
        return self._routes

    async def tick(self, elapsed_s: float | None = None) -> FleetState:
        elapsed = self.settings.tick_seconds if elapsed_s is None else elapsed_s
        async with self._lock:
            self._state = fleet_simulation.advance(self.state, elapsed, rng=self.rng)
            return self._state

    async def reset(self) -> FleetState:
        async with self._lock:
            self._state = fleet_simulation.initialize(
                self._routes, self._roster, self.settings
            )
            logger.info("Fleet reset to initial roster")
            return self._state

    def snapshot(self, *, route_ids: set[str] | None = None) -> tuple[Vehicle, ...]:
        vehicles = fleet_simulation.snapshot(self.state)
        if route_ids:
            vehicles = tuple(v for v in vehicles if v.route_id in route_ids)
        return vehicles

    def get_vehicle(self, vehicle_id: str) -> Vehicle:
        for v in self.state.vehicles:
            if v.vehicle_id == vehicle_id:
                return v
        raise UnknownVehicle(vehicle_id)

    def search_vehicles(self, term: str) -> tuple[Vehicle, ...]:
        """Case-insensitive substring search on vehicle id or route id."""

        needle = term.strip().lower()
        if not needle:
            return self.snapshot()
        return tuple(
            v
            for v in self.state.vehicles
            if needle in v.vehicle_id.lower() or needle in v.route_id.lower()
        )
