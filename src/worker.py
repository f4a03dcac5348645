from __future__ import annotations

import asyncio
import logging
import os

from src.adapters.api.dependencies import get_fleet_config_repository
from src.adapters.settings import (
    env_bool,
    rng_from_env,
    simulation_settings_from_env,
    tick_interval_from_env,
)
from src.app.services.fleet_service import FleetSimulationService
from src.app.services.fleet_ticker import FleetTicker
from src.domain.models.fleet import FleetState, VehicleStatus

logger = logging.getLogger("transit.worker")


def _log_state(state: FleetState) -> None:
    arrived = sum(1 for v in state.vehicles if v.has_arrived)
    delayed = sum(1 for v in state.vehicles if v.status is VehicleStatus.DELAYED)
    logger.info(
        "tick=%d elapsed_s=%.0f vehicles=%d arrived=%d delayed=%d",
        state.tick,
        state.elapsed_s,
        len(state.vehicles),
        arrived,
        delayed,
    )
    for v in state.vehicles:
        logger.debug(
            "%s %s lat=%.5f lon=%.5f %.2f/%.2fkm %.1fkm/h eta=%dmin %s next=%s",
            v.vehicle_id,
            v.route_id,
            v.location.lat,
            v.location.lon,
            v.distance_traveled_km,
            v.total_distance_km,
            v.speed_kmh,
            v.eta_min,
            v.status.value,
            v.next_stop,
        )


async def run() -> int:
    service = FleetSimulationService(
        config_repository=get_fleet_config_repository(),
        settings=simulation_settings_from_env(),
        rng=rng_from_env(),
    )
    _log_state(service.state)

    # WORKER_LOOP=0 runs a bounded number of ticks (WORKER_MAX_TICKS) and exits.
    loop = env_bool("WORKER_LOOP", True)
    max_ticks = None if loop else int(os.getenv("WORKER_MAX_TICKS", "10"))

    ticker = FleetTicker(
        service=service,
        interval_s=tick_interval_from_env(),
        on_tick=_log_state,
    )
    return await ticker.run(max_ticks=max_ticks)


def main() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
