from __future__ import annotations

import os
from functools import lru_cache

from src.adapters.ai.http_ai_gateway import HttpAiGateway
from src.adapters.persistence import (
    JsonFleetConfigRepository,
    StaticFleetConfigRepository,
    StaticTransitCatalogRepository,
)
from src.adapters.settings import rng_from_env, simulation_settings_from_env
from src.app.ports.output import IFleetConfigRepository
from src.app.services.alert_service import AlertService
from src.app.services.catalog_service import TransitCatalogService
from src.app.services.chat_service import ChatService
from src.app.services.fleet_service import FleetSimulationService


def get_fleet_config_repository() -> IFleetConfigRepository:
    if os.getenv("FLEET_CONFIG_PATH"):
        return JsonFleetConfigRepository()
    return StaticFleetConfigRepository()


# The fleet and the alert inbox are process-wide in-memory state, so these
# factories hand out one instance per process.
@lru_cache(maxsize=1)
def get_fleet_service() -> FleetSimulationService:
    return FleetSimulationService(
        config_repository=get_fleet_config_repository(),
        settings=simulation_settings_from_env(),
        rng=rng_from_env(),
    )


@lru_cache(maxsize=1)
def get_alert_service() -> AlertService:
    return AlertService(repository=StaticTransitCatalogRepository())


def get_catalog_service() -> TransitCatalogService:
    return TransitCatalogService(repository=StaticTransitCatalogRepository())


def get_chat_service() -> ChatService:
    return ChatService(gateway=HttpAiGateway())
