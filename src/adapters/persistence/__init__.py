from .json_fleet_config_repository import JsonFleetConfigRepository
from .static_catalog_repository import StaticTransitCatalogRepository
from .static_fleet_config_repository import StaticFleetConfigRepository

__all__ = [
    "JsonFleetConfigRepository",
    "StaticFleetConfigRepository",
    "StaticTransitCatalogRepository",
]
