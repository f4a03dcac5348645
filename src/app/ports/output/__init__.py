from .catalog_repository import ITransitCatalogRepository
from .chat_gateway import IChatGateway
from .fleet_config_repository import IFleetConfigRepository

__all__ = [
    "IChatGateway",
    "IFleetConfigRepository",
    "ITransitCatalogRepository",
]
