from .catalog import (
    Alert,
    AlertType,
    RouteInfo,
    ScheduleEntry,
    ScheduleStatus,
    TicketOption,
)
from .chat import ChatAnswer, ChatMessage, ChatReply, ChatRole
from .fleet import (
    FleetState,
    SimulationSettings,
    TransitRoute,
    Vehicle,
    VehicleConfig,
    VehicleStatus,
)
from .geo import GeoPoint, RoutePoint

__all__ = [
    "Alert",
    "AlertType",
    "ChatAnswer",
    "ChatMessage",
    "ChatReply",
    "ChatRole",
    "FleetState",
    "GeoPoint",
    "RouteInfo",
    "RoutePoint",
    "ScheduleEntry",
    "ScheduleStatus",
    "SimulationSettings",
    "TicketOption",
    "TransitRoute",
    "Vehicle",
    "VehicleConfig",
    "VehicleStatus",
]
