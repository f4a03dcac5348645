from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import Enum


@dataclass(frozen=True, slots=True)
class RouteInfo:
    """Planner-facing description of a route (static reference data)."""

    route_id: str
    name: str
    origin: str
    destination: str
    distance_km: float
    duration_min: int
    stops: int
    fare_inr: int
    frequency_min: int


class ScheduleStatus(str, Enum):
    ON_TIME = "on-time"
    DELAYED = "delayed"
    CANCELLED = "cancelled"
    EARLY = "early"


@dataclass(frozen=True, slots=True)
class ScheduleEntry:
    schedule_id: str
    route_id: str
    vehicle_id: str
    departure: time
    arrival: time
    origin: str
    destination: str
    status: ScheduleStatus = ScheduleStatus.ON_TIME
    delay_min: int | None = None  # negative when early


@dataclass(frozen=True, slots=True)
class TicketOption:
    ticket_id: str
    route_name: str
    origin: str
    destination: str
    price_inr: int
    duration_min: int
    next_departure: time


class AlertType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Alert:
    alert_id: str
    type: AlertType
    title: str
    message: str
    minutes_ago: int
    route: str | None = None
    read: bool = False
