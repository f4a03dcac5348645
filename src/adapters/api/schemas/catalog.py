from __future__ import annotations

from datetime import time
from typing import Literal

from pydantic import BaseModel

from src.adapters.api.schemas.fleet import VehicleSchema


class RouteInfoSchema(BaseModel):
    route_id: str
    name: str
    origin: str
    destination: str
    distance_km: float
    duration_min: int
    stops: int
    fare_inr: int
    frequency_min: int
    buses: list[VehicleSchema] = []


class ScheduleEntrySchema(BaseModel):
    schedule_id: str
    route_id: str
    vehicle_id: str
    departure: time
    arrival: time
    origin: str
    destination: str
    status: Literal["on-time", "delayed", "cancelled", "early"]
    delay_min: int | None = None


class SchedulesResponseSchema(BaseModel):
    route_ids: list[str]
    schedules: list[ScheduleEntrySchema]


class TicketSchema(BaseModel):
    ticket_id: str
    route_name: str
    origin: str
    destination: str
    price_inr: int
    duration_min: int
    next_departure: time


class AlertSchema(BaseModel):
    alert_id: str
    type: Literal["info", "warning", "success", "error"]
    title: str
    message: str
    minutes_ago: int
    route: str | None = None
    read: bool


class AlertsResponseSchema(BaseModel):
    unread_count: int
    alerts: list[AlertSchema]
