from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from src.adapters.api.schemas.geo import GeoPointSchema


class VehicleSchema(BaseModel):
    vehicle_id: str
    route_id: str
    location: GeoPointSchema
    distance_traveled_km: float
    total_distance_km: float
    progress: float
    speed_kmh: float
    status: Literal["on-time", "delayed", "ahead"]
    eta_min: int
    next_stop: str | None = None


class FleetSnapshotSchema(BaseModel):
    tick: int
    elapsed_s: float
    vehicles: list[VehicleSchema]


class TickRequestSchema(BaseModel):
    elapsed_s: float | None = Field(default=None, ge=0.0)
