from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from src.domain.exceptions import ConfigError

from .geo import GeoPoint, RoutePoint


class VehicleStatus(str, Enum):
    ON_TIME = "on-time"
    DELAYED = "delayed"
    AHEAD = "ahead"


@dataclass(frozen=True, slots=True)
class TransitRoute:
    route_id: str
    name: str
    points: tuple[RoutePoint, ...]
    total_distance_km: float

    @property
    def start(self) -> RoutePoint:
        return self.points[0]

    @property
    def end(self) -> RoutePoint:
        return self.points[-1]


@dataclass(frozen=True, slots=True)
class VehicleConfig:
    """Static roster entry used to seed a vehicle at session start."""

    vehicle_id: str
    route_id: str
    speed_kmh: float
    distance_traveled_km: float = 0.0
    status: VehicleStatus | None = None


@dataclass(frozen=True, slots=True)
class Vehicle:
    vehicle_id: str
    route_id: str
    location: GeoPoint
    distance_traveled_km: float
    total_distance_km: float
    speed_kmh: float
    status: VehicleStatus
    eta_min: int
    next_stop: str | None = None

    @property
    def progress(self) -> float:
        return self.distance_traveled_km / self.total_distance_km

    @property
    def remaining_distance_km(self) -> float:
        return self.total_distance_km - self.distance_traveled_km

    @property
    def has_arrived(self) -> bool:
        return self.distance_traveled_km >= self.total_distance_km


@dataclass(frozen=True, slots=True)
class SimulationSettings:
    tick_seconds: float = 30.0
    min_speed_kmh: float = 20.0
    max_speed_kmh: float = 70.0
    speed_delta_kmh: float = 5.0
    speed_change_probability: float = 0.3
    status_change_probability: float = 0.1
    delay_threshold_min: float = 30.0
    ahead_threshold_min: float = 10.0
    ahead_progress_threshold: float = 0.8

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ConfigError(f"{f.name} must be finite: {value}")
        if self.tick_seconds <= 0:
            raise ConfigError(f"tick_seconds must be positive: {self.tick_seconds}")
        if self.min_speed_kmh <= 0:
            raise ConfigError(f"min_speed_kmh must be positive: {self.min_speed_kmh}")
        if self.max_speed_kmh < self.min_speed_kmh:
            raise ConfigError(
                f"max_speed_kmh ({self.max_speed_kmh}) is below "
                f"min_speed_kmh ({self.min_speed_kmh})"
            )
        if self.speed_delta_kmh < 0:
            raise ConfigError(
                f"speed_delta_kmh must not be negative: {self.speed_delta_kmh}"
            )
        for name in ("speed_change_probability", "status_change_probability"):
            p = getattr(self, name)
            if not (0.0 <= p <= 1.0):
                raise ConfigError(f"{name} must be within [0, 1]: {p}")
        if not (0.0 <= self.ahead_progress_threshold <= 1.0):
            raise ConfigError(
                "ahead_progress_threshold must be within [0, 1]: "
                f"{self.ahead_progress_threshold}"
            )

    def clamp_speed(self, speed_kmh: float) -> float:
        return max(self.min_speed_kmh, min(self.max_speed_kmh, speed_kmh))


@dataclass(frozen=True, slots=True)
class FleetState:
    """Point-in-time fleet value; replaced wholesale on every tick."""

    routes: Mapping[str, TransitRoute]
    vehicles: tuple[Vehicle, ...]
    settings: SimulationSettings = field(default_factory=SimulationSettings)
    tick: int = 0
    elapsed_s: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.routes, MappingProxyType):
            object.__setattr__(self, "routes", MappingProxyType(dict(self.routes)))
