"""Simulated fleet position engine.

Every function here is pure: state goes in, a new state comes out. The
random source is injected so runs are reproducible with a seed.

Vehicles move along a straight line between the first and last waypoint
of their route. Intermediate waypoints are only used to name the next
stop. A vehicle that reaches the end of its route stays there.
"""

from __future__ import annotations

import math
import random
from dataclasses import replace
from typing import Iterable, Mapping

from src.domain.algorithms.geo_utils import (
    cumulative_fractions,
    interpolate,
    polyline_length_km,
)
from src.domain.exceptions import ConfigError
from src.domain.models.fleet import (
    FleetState,
    SimulationSettings,
    TransitRoute,
    Vehicle,
    VehicleConfig,
    VehicleStatus,
)
from src.domain.models.geo import RoutePoint

# Slack for float noise when comparing fractions of the route.
_EPS = 1e-9


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def build_route(
    route_id: str,
    name: str,
    points: Iterable[RoutePoint],
    total_distance_km: float | None = None,
) -> TransitRoute:
    """Build a route, deriving its length from the polyline when not given."""

    pts = tuple(points)
    if total_distance_km is None:
        total_distance_km = polyline_length_km([p.location for p in pts])
    return TransitRoute(
        route_id=route_id,
        name=name,
        points=pts,
        total_distance_km=float(total_distance_km),
    )


def classify_status(
    eta_min: float, progress: float, settings: SimulationSettings
) -> VehicleStatus:
    if eta_min > settings.delay_threshold_min:
        return VehicleStatus.DELAYED
    if (
        eta_min < settings.ahead_threshold_min
        and progress > settings.ahead_progress_threshold
    ):
        return VehicleStatus.AHEAD
    return VehicleStatus.ON_TIME


def compute_eta_min(remaining_km: float, speed_kmh: float) -> int:
    return max(1, _round_half_up(max(0.0, remaining_km) / speed_kmh * 60.0))


def next_stop_name(route: TransitRoute, progress: float) -> str:
    fractions = cumulative_fractions([p.location for p in route.points])
    for point, fraction in zip(route.points, fractions):
        if fraction > progress + _EPS:
            return point.name
    return route.end.name


def _validate_route(route: TransitRoute) -> None:
    if len(route.points) < 2:
        raise ConfigError(
            f"Route {route.route_id!r} needs at least two waypoints, "
            f"got {len(route.points)}"
        )
    total = route.total_distance_km
    if not (math.isfinite(total) and total > 0):
        raise ConfigError(
            f"Route {route.route_id!r} needs a finite positive total distance: "
            f"{route.total_distance_km}"
        )


def _place(
    vehicle_id: str,
    route: TransitRoute,
    distance_km: float,
    speed_kmh: float,
    status: VehicleStatus,
    eta_min: int,
) -> Vehicle:
    total = route.total_distance_km
    progress = distance_km / total
    return Vehicle(
        vehicle_id=vehicle_id,
        route_id=route.route_id,
        location=interpolate(route.start.location, route.end.location, progress),
        distance_traveled_km=distance_km,
        total_distance_km=total,
        speed_kmh=speed_kmh,
        status=status,
        eta_min=eta_min,
        next_stop=next_stop_name(route, progress),
    )


def initialize(
    routes: Mapping[str, TransitRoute] | Iterable[TransitRoute],
    vehicles: Iterable[VehicleConfig],
    settings: SimulationSettings | None = None,
) -> FleetState:
    """Build the initial fleet state from static configuration.

    Raises ConfigError for dangling route references, non-positive route
    distances, duplicate vehicle ids and out-of-range initial values.
    """

    settings = settings or SimulationSettings()

    if isinstance(routes, Mapping):
        for key, r in routes.items():
            if key != r.route_id:
                raise ConfigError(
                    f"Route keyed as {key!r} has route_id {r.route_id!r}"
                )
        routes = routes.values()

    routes_by_id: dict[str, TransitRoute] = {}
    for r in routes:
        if r.route_id in routes_by_id:
            raise ConfigError(f"Duplicate route id: {r.route_id!r}")
        routes_by_id[r.route_id] = r

    for route in routes_by_id.values():
        _validate_route(route)

    seen: set[str] = set()
    out: list[Vehicle] = []
    for cfg in vehicles:
        if cfg.vehicle_id in seen:
            raise ConfigError(f"Duplicate vehicle id: {cfg.vehicle_id!r}")
        seen.add(cfg.vehicle_id)

        route = routes_by_id.get(cfg.route_id)
        if route is None:
            raise ConfigError(
                f"Vehicle {cfg.vehicle_id!r} references unknown route {cfg.route_id!r}"
            )

        total = route.total_distance_km
        if not (
            math.isfinite(cfg.distance_traveled_km)
            and 0.0 <= cfg.distance_traveled_km <= total
        ):
            raise ConfigError(
                f"Vehicle {cfg.vehicle_id!r} distance {cfg.distance_traveled_km} "
                f"is outside [0, {total}]"
            )
        if not (
            math.isfinite(cfg.speed_kmh)
            and settings.min_speed_kmh <= cfg.speed_kmh <= settings.max_speed_kmh
        ):
            raise ConfigError(
                f"Vehicle {cfg.vehicle_id!r} speed {cfg.speed_kmh} is outside "
                f"[{settings.min_speed_kmh}, {settings.max_speed_kmh}]"
            )

        eta = compute_eta_min(total - cfg.distance_traveled_km, cfg.speed_kmh)
        status = cfg.status or classify_status(
            eta, cfg.distance_traveled_km / total, settings
        )
        out.append(
            _place(
                cfg.vehicle_id,
                route,
                float(cfg.distance_traveled_km),
                float(cfg.speed_kmh),
                status,
                eta,
            )
        )

    return FleetState(routes=routes_by_id, vehicles=tuple(out), settings=settings)


def advance_vehicle(
    vehicle: Vehicle,
    route: TransitRoute,
    elapsed_seconds: float,
    settings: SimulationSettings,
    rng: random.Random,
) -> Vehicle:
    total = vehicle.total_distance_km
    increment = vehicle.speed_kmh / 3600.0 * elapsed_seconds
    distance = min(vehicle.distance_traveled_km + increment, total)
    progress = distance / total

    eta = compute_eta_min(total - distance, vehicle.speed_kmh)

    speed = vehicle.speed_kmh
    if rng.random() < settings.speed_change_probability:
        speed += rng.uniform(-settings.speed_delta_kmh, settings.speed_delta_kmh)
    speed = settings.clamp_speed(speed)

    status = vehicle.status
    if rng.random() < settings.status_change_probability:
        status = classify_status(eta, progress, settings)

    return _place(vehicle.vehicle_id, route, distance, speed, status, eta)


def advance(
    state: FleetState, elapsed_seconds: float, *, rng: random.Random
) -> FleetState:
    """Return the fleet state ``elapsed_seconds`` of simulated time later."""

    if elapsed_seconds < 0:
        raise ValueError(f"elapsed_seconds must not be negative: {elapsed_seconds}")

    vehicles = tuple(
        advance_vehicle(
            v, state.routes[v.route_id], elapsed_seconds, state.settings, rng
        )
        for v in state.vehicles
    )
    return replace(
        state,
        vehicles=vehicles,
        tick=state.tick + 1,
        elapsed_s=state.elapsed_s + elapsed_seconds,
    )


def snapshot(state: FleetState) -> tuple[Vehicle, ...]:
    return state.vehicles
