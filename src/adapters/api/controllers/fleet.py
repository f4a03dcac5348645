from __future__ import annotations

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from src.adapters.api.dependencies import get_fleet_service
from src.adapters.api.schemas.fleet import (
    FleetSnapshotSchema,
    TickRequestSchema,
    VehicleSchema,
)
from src.adapters.api.schemas.geo import GeoPointSchema
from src.app.services.fleet_service import FleetSimulationService
from src.domain.exceptions import UnknownVehicle
from src.domain.models.fleet import FleetState, Vehicle

router = APIRouter(prefix="/fleet", tags=["fleet"])


def vehicle_to_schema(v: Vehicle) -> VehicleSchema:
    return VehicleSchema(
        vehicle_id=v.vehicle_id,
        route_id=v.route_id,
        location=GeoPointSchema(lat=v.location.lat, lon=v.location.lon),
        distance_traveled_km=v.distance_traveled_km,
        total_distance_km=v.total_distance_km,
        progress=v.progress,
        speed_kmh=v.speed_kmh,
        status=v.status.value,
        eta_min=v.eta_min,
        next_stop=v.next_stop,
    )


def _snapshot_schema(
    state: FleetState, vehicles: tuple[Vehicle, ...]
) -> FleetSnapshotSchema:
    return FleetSnapshotSchema(
        tick=state.tick,
        elapsed_s=state.elapsed_s,
        vehicles=[vehicle_to_schema(v) for v in vehicles],
    )


@router.get("/vehicles", response_model=FleetSnapshotSchema)
def list_vehicles(
    route_id: list[str] | None = Query(default=None),
    q: str | None = Query(default=None),
    service: FleetSimulationService = Depends(get_fleet_service),
) -> FleetSnapshotSchema:
    state = service.state
    vehicles = service.search_vehicles(q) if q else service.snapshot()
    if route_id:
        wanted = set(route_id)
        vehicles = tuple(v for v in vehicles if v.route_id in wanted)
    return _snapshot_schema(state, vehicles)


@router.get("/vehicles/{vehicle_id}", response_model=VehicleSchema)
def get_vehicle(
    vehicle_id: str,
    service: FleetSimulationService = Depends(get_fleet_service),
) -> VehicleSchema:
    try:
        return vehicle_to_schema(service.get_vehicle(vehicle_id))
    except UnknownVehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")


@router.post("/tick", response_model=FleetSnapshotSchema)
async def tick(
    req: TickRequestSchema | None = Body(default=None),
    service: FleetSimulationService = Depends(get_fleet_service),
) -> FleetSnapshotSchema:
    state = await service.tick(req.elapsed_s if req else None)
    return _snapshot_schema(state, state.vehicles)


@router.post("/reset", response_model=FleetSnapshotSchema)
async def reset(
    service: FleetSimulationService = Depends(get_fleet_service),
) -> FleetSnapshotSchema:
    state = await service.reset()
    return _snapshot_schema(state, state.vehicles)
