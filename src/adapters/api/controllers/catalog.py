from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from src.adapters.api.controllers.fleet import vehicle_to_schema
from src.adapters.api.dependencies import get_catalog_service, get_fleet_service
from src.adapters.api.schemas.catalog import (
    RouteInfoSchema,
    ScheduleEntrySchema,
    SchedulesResponseSchema,
    TicketSchema,
)
from src.app.services.catalog_service import TransitCatalogService
from src.app.services.fleet_service import FleetSimulationService
from src.domain.exceptions import UnknownTicket
from src.domain.models.catalog import ScheduleEntry, TicketOption

router = APIRouter(prefix="/catalog", tags=["catalog"])


def _schedule_to_schema(s: ScheduleEntry) -> ScheduleEntrySchema:
    return ScheduleEntrySchema(
        schedule_id=s.schedule_id,
        route_id=s.route_id,
        vehicle_id=s.vehicle_id,
        departure=s.departure,
        arrival=s.arrival,
        origin=s.origin,
        destination=s.destination,
        status=s.status.value,
        delay_min=s.delay_min,
    )


def _ticket_to_schema(t: TicketOption) -> TicketSchema:
    return TicketSchema(
        ticket_id=t.ticket_id,
        route_name=t.route_name,
        origin=t.origin,
        destination=t.destination,
        price_inr=t.price_inr,
        duration_min=t.duration_min,
        next_departure=t.next_departure,
    )


@router.get("/routes", response_model=list[RouteInfoSchema])
def search_routes(
    from_query: str = Query(default="", alias="from"),
    to_query: str = Query(default="", alias="to"),
    catalog: TransitCatalogService = Depends(get_catalog_service),
    fleet: FleetSimulationService = Depends(get_fleet_service),
) -> list[RouteInfoSchema]:
    out: list[RouteInfoSchema] = []
    for r in catalog.search_routes(from_query=from_query, to_query=to_query):
        buses = fleet.snapshot(route_ids={r.route_id})
        out.append(
            RouteInfoSchema(
                route_id=r.route_id,
                name=r.name,
                origin=r.origin,
                destination=r.destination,
                distance_km=r.distance_km,
                duration_min=r.duration_min,
                stops=r.stops,
                fare_inr=r.fare_inr,
                frequency_min=r.frequency_min,
                buses=[vehicle_to_schema(v) for v in buses],
            )
        )
    return out


@router.get("/schedules", response_model=SchedulesResponseSchema)
def list_schedules(
    route_id: str = Query(default="all"),
    q: str = Query(default=""),
    catalog: TransitCatalogService = Depends(get_catalog_service),
) -> SchedulesResponseSchema:
    return SchedulesResponseSchema(
        route_ids=["all", *catalog.schedule_route_ids()],
        schedules=[
            _schedule_to_schema(s)
            for s in catalog.list_schedules(route_id=route_id, search=q)
        ],
    )


@router.get("/schedules/upcoming", response_model=list[ScheduleEntrySchema])
def upcoming_schedules(
    route_id: str = Query(default="all"),
    q: str = Query(default=""),
    at: datetime | None = Query(default=None),
    limit: int = Query(default=5, ge=1, le=50),
    catalog: TransitCatalogService = Depends(get_catalog_service),
) -> list[ScheduleEntrySchema]:
    now = at or datetime.now()
    return [
        _schedule_to_schema(s)
        for s in catalog.upcoming_schedules(
            now=now, route_id=route_id, search=q, limit=limit
        )
    ]


@router.get("/tickets", response_model=list[TicketSchema])
def list_tickets(
    catalog: TransitCatalogService = Depends(get_catalog_service),
) -> list[TicketSchema]:
    return [_ticket_to_schema(t) for t in catalog.list_tickets()]


@router.get("/tickets/{ticket_id}", response_model=TicketSchema)
def get_ticket(
    ticket_id: str,
    catalog: TransitCatalogService = Depends(get_catalog_service),
) -> TicketSchema:
    try:
        return _ticket_to_schema(catalog.get_ticket(ticket_id))
    except UnknownTicket:
        raise HTTPException(status_code=404, detail="Ticket not found")
