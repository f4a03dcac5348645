from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from src.app.ports.output import ITransitCatalogRepository
from src.domain.exceptions import UnknownTicket
from src.domain.models.catalog import RouteInfo, ScheduleEntry, TicketOption


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


@dataclass(slots=True)
class TransitCatalogService:
    """Route planner, timetable and ticket lookups over static data."""

    repository: ITransitCatalogRepository

    def search_routes(
        self, *, from_query: str = "", to_query: str = ""
    ) -> tuple[RouteInfo, ...]:
        from_query = from_query.strip()
        to_query = to_query.strip()
        return tuple(
            r
            for r in self.repository.list_routes()
            if (not from_query or _contains(r.origin, from_query))
            and (not to_query or _contains(r.destination, to_query))
        )

    def list_schedules(
        self, *, route_id: str = "all", search: str = ""
    ) -> tuple[ScheduleEntry, ...]:
        search = search.strip()
        out: list[ScheduleEntry] = []
        for s in self.repository.list_schedules():
            if route_id not in ("", "all") and s.route_id != route_id:
                continue
            if search and not any(
                _contains(field, search)
                for field in (s.route_id, s.origin, s.destination, s.vehicle_id)
            ):
                continue
            out.append(s)
        return tuple(out)

    def upcoming_schedules(
        self,
        *,
        now: datetime,
        route_id: str = "all",
        search: str = "",
        limit: int = 5,
    ) -> tuple[ScheduleEntry, ...]:
        """Departures at or after ``now`` (same service day), in listed order."""

        current = now.hour * 60 + now.minute
        upcoming = [
            s
            for s in self.list_schedules(route_id=route_id, search=search)
            if s.departure.hour * 60 + s.departure.minute >= current
        ]
        return tuple(upcoming[:limit])

    def schedule_route_ids(self) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for s in self.repository.list_schedules():
            seen.setdefault(s.route_id, None)
        return tuple(seen)

    def list_tickets(self) -> tuple[TicketOption, ...]:
        return self.repository.list_tickets()

    def get_ticket(self, ticket_id: str) -> TicketOption:
        for t in self.repository.list_tickets():
            if t.ticket_id == ticket_id:
                return t
        raise UnknownTicket(ticket_id)
