from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.catalog import Alert, RouteInfo, ScheduleEntry, TicketOption


class ITransitCatalogRepository(ABC):
    """Port for static reference data shown by the dashboard."""

    @abstractmethod
    def list_routes(self) -> tuple[RouteInfo, ...]:
        raise NotImplementedError

    @abstractmethod
    def list_schedules(self) -> tuple[ScheduleEntry, ...]:
        raise NotImplementedError

    @abstractmethod
    def list_tickets(self) -> tuple[TicketOption, ...]:
        raise NotImplementedError

    @abstractmethod
    def initial_alerts(self) -> tuple[Alert, ...]:
        raise NotImplementedError
