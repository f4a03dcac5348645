from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from src.app.ports.output import ITransitCatalogRepository
from src.domain.models.catalog import (
    Alert,
    AlertType,
    RouteInfo,
    ScheduleEntry,
    ScheduleStatus,
    TicketOption,
)

ROUTES: tuple[RouteInfo, ...] = (
    RouteInfo(
        route_id="KKD-RJY-01",
        name="Kakinada - Rajahmundry Express",
        origin="Kakinada Bus Station",
        destination="Rajahmundry Bus Station",
        distance_km=61.0,
        duration_min=105,
        stops=12,
        fare_inr=65,
        frequency_min=30,
    ),
    RouteInfo(
        route_id="KKD-RJY-02",
        name="Kakinada - Rajahmundry Local",
        origin="Kakinada Port",
        destination="Rajahmundry Railway Station",
        distance_km=63.0,
        duration_min=135,
        stops=18,
        fare_inr=45,
        frequency_min=45,
    ),
    RouteInfo(
        route_id="KKD-AMP-01",
        name="Kakinada - Amalapuram",
        origin="Kakinada Bus Station",
        destination="Amalapuram Bus Stand",
        distance_km=28.0,
        duration_min=50,
        stops=8,
        fare_inr=35,
        frequency_min=20,
    ),
    RouteInfo(
        route_id="AMP-RJY-01",
        name="Amalapuram - Rajahmundry",
        origin="Amalapuram Bus Stand",
        destination="Rajahmundry Bus Station",
        distance_km=33.0,
        duration_min=55,
        stops=7,
        fare_inr=40,
        frequency_min=25,
    ),
    RouteInfo(
        route_id="KKD-RZL-01",
        name="Kakinada - Razole Shuttle",
        origin="Kakinada Port",
        destination="Razole Market",
        distance_km=15.0,
        duration_min=25,
        stops=4,
        fare_inr=20,
        frequency_min=15,
    ),
)

SCHEDULES: tuple[ScheduleEntry, ...] = (
    ScheduleEntry("1", "KKD-RJY-01", "AP39Z1234", time(5, 30), time(7, 15),
                  "Kakinada Bus Station", "Rajahmundry Bus Station"),
    ScheduleEntry("2", "KKD-RJY-01", "AP39Z1235", time(6, 0), time(7, 45),
                  "Kakinada Bus Station", "Rajahmundry Bus Station",
                  ScheduleStatus.DELAYED, 8),
    ScheduleEntry("3", "KKD-RJY-02", "AP39Z5678", time(6, 15), time(8, 30),
                  "Kakinada Port", "Rajahmundry Railway Station"),
    ScheduleEntry("4", "KKD-AMP-01", "AP39Z9012", time(5, 45), time(6, 35),
                  "Kakinada Bus Station", "Amalapuram Bus Stand",
                  ScheduleStatus.EARLY, -3),
    ScheduleEntry("5", "AMP-RJY-01", "AP39Z3456", time(6, 20), time(7, 15),
                  "Amalapuram Bus Stand", "Rajahmundry Bus Station"),
    ScheduleEntry("6", "KKD-RZL-01", "AP39Z7801", time(7, 0), time(7, 25),
                  "Kakinada Port", "Razole Market"),
)

TICKETS: tuple[TicketOption, ...] = (
    TicketOption("KKD-RJY-01", "KKD-RJY Express", "Kakinada", "Rajahmundry",
                 45, 90, time(14, 30)),
    TicketOption("KKD-AMP-01", "KKD-AMP Route", "Kakinada", "Amalapuram",
                 35, 70, time(15, 15)),
    TicketOption("KKD-MND-01", "KKD-MND Local", "Kakinada", "Mandapeta",
                 25, 45, time(14, 45)),
    TicketOption("KKD-VZM-01", "KKD-VZM Express", "Kakinada", "Vizianagaram",
                 65, 135, time(16, 0)),
)

ALERTS: tuple[Alert, ...] = (
    Alert(
        alert_id="1",
        type=AlertType.WARNING,
        title="KKD-RJY-02 Delayed",
        message=(
            "Bus AP39Z5678 is running 5 minutes late due to traffic "
            "congestion near Samalkot Junction."
        ),
        minutes_ago=2,
        route="KKD-RJY-02",
    ),
    Alert(
        alert_id="2",
        type=AlertType.INFO,
        title="New Route Added",
        message=(
            "The Kakinada - Razole Shuttle is now operational with buses "
            "every 15 minutes."
        ),
        minutes_ago=15,
    ),
    Alert(
        alert_id="3",
        type=AlertType.SUCCESS,
        title="KKD-RJY-01 Back on Schedule",
        message="All buses on KKD-RJY-01 are now running on time after earlier delays.",
        minutes_ago=30,
        route="KKD-RJY-01",
        read=True,
    ),
    Alert(
        alert_id="4",
        type=AlertType.ERROR,
        title="Service Disruption",
        message=(
            "AMP-RJY-01 temporarily diverted due to road construction near "
            "Tanuku. Expect longer journey times."
        ),
        minutes_ago=60,
        route="AMP-RJY-01",
        read=True,
    ),
)


@dataclass(slots=True)
class StaticTransitCatalogRepository(ITransitCatalogRepository):
    """Reference data for the dashboard; there is no backing store."""

    def list_routes(self) -> tuple[RouteInfo, ...]:
        return ROUTES

    def list_schedules(self) -> tuple[ScheduleEntry, ...]:
        return SCHEDULES

    def list_tickets(self) -> tuple[TicketOption, ...]:
        return TICKETS

    def initial_alerts(self) -> tuple[Alert, ...]:
        return ALERTS
