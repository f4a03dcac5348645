from __future__ import annotations

from dataclasses import dataclass

from src.app.ports.output import IFleetConfigRepository
from src.domain.algorithms.fleet_simulation import build_route
from src.domain.models import GeoPoint, RoutePoint
from src.domain.models.fleet import TransitRoute, VehicleConfig, VehicleStatus

_KAKINADA_BUS_STATION = RoutePoint("Kakinada Bus Station", GeoPoint(16.9891, 82.2475))
_KAKINADA_PORT = RoutePoint("Kakinada Port", GeoPoint(16.9437, 82.2550))
_SAMALKOT = RoutePoint("Samalkot Junction", GeoPoint(17.0531, 82.1695))
_PEDDAPURAM = RoutePoint("Peddapuram", GeoPoint(17.0775, 82.1380))
_RAJAHMUNDRY_BUS_STATION = RoutePoint(
    "Rajahmundry Bus Station", GeoPoint(17.0005, 81.8040)
)
_RAJAHMUNDRY_RAILWAY = RoutePoint(
    "Rajahmundry Railway Station", GeoPoint(17.0090, 81.7900)
)
_SAKHINETIPALLI = RoutePoint("Sakhinetipalli", GeoPoint(16.4030, 81.7750))
_AMALAPURAM = RoutePoint("Amalapuram Bus Stand", GeoPoint(16.5787, 82.0061))
_TANUKU_ROAD = RoutePoint("Near Tanuku", GeoPoint(16.7540, 81.6810))
_RAZOLE = RoutePoint("Razole Market", GeoPoint(16.4750, 81.8390))

ROUTES: tuple[TransitRoute, ...] = (
    build_route(
        "KKD-RJY-01",
        "Kakinada - Rajahmundry Express",
        (_KAKINADA_BUS_STATION, _SAMALKOT, _PEDDAPURAM, _RAJAHMUNDRY_BUS_STATION),
        61.0,
    ),
    build_route(
        "KKD-RJY-02",
        "Kakinada - Rajahmundry Local",
        (_KAKINADA_PORT, _AMALAPURAM, _SAKHINETIPALLI, _RAJAHMUNDRY_RAILWAY),
        63.0,
    ),
    build_route(
        "KKD-AMP-01",
        "Kakinada - Amalapuram",
        (_KAKINADA_BUS_STATION, _RAZOLE, _AMALAPURAM),
        28.0,
    ),
    build_route(
        "AMP-RJY-01",
        "Amalapuram - Rajahmundry",
        (_AMALAPURAM, _TANUKU_ROAD, _RAJAHMUNDRY_BUS_STATION),
        33.0,
    ),
    build_route(
        "KKD-RZL-01",
        "Kakinada - Razole Shuttle",
        (_KAKINADA_PORT, _RAZOLE),
        15.0,
    ),
)

VEHICLES: tuple[VehicleConfig, ...] = (
    VehicleConfig("AP39Z1234", "KKD-RJY-01", 45.0, 15.2, VehicleStatus.ON_TIME),
    VehicleConfig("AP39Z1235", "KKD-RJY-01", 38.0, 6.5, VehicleStatus.DELAYED),
    VehicleConfig("AP39Z5678", "KKD-RJY-02", 35.0, 22.0, VehicleStatus.DELAYED),
    VehicleConfig("AP39Z5679", "KKD-RJY-02", 42.0, 4.0, VehicleStatus.ON_TIME),
    VehicleConfig("AP39Z9012", "KKD-AMP-01", 50.0, 23.5, VehicleStatus.AHEAD),
    VehicleConfig("AP39Z9013", "KKD-AMP-01", 40.0, 12.0, VehicleStatus.ON_TIME),
    VehicleConfig("AP39Z3456", "AMP-RJY-01", 36.0, 20.0, VehicleStatus.DELAYED),
    VehicleConfig("AP39Z3457", "AMP-RJY-01", 44.0, 9.0, VehicleStatus.ON_TIME),
    VehicleConfig("AP39Z7801", "KKD-RZL-01", 30.0, 0.5, VehicleStatus.ON_TIME),
    VehicleConfig("AP39Z7802", "KKD-RZL-01", 48.0, 13.0, VehicleStatus.AHEAD),
)


@dataclass(slots=True)
class StaticFleetConfigRepository(IFleetConfigRepository):
    """Built-in East Godavari route network and vehicle roster."""

    routes: tuple[TransitRoute, ...] = ROUTES
    vehicles: tuple[VehicleConfig, ...] = VEHICLES

    def load_routes(self) -> tuple[TransitRoute, ...]:
        return self.routes

    def load_vehicles(self) -> tuple[VehicleConfig, ...]:
        return self.vehicles
