from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.app.ports.output import IFleetConfigRepository
from src.domain.algorithms.fleet_simulation import build_route
from src.domain.exceptions import ConfigError
from src.domain.models import GeoPoint, RoutePoint
from src.domain.models.fleet import TransitRoute, VehicleConfig, VehicleStatus


@dataclass(slots=True)
class JsonFleetConfigRepository(IFleetConfigRepository):
    """Loads routes and the vehicle roster from a JSON document.

    Env vars:
      - FLEET_CONFIG_PATH: path to the JSON file

    Expected shape::

        {
          "routes": [
            {"route_id": "R1", "name": "...", "total_distance_km": 12.5,
             "points": [{"name": "A", "lat": 16.9, "lon": 82.2}, ...]}
          ],
          "vehicles": [
            {"vehicle_id": "V1", "route_id": "R1", "speed_kmh": 40,
             "distance_traveled_km": 0, "status": "on-time"}
          ]
        }

    ``total_distance_km`` and ``status`` are optional.
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("FLEET_CONFIG_PATH")
        if not value:
            raise ConfigError("FLEET_CONFIG_PATH is not configured")
        return Path(value)

    def _document(self) -> dict[str, Any]:
        path = self._path()
        try:
            with path.open("r", encoding="utf-8") as fp:
                doc = json.load(fp)
        except FileNotFoundError as exc:
            raise ConfigError(f"Fleet config not found: {path}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Fleet config is not valid JSON: {exc}") from exc
        if not isinstance(doc, dict):
            raise ConfigError("Fleet config must be a JSON object")
        return doc

    def load_routes(self) -> tuple[TransitRoute, ...]:
        routes: list[TransitRoute] = []
        for raw in self._document().get("routes") or []:
            try:
                points = tuple(
                    RoutePoint(
                        name=str(p.get("name") or ""),
                        location=GeoPoint(lat=float(p["lat"]), lon=float(p["lon"])),
                    )
                    for p in raw.get("points") or []
                )
                distance = raw.get("total_distance_km")
                routes.append(
                    build_route(
                        str(raw["route_id"]),
                        str(raw.get("name") or raw["route_id"]),
                        points,
                        float(distance) if distance is not None else None,
                    )
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid route entry {raw!r}: {exc}") from exc
        return tuple(routes)

    def load_vehicles(self) -> tuple[VehicleConfig, ...]:
        vehicles: list[VehicleConfig] = []
        for raw in self._document().get("vehicles") or []:
            try:
                status = raw.get("status")
                vehicles.append(
                    VehicleConfig(
                        vehicle_id=str(raw["vehicle_id"]),
                        route_id=str(raw["route_id"]),
                        speed_kmh=float(raw["speed_kmh"]),
                        distance_traveled_km=float(raw.get("distance_traveled_km") or 0.0),
                        status=VehicleStatus(status) if status else None,
                    )
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid vehicle entry {raw!r}: {exc}") from exc
        return tuple(vehicles)
