from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.adapters.persistence import (
    JsonFleetConfigRepository,
    StaticFleetConfigRepository,
)
from src.adapters.settings import simulation_settings_from_env
from src.domain.algorithms import fleet_simulation
from src.domain.exceptions import ConfigError
from src.domain.models.fleet import VehicleStatus


def _write(tmp_path: Path, doc: object) -> Path:
    path = tmp_path / "fleet.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


def test_builtin_roster_initializes() -> None:
    repo = StaticFleetConfigRepository()

    state = fleet_simulation.initialize(repo.load_routes(), repo.load_vehicles())

    assert len(state.routes) == 5
    assert len(state.vehicles) == 10
    v = next(v for v in state.vehicles if v.vehicle_id == "AP39Z1234")
    assert v.route_id == "KKD-RJY-01"
    assert v.status is VehicleStatus.ON_TIME


def test_json_repository_loads_routes_and_vehicles(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {
            "routes": [
                {
                    "route_id": "R1",
                    "name": "Port Shuttle",
                    "total_distance_km": 15,
                    "points": [
                        {"name": "Port", "lat": 16.94, "lon": 82.25},
                        {"name": "Market", "lat": 16.47, "lon": 81.84},
                    ],
                },
                {
                    "route_id": "R2",
                    "points": [
                        {"name": "A", "lat": 0.0, "lon": 0.0},
                        {"name": "B", "lat": 1.0, "lon": 0.0},
                    ],
                },
            ],
            "vehicles": [
                {"vehicle_id": "V1", "route_id": "R1", "speed_kmh": 30, "status": "ahead"},
                {"vehicle_id": "V2", "route_id": "R2", "speed_kmh": 40,
                 "distance_traveled_km": 5},
            ],
        },
    )
    repo = JsonFleetConfigRepository(path=path)

    routes = repo.load_routes()
    vehicles = repo.load_vehicles()

    assert [r.route_id for r in routes] == ["R1", "R2"]
    assert routes[0].total_distance_km == 15.0
    assert routes[1].name == "R2"
    assert 100.0 < routes[1].total_distance_km < 120.0
    assert vehicles[0].status is VehicleStatus.AHEAD
    assert vehicles[1].status is None
    assert vehicles[1].distance_traveled_km == 5.0


def test_json_repository_uses_env_path(tmp_path: Path, monkeypatch) -> None:
    path = _write(tmp_path, {"routes": [], "vehicles": []})
    monkeypatch.setenv("FLEET_CONFIG_PATH", str(path))

    assert JsonFleetConfigRepository().load_routes() == ()


@pytest.mark.parametrize(
    "doc",
    [
        [],
        {"routes": [{"name": "no id", "points": []}]},
        {"routes": [{"route_id": "R1", "points": [{"name": "A", "lat": 95, "lon": 0}]}]},
    ],
)
def test_json_repository_rejects_malformed_routes(tmp_path: Path, doc: object) -> None:
    repo = JsonFleetConfigRepository(path=_write(tmp_path, doc))

    with pytest.raises(ConfigError):
        repo.load_routes()


def test_json_repository_rejects_bad_status(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {"vehicles": [{"vehicle_id": "V1", "route_id": "R1", "speed_kmh": 30,
                       "status": "lost"}]},
    )

    with pytest.raises(ConfigError):
        JsonFleetConfigRepository(path=path).load_vehicles()


def test_json_repository_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        JsonFleetConfigRepository(path=tmp_path / "absent.json").load_routes()


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("FLEET_TICK_SECONDS", "10")
    monkeypatch.setenv("FLEET_MAX_SPEED_KMH", "90")
    monkeypatch.setenv("FLEET_STATUS_CHANGE_PROBABILITY", "0.5")

    settings = simulation_settings_from_env()

    assert settings.tick_seconds == 10.0
    assert settings.max_speed_kmh == 90.0
    assert settings.status_change_probability == 0.5
    assert settings.min_speed_kmh == 20.0


def test_json_roster_with_infinite_distance_fails_at_initialize(tmp_path: Path) -> None:
    path = tmp_path / "fleet.json"
    path.write_text(
        '{"routes": [{"route_id": "R1", "total_distance_km": Infinity,'
        ' "points": [{"name": "A", "lat": 0, "lon": 0},'
        ' {"name": "B", "lat": 1, "lon": 0}]}],'
        ' "vehicles": [{"vehicle_id": "V1", "route_id": "R1", "speed_kmh": 40}]}',
        encoding="utf-8",
    )
    repo = JsonFleetConfigRepository(path=path)

    with pytest.raises(ConfigError):
        fleet_simulation.initialize(repo.load_routes(), repo.load_vehicles())
