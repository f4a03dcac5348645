from __future__ import annotations

import random
from dataclasses import FrozenInstanceError

import pytest

from src.domain.algorithms import fleet_simulation as sim
from src.domain.exceptions import ConfigError
from src.domain.models.fleet import (
    SimulationSettings,
    TransitRoute,
    VehicleConfig,
    VehicleStatus,
)
from src.domain.models.geo import GeoPoint, RoutePoint

QUIET = SimulationSettings(speed_change_probability=0.0, status_change_probability=0.0)


def _route(route_id: str = "R1", total_km: float = 65.8) -> TransitRoute:
    return TransitRoute(
        route_id=route_id,
        name="Kakinada - Rajahmundry",
        points=(
            RoutePoint("Kakinada", GeoPoint(lat=16.9891, lon=82.2475)),
            RoutePoint("Samalkot", GeoPoint(lat=17.0531, lon=82.1695)),
            RoutePoint("Rajahmundry", GeoPoint(lat=17.0005, lon=81.8040)),
        ),
        total_distance_km=total_km,
    )


def _expected_location(route: TransitRoute, progress: float) -> tuple[float, float]:
    a = route.start.location
    b = route.end.location
    return (a.lat + (b.lat - a.lat) * progress, a.lon + (b.lon - a.lon) * progress)


def test_advance_scenario_thirty_seconds_at_45_kmh() -> None:
    state = sim.initialize(
        [_route()],
        [VehicleConfig("AP39Z1234", "R1", speed_kmh=45.0, distance_traveled_km=15.2)],
        QUIET,
    )

    nxt = sim.advance(state, 30, rng=random.Random(1))
    v = nxt.vehicles[0]

    assert v.distance_traveled_km == pytest.approx(15.575)
    # remaining 50.225km at 45km/h -> 66.97min
    assert v.eta_min == 67
    assert nxt.tick == 1
    assert nxt.elapsed_s == 30


def test_vehicle_reaching_end_clamps_distance_and_eta() -> None:
    state = sim.initialize(
        [_route(total_km=10.0)],
        [VehicleConfig("V1", "R1", speed_kmh=60.0, distance_traveled_km=9.99)],
        QUIET,
    )

    nxt = sim.advance(state, 60, rng=random.Random(1))
    v = nxt.vehicles[0]

    assert v.distance_traveled_km == 10.0
    assert v.remaining_distance_km == 0.0
    assert v.eta_min == 1
    assert v.has_arrived

    again = sim.advance(nxt, 600, rng=random.Random(2))
    assert again.vehicles[0].distance_traveled_km == 10.0
    assert again.vehicles[0].location == v.location


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 1234])
def test_invariants_hold_over_many_ticks(seed: int) -> None:
    settings = SimulationSettings(
        speed_change_probability=0.7,
        status_change_probability=0.5,
        speed_delta_kmh=15.0,
    )
    routes = [_route("R1", 65.8), _route("R2", 12.0)]
    roster = [
        VehicleConfig("V1", "R1", speed_kmh=45.0, distance_traveled_km=15.2),
        VehicleConfig("V2", "R2", speed_kmh=20.0),
        VehicleConfig("V3", "R2", speed_kmh=70.0, distance_traveled_km=11.9),
    ]
    state = sim.initialize(routes, roster, settings)
    rng = random.Random(seed)

    previous = {v.vehicle_id: v.distance_traveled_km for v in state.vehicles}
    for _ in range(400):
        state = sim.advance(state, 30, rng=rng)
        assert len(state.vehicles) == 3
        for v in state.vehicles:
            route = state.routes[v.route_id]
            assert 0.0 <= v.distance_traveled_km <= v.total_distance_km
            assert v.distance_traveled_km >= previous[v.vehicle_id]
            assert settings.min_speed_kmh <= v.speed_kmh <= settings.max_speed_kmh
            assert v.eta_min >= 1

            lat, lon = _expected_location(route, v.progress)
            assert v.location.lat == pytest.approx(lat, abs=1e-9)
            assert v.location.lon == pytest.approx(lon, abs=1e-9)
            previous[v.vehicle_id] = v.distance_traveled_km

    # 400 ticks of 30s at >= 20km/h covers every route.
    assert all(v.has_arrived for v in state.vehicles)


def test_same_seed_gives_same_fleet() -> None:
    settings = SimulationSettings(speed_change_probability=1.0, status_change_probability=1.0)
    state = sim.initialize(
        [_route()], [VehicleConfig("V1", "R1", speed_kmh=40.0)], settings
    )

    a = state
    b = state
    rng_a = random.Random(99)
    rng_b = random.Random(99)
    for _ in range(20):
        a = sim.advance(a, 30, rng=rng_a)
        b = sim.advance(b, 30, rng=rng_b)

    assert a.vehicles == b.vehicles


def test_advance_does_not_modify_input_state() -> None:
    state = sim.initialize(
        [_route()], [VehicleConfig("V1", "R1", speed_kmh=40.0)], QUIET
    )
    before = state.vehicles

    sim.advance(state, 300, rng=random.Random(3))

    assert state.vehicles is before
    assert state.vehicles[0].distance_traveled_km == 0.0
    assert state.tick == 0


def test_speed_drift_is_bounded_and_clamped() -> None:
    settings = SimulationSettings(
        min_speed_kmh=20.0,
        max_speed_kmh=70.0,
        speed_delta_kmh=100.0,
        speed_change_probability=1.0,
        status_change_probability=0.0,
    )
    state = sim.initialize(
        [_route()], [VehicleConfig("V1", "R1", speed_kmh=45.0)], settings
    )
    rng = random.Random(5)
    seen: set[float] = set()
    for _ in range(50):
        state = sim.advance(state, 1, rng=rng)
        speed = state.vehicles[0].speed_kmh
        assert 20.0 <= speed <= 70.0
        seen.add(speed)

    assert {20.0, 70.0} & seen


def test_status_carries_over_without_trigger() -> None:
    state = sim.initialize(
        [_route()],
        [VehicleConfig("V1", "R1", speed_kmh=20.0, status=VehicleStatus.AHEAD)],
        QUIET,
    )
    for _ in range(10):
        state = sim.advance(state, 30, rng=random.Random(0))

    # ETA is far above the delay threshold, yet status is left alone.
    assert state.vehicles[0].eta_min > QUIET.delay_threshold_min
    assert state.vehicles[0].status is VehicleStatus.AHEAD


def test_status_reclassified_when_trigger_fires() -> None:
    settings = SimulationSettings(
        speed_change_probability=0.0, status_change_probability=1.0
    )
    state = sim.initialize(
        [_route()],
        [VehicleConfig("V1", "R1", speed_kmh=20.0, status=VehicleStatus.AHEAD)],
        settings,
    )

    nxt = sim.advance(state, 30, rng=random.Random(0))

    assert nxt.vehicles[0].status is VehicleStatus.DELAYED


@pytest.mark.parametrize(
    ("eta", "progress", "expected"),
    [
        (31, 0.1, VehicleStatus.DELAYED),
        (30, 0.1, VehicleStatus.ON_TIME),
        (9, 0.81, VehicleStatus.AHEAD),
        (9, 0.8, VehicleStatus.ON_TIME),
        (10, 0.95, VehicleStatus.ON_TIME),
    ],
)
def test_classify_status_thresholds(
    eta: int, progress: float, expected: VehicleStatus
) -> None:
    assert sim.classify_status(eta, progress, SimulationSettings()) is expected


def test_initialize_classifies_when_status_missing() -> None:
    state = sim.initialize(
        [_route(total_km=10.0)],
        [VehicleConfig("V1", "R1", speed_kmh=60.0, distance_traveled_km=9.0)],
        QUIET,
    )
    v = state.vehicles[0]

    assert v.eta_min == 1
    assert v.status is VehicleStatus.AHEAD


def test_next_stop_follows_progress() -> None:
    route = TransitRoute(
        route_id="R1",
        name="Line",
        points=(
            RoutePoint("A", GeoPoint(lat=0.0, lon=0.0)),
            RoutePoint("B", GeoPoint(lat=0.0, lon=0.01)),
            RoutePoint("C", GeoPoint(lat=0.0, lon=0.02)),
        ),
        total_distance_km=2.0,
    )

    assert sim.next_stop_name(route, 0.0) == "B"
    assert sim.next_stop_name(route, 0.6) == "C"
    assert sim.next_stop_name(route, 1.0) == "C"


def test_build_route_derives_distance_from_polyline() -> None:
    route = sim.build_route(
        "R1",
        "Line",
        (
            RoutePoint("A", GeoPoint(lat=0.0, lon=0.0)),
            RoutePoint("B", GeoPoint(lat=1.0, lon=0.0)),
        ),
    )

    assert 100.0 < route.total_distance_km < 120.0


def test_snapshot_vehicles_are_read_only() -> None:
    state = sim.initialize(
        [_route()], [VehicleConfig("V1", "R1", speed_kmh=40.0)], QUIET
    )
    vehicles = sim.snapshot(state)

    with pytest.raises(FrozenInstanceError):
        vehicles[0].speed_kmh = 99.0  # type: ignore[misc]
    with pytest.raises(TypeError):
        state.routes["R9"] = _route("R9")  # type: ignore[index]


def test_initialize_rejects_unknown_route() -> None:
    with pytest.raises(ConfigError):
        sim.initialize([_route()], [VehicleConfig("V1", "NOPE", speed_kmh=40.0)])


@pytest.mark.parametrize("total_km", [0.0, -5.0])
def test_initialize_rejects_non_positive_distance(total_km: float) -> None:
    with pytest.raises(ConfigError):
        sim.initialize(
            [_route(total_km=total_km)], [VehicleConfig("V1", "R1", speed_kmh=40.0)]
        )


def test_initialize_rejects_single_waypoint_route() -> None:
    route = TransitRoute(
        route_id="R1",
        name="Stub",
        points=(RoutePoint("A", GeoPoint(lat=0.0, lon=0.0)),),
        total_distance_km=5.0,
    )
    with pytest.raises(ConfigError):
        sim.initialize([route], [])


@pytest.mark.parametrize(
    "cfg",
    [
        VehicleConfig("V1", "R1", speed_kmh=40.0, distance_traveled_km=-1.0),
        VehicleConfig("V1", "R1", speed_kmh=40.0, distance_traveled_km=70.0),
        VehicleConfig("V1", "R1", speed_kmh=5.0),
        VehicleConfig("V1", "R1", speed_kmh=500.0),
    ],
)
def test_initialize_rejects_out_of_range_vehicle(cfg: VehicleConfig) -> None:
    with pytest.raises(ConfigError):
        sim.initialize([_route()], [cfg])


def test_initialize_rejects_duplicate_vehicle_ids() -> None:
    with pytest.raises(ConfigError):
        sim.initialize(
            [_route()],
            [
                VehicleConfig("V1", "R1", speed_kmh=40.0),
                VehicleConfig("V1", "R1", speed_kmh=45.0),
            ],
        )


def test_advance_rejects_negative_elapsed() -> None:
    state = sim.initialize([_route()], [VehicleConfig("V1", "R1", speed_kmh=40.0)])
    with pytest.raises(ValueError):
        sim.advance(state, -1, rng=random.Random(0))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_speed_kmh": 0.0},
        {"min_speed_kmh": 50.0, "max_speed_kmh": 40.0},
        {"speed_change_probability": 1.5},
        {"status_change_probability": -0.1},
        {"tick_seconds": 0.0},
    ],
)
def test_settings_validation(kwargs: dict) -> None:
    with pytest.raises(ConfigError):
        SimulationSettings(**kwargs)


def test_initialize_rejects_mapping_key_that_disagrees_with_route_id() -> None:
    with pytest.raises(ConfigError):
        sim.initialize({"X": _route("Y")}, [VehicleConfig("V1", "X", speed_kmh=40.0)])


def test_initialize_accepts_mapping_keyed_by_route_id() -> None:
    state = sim.initialize(
        {"R1": _route("R1")}, [VehicleConfig("V1", "R1", speed_kmh=40.0)], QUIET
    )

    nxt = sim.advance(state, 30, rng=random.Random(0))

    assert nxt.vehicles[0].route_id == "R1"


@pytest.mark.parametrize("total_km", [float("inf"), float("nan")])
def test_initialize_rejects_non_finite_distance(total_km: float) -> None:
    with pytest.raises(ConfigError):
        sim.initialize(
            [_route(total_km=total_km)], [VehicleConfig("V1", "R1", speed_kmh=40.0)]
        )


@pytest.mark.parametrize(
    "cfg",
    [
        VehicleConfig("V1", "R1", speed_kmh=float("nan")),
        VehicleConfig("V1", "R1", speed_kmh=40.0, distance_traveled_km=float("nan")),
    ],
)
def test_initialize_rejects_non_finite_vehicle_values(cfg: VehicleConfig) -> None:
    with pytest.raises(ConfigError):
        sim.initialize([_route()], [cfg])


@pytest.mark.parametrize(
    "kwargs",
    [{"max_speed_kmh": float("inf")}, {"delay_threshold_min": float("nan")}],
)
def test_settings_reject_non_finite_values(kwargs: dict) -> None:
    with pytest.raises(ConfigError):
        SimulationSettings(**kwargs)
