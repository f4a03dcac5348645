from __future__ import annotations

import os
import random

from src.domain.models.fleet import SimulationSettings


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    return float(raw) if raw else default


def simulation_settings_from_env() -> SimulationSettings:
    """Simulation tuning from FLEET_* env vars; unset values keep defaults."""

    d = SimulationSettings()
    return SimulationSettings(
        tick_seconds=_env_float("FLEET_TICK_SECONDS", d.tick_seconds),
        min_speed_kmh=_env_float("FLEET_MIN_SPEED_KMH", d.min_speed_kmh),
        max_speed_kmh=_env_float("FLEET_MAX_SPEED_KMH", d.max_speed_kmh),
        speed_delta_kmh=_env_float("FLEET_SPEED_DELTA_KMH", d.speed_delta_kmh),
        speed_change_probability=_env_float(
            "FLEET_SPEED_CHANGE_PROBABILITY", d.speed_change_probability
        ),
        status_change_probability=_env_float(
            "FLEET_STATUS_CHANGE_PROBABILITY", d.status_change_probability
        ),
        delay_threshold_min=_env_float(
            "FLEET_DELAY_THRESHOLD_MIN", d.delay_threshold_min
        ),
        ahead_threshold_min=_env_float(
            "FLEET_AHEAD_THRESHOLD_MIN", d.ahead_threshold_min
        ),
        ahead_progress_threshold=_env_float(
            "FLEET_AHEAD_PROGRESS_THRESHOLD", d.ahead_progress_threshold
        ),
    )


def rng_from_env() -> random.Random:
    seed = (os.getenv("FLEET_SEED") or "").strip()
    return random.Random(int(seed)) if seed else random.Random()


def tick_interval_from_env(default: float = 3.0) -> float:
    return _env_float("FLEET_TICK_INTERVAL_S", default)
