from __future__ import annotations

import math
from typing import Sequence

from src.domain.models import GeoPoint


def haversine_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in meters."""

    r = 6371000.0
    lat1 = math.radians(a.lat)
    lon1 = math.radians(a.lon)
    lat2 = math.radians(b.lat)
    lon2 = math.radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    return 2.0 * r * math.asin(math.sqrt(s))


def interpolate(a: GeoPoint, b: GeoPoint, t: float) -> GeoPoint:
    """Straight-line (lat/lon space) interpolation; t is clamped to [0, 1]."""

    t = max(0.0, min(1.0, float(t)))
    return GeoPoint(
        lat=a.lat + (b.lat - a.lat) * t,
        lon=a.lon + (b.lon - a.lon) * t,
    )


def polyline_length_km(points: Sequence[GeoPoint]) -> float:
    total = 0.0
    for i in range(1, len(points)):
        total += haversine_distance_m(points[i - 1], points[i])
    return total / 1000.0


def cumulative_fractions(points: Sequence[GeoPoint]) -> tuple[float, ...]:
    """Fraction of the polyline length reached at each vertex.

    Degenerate polylines (zero length) spread vertices evenly.
    """

    n = len(points)
    if n == 0:
        return ()
    if n == 1:
        return (1.0,)

    cumulative = [0.0]
    for i in range(1, n):
        cumulative.append(cumulative[-1] + haversine_distance_m(points[i - 1], points[i]))

    total = cumulative[-1]
    if total <= 0.0:
        return tuple(i / (n - 1) for i in range(n))
    return tuple(c / total for c in cumulative)
