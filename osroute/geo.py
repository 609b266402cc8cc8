"""Basic geographic types: coordinates, bounding boxes and distances."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

__all__ = ["LatLng", "Box", "distance", "EARTH_RADIUS_METERS"]

EARTH_RADIUS_METERS = 6_371_000.0


@dataclass(frozen=True)
class LatLng:
    """A WGS84 coordinate in degrees."""

    lat: float
    lng: float


def _empty_min() -> LatLng:
    return LatLng(math.inf, math.inf)


def _empty_max() -> LatLng:
    return LatLng(-math.inf, -math.inf)


@dataclass
class Box:
    """An axis-aligned latitude/longitude box; empty until extended."""

    min: LatLng = field(default_factory=_empty_min)
    max: LatLng = field(default_factory=_empty_max)

    def contains(self, pos: LatLng) -> bool:
        """Tell whether ``pos`` lies inside the box, edges included."""
        return (
            self.min.lat <= pos.lat <= self.max.lat
            and self.min.lng <= pos.lng <= self.max.lng
        )

    def extend(self, pos: LatLng) -> None:
        """Grow the box so that it contains ``pos``."""
        self.min = LatLng(min(self.min.lat, pos.lat), min(self.min.lng, pos.lng))
        self.max = LatLng(max(self.max.lat, pos.lat), max(self.max.lng, pos.lng))


def distance(a: LatLng, b: LatLng) -> float:
    """Great-circle distance between two coordinates in meters."""
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    d_lat = lat2 - lat1
    d_lng = math.radians(b.lng - a.lng)
    h = (
        math.sin(d_lat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2.0) ** 2
    )
    return 2.0 * EARTH_RADIUS_METERS * math.asin(min(1.0, math.sqrt(h)))