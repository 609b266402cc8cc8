"""Routing algorithm selection, query locations and the short-distance shortcut."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from osroute.geo import LatLng, distance
from osroute.path import Path, Segment

__all__ = [
    "RoutingAlgorithm",
    "to_algorithm",
    "Location",
    "try_direct",
    "DIRECT_MAX_DISTANCE",
    "DIRECT_COST",
]

DIRECT_MAX_DISTANCE = 8.0
"""Below this distance in meters two locations are joined by a straight line."""

DIRECT_COST = 60
"""Cost in seconds given to a direct connection."""


class RoutingAlgorithm(Enum):
    """The search algorithm a route query is answered with."""

    DIJKSTRA = 0
    A_STAR = 1
    A_STAR_BI = 2


_ALGORITHMS = {
    "dijkstra": RoutingAlgorithm.DIJKSTRA,
    "a_star": RoutingAlgorithm.A_STAR,
    "bidirectional": RoutingAlgorithm.A_STAR_BI,
}


def to_algorithm(s: str) -> RoutingAlgorithm:
    """Parse an algorithm name: ``dijkstra``, ``a_star`` or ``bidirectional``."""
    try:
        return _ALGORITHMS[s]
    except (KeyError, TypeError):
        raise ValueError(f"unknown routing algorithm: {s}") from None


@dataclass(frozen=True)
class Location:
    """A query position with an optional building level (None: no level)."""

    pos: LatLng
    lvl: float | None = None


def try_direct(start: Location, dest: Location) -> Path | None:
    """A straight one-segment path if the locations are very close, else None."""
    dist = distance(start.pos, dest.pos)
    if dist >= DIRECT_MAX_DISTANCE:
        return None
    segment = Segment(
        polyline=[start.pos, dest.pos],
        from_level=start.lvl,
        to_level=dest.lvl,
        from_=None,
        to=None,
        way=None,
        cost=DIRECT_COST,
        dist=int(dist),
    )
    return Path(
        cost=DIRECT_COST,
        dist=dist,
        segments=[segment],
        uses_elevator=False,
    )