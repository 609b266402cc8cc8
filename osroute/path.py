"""Route results: a path made of segments."""

from __future__ import annotations

from dataclasses import dataclass, field

from osroute.elevation_storage import Elevation
from osroute.geo import LatLng
from osroute.mode import Mode

__all__ = ["Segment", "Path"]


@dataclass
class Segment:
    """One piece of a path, along a single way or a connecting edge.

    ``None`` stands for no level, an invalid node or way, and an
    infeasible cost.
    """

    polyline: list[LatLng] = field(default_factory=list)
    from_level: float | None = None
    to_level: float | None = None
    from_: int | None = None
    to: int | None = None
    way: int | None = None
    cost: int | None = None
    dist: int = 0
    elevation: Elevation = field(default_factory=Elevation)
    mode: Mode = Mode.FOOT


@dataclass
class Path:
    """A route with its total cost, distance and segments."""

    cost: int | None = None
    dist: float = 0.0
    elevation: Elevation = field(default_factory=Elevation)
    segments: list[Segment] = field(default_factory=list)
    uses_elevator: bool = False
    track_node: int | None = None

    def total_elevation(self) -> Elevation:
        """Sum of the elevations of all segments."""
        total = Elevation()
        for segment in self.segments:
            total += segment.elevation
        return total