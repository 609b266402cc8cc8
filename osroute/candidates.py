"""Candidates that match a query location to nearby ways and graph nodes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from osroute.geo import LatLng
from osroute.ways import Direction, Ways

__all__ = ["NodeCandidate", "WayCandidate", "component_seen"]


@dataclass
class NodeCandidate:
    """A graph node reachable from a matched position along its way.

    ``node`` is None when no graph node was found in that direction.
    """

    node: int | None = None
    cost: int = 0
    dist_to_node: float = 0.0
    lvl: float | None = None
    way_dir: Direction = Direction.FORWARD
    path: list[LatLng] = field(default_factory=list)

    def valid(self) -> bool:
        """Tell whether the candidate leads to a graph node."""
        return self.node is not None


@dataclass(order=True)
class WayCandidate:
    """A way near a query location with the nodes to its left and right.

    Candidates order by their distance to the query location.
    """

    dist_to_way: float
    way: int = field(compare=False)
    left: NodeCandidate = field(default_factory=NodeCandidate, compare=False)
    right: NodeCandidate = field(default_factory=NodeCandidate, compare=False)


def component_seen(
    ways: Ways,
    matches: Sequence[WayCandidate],
    match_idx: int,
    times: int = 1,
) -> bool:
    """Tell whether the component of ``matches[match_idx]`` occurs ``times``
    times among the matches before it."""
    components = ways.routing.way_component
    this_component = components[matches[match_idx].way]
    for earlier in matches[:match_idx]:
        if components[earlier.way] == this_component:
            times -= 1
            if times == 0:
                return True
    return False