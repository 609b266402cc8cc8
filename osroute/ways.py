"""The street graph: ways, graph nodes, restrictions and connectivity."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from itertools import groupby
from operator import attrgetter

from osroute.geo import LatLng, distance
from osroute.multi_counter import MultiCounter

__all__ = [
    "Direction",
    "RestrictionType",
    "ResolvedRestriction",
    "Restriction",
    "WayProperties",
    "NodeProperties",
    "Routing",
    "Ways",
]


class Direction(Enum):
    """Direction of travel along a way or of a search."""

    FORWARD = 0
    BACKWARD = 1

    def opposite(self) -> "Direction":
        """The other direction."""
        return Direction.BACKWARD if self is Direction.FORWARD else Direction.FORWARD


class RestrictionType(Enum):
    """Whether a turn restriction forbids a turn or allows only one."""

    NO = 0
    ONLY = 1


@dataclass(frozen=True)
class ResolvedRestriction:
    """A turn restriction expressed with internal way and node indices."""

    type: RestrictionType
    from_: int
    to: int
    via: int


@dataclass(frozen=True)
class Restriction:
    """A forbidden turn at a node, given as positions in the node's way list."""

    from_: int
    to: int


@dataclass
class WayProperties:
    """Routing-relevant attributes of a way."""

    is_foot_accessible: bool = False
    is_bike_accessible: bool = False
    is_car_accessible: bool = False
    is_destination: bool = False
    is_oneway_car: bool = False
    is_oneway_bike: bool = False
    is_elevator: bool = False
    is_steps: bool = False
    speed_limit: int = 0
    from_level: int = 0
    to_level: int = 0
    is_platform: bool = False
    is_parking: bool = False
    is_ramp: bool = False
    is_sidewalk_separate: bool = False
    motor_vehicle_no: bool = False
    has_toll: bool = False
    is_big_street: bool = False

    def is_accessible(self) -> bool:
        """Tell whether any of car, bike or foot may use the way."""
        return self.is_car_accessible or self.is_bike_accessible or self.is_foot_accessible


@dataclass
class NodeProperties:
    """Routing-relevant attributes of a graph node."""

    from_level: int = 0
    is_foot_accessible: bool = False
    is_bike_accessible: bool = False
    is_car_accessible: bool = False
    is_elevator: bool = False
    is_entrance: bool = False
    is_multi_level: bool = False
    is_parking: bool = False
    to_level: int = 0


@dataclass
class Routing:
    """The graph data that route searches read."""

    node_properties: list[NodeProperties] = field(default_factory=list)
    way_properties: list[WayProperties] = field(default_factory=list)
    way_nodes: list[list[int]] = field(default_factory=list)
    way_node_dist: list[list[int]] = field(default_factory=list)
    node_ways: list[list[int]] = field(default_factory=list)
    node_in_way_idx: list[list[int]] = field(default_factory=list)
    node_is_restricted: set[int] = field(default_factory=set)
    node_restrictions: list[list[Restriction]] = field(default_factory=list)
    node_positions: list[LatLng | None] = field(default_factory=list)
    multi_level_elevators: list[tuple[int, int]] = field(default_factory=list)
    way_component: list[int | None] = field(default_factory=list)

    def get_way_pos(self, node: int, way: int) -> int:
        """Position of ``way`` among the ways at ``node``; 0 if absent."""
        try:
            return self.node_ways[node].index(way)
        except ValueError:
            return 0

    def is_restricted(self, n: int, from_: int, to: int, search_dir: Direction) -> bool:
        """Tell whether turning from way position ``from_`` to ``to`` at ``n`` is forbidden."""
        if n not in self.node_is_restricted:
            return False
        needle = (
            Restriction(from_, to)
            if search_dir is Direction.FORWARD
            else Restriction(to, from_)
        )
        return needle in self.node_restrictions[n]

    def is_loop(self, way: int) -> bool:
        """Tell whether the way starts and ends at the same graph node."""
        nodes = self.way_nodes[way]
        return nodes[-1] == nodes[0]


class Ways:
    """Ways with their geometry, names and the routing graph built from them.

    Ways must be added in ascending OSM id order so that they can be found
    by id afterwards.
    """

    def __init__(self) -> None:
        self.routing = Routing()
        self.node_to_osm: list[int] = []
        self.way_osm_idx: list[int] = []
        self.way_polylines: list[list[LatLng]] = []
        self.way_osm_nodes: list[list[int]] = []
        self.strings: list[str] = []
        self.way_names: list[int | None] = []
        self.way_conditional_access_no: dict[int, int] = {}
        self.node_way_counter = MultiCounter()
        self._string_idx: dict[str, int] = {}

    def _register_string(self, s: str) -> int:
        idx = self._string_idx.get(s)
        if idx is None:
            idx = len(self.strings)
            self.strings.append(s)
            self._string_idx[s] = idx
        return idx

    def add_way(
        self,
        osm_id: int,
        osm_nodes: Sequence[int],
        polyline: Sequence[LatLng],
        properties: WayProperties,
        name: str | None = None,
        access_conditional_no: str | None = None,
    ) -> int:
        """Store a way and return its internal index."""
        if len(osm_nodes) != len(polyline):
            raise ValueError(
                f"way {osm_id}: {len(osm_nodes)} nodes but {len(polyline)} points"
            )
        way_idx = len(self.way_osm_idx)
        for osm_node in osm_nodes:
            self.node_way_counter.increment(osm_node)
        self.way_osm_idx.append(osm_id)
        self.way_polylines.append(list(polyline))
        self.way_osm_nodes.append(list(osm_nodes))
        self.routing.way_properties.append(properties)
        self.way_names.append(self._register_string(name) if name else None)
        if access_conditional_no:
            self.way_conditional_access_no[way_idx] = self._register_string(
                access_conditional_no
            )
        return way_idx

    def find_way(self, osm_way_id: int) -> int | None:
        """Internal index of the way with this OSM id, if present."""
        i = bisect_left(self.way_osm_idx, osm_way_id)
        if i != len(self.way_osm_idx) and self.way_osm_idx[i] == osm_way_id:
            return i
        return None

    def find_node_idx(self, osm_node_id: int) -> int | None:
        """Graph node index of the OSM node, if it is a graph node."""
        i = bisect_left(self.node_to_osm, osm_node_id)
        if i != len(self.node_to_osm) and self.node_to_osm[i] == osm_node_id:
            return i
        return None

    def get_node_idx(self, osm_node_id: int) -> int:
        """Graph node index of the OSM node; KeyError if it is none."""
        idx = self.find_node_idx(osm_node_id)
        if idx is None:
            raise KeyError(f"osm node {osm_node_id} not found")
        return idx

    def get_node_pos(self, node: int) -> LatLng | None:
        """Position of a graph node."""
        return self.routing.node_positions[node]

    def is_additional_node(self, node: int | None) -> bool:
        """Tell whether ``node`` lies beyond the graph's own nodes."""
        return node is not None and node >= self.n_nodes()

    def n_ways(self) -> int:
        """Number of ways."""
        return len(self.way_osm_idx)

    def n_nodes(self) -> int:
        """Number of graph nodes."""
        return len(self.node_to_osm)

    def connect_ways(self) -> None:
        """Make every OSM node used more than once a graph node and link the ways."""
        self.node_to_osm = list(self.node_way_counter.multi_indices())
        n = self.n_nodes()
        r = self.routing
        r.node_ways = [[] for _ in range(n)]
        r.node_in_way_idx = [[] for _ in range(n)]
        r.node_properties = [NodeProperties() for _ in range(n)]
        r.node_positions = [None] * n
        r.node_restrictions = [[] for _ in range(n)]
        r.node_is_restricted = set()
        r.way_nodes = []
        r.way_node_dist = []

        for way_idx, (osm_nodes, polyline) in enumerate(
            zip(self.way_osm_nodes, self.way_polylines)
        ):
            nodes: list[int] = []
            dists: list[int] = []
            pred_pos: LatLng | None = None
            dist = 0.0
            i = 0
            for osm_node, pos in zip(osm_nodes, polyline):
                if pred_pos is not None:
                    dist += distance(pos, pred_pos)
                if self.node_way_counter.is_multi(osm_node):
                    node = self.get_node_idx(osm_node)
                    r.node_ways[node].append(way_idx)
                    r.node_in_way_idx[node].append(i)
                    if r.node_positions[node] is None:
                        r.node_positions[node] = pos
                    if nodes:
                        dists.append(math.floor(dist + 0.5))
                    nodes.append(node)
                    dist = 0.0
                    i += 1
                pred_pos = pos
            r.way_nodes.append(nodes)
            r.way_node_dist.append(dists)

    def build_components(self) -> None:
        """Label every way with the index of its connected component."""
        r = self.routing
        r.way_component = [None] * self.n_ways()
        next_component = 0
        for way in range(self.n_ways()):
            if r.way_component[way] is not None:
                continue
            component = next_component
            next_component += 1
            r.way_component[way] = component
            pending = [way]
            while pending:
                current = pending.pop()
                for n in r.way_nodes[current]:
                    for w in r.node_ways[n]:
                        if r.way_component[w] is None:
                            r.way_component[w] = component
                            pending.append(w)

    def add_restriction(self, restrictions: Iterable[ResolvedRestriction]) -> None:
        """Record turn restrictions at their via nodes."""
        r = self.routing
        ordered = sorted(restrictions, key=attrgetter("via"))
        for via, group in groupby(ordered, key=attrgetter("via")):
            while len(r.node_restrictions) <= via:
                r.node_restrictions.append([])
            r.node_is_restricted.add(via)
            for x in group:
                if x.type is RestrictionType.NO:
                    r.node_restrictions[via].append(
                        Restriction(r.get_way_pos(via, x.from_), r.get_way_pos(via, x.to))
                    )
                else:
                    node_ways = r.node_ways[via]
                    r.node_restrictions[via].extend(
                        Restriction(i, j)
                        for i, from_way in enumerate(node_ways)
                        for j, to_way in enumerate(node_ways)
                        if x.from_ == from_way and x.to != to_way
                    )
        n = self.n_nodes()
        del r.node_restrictions[n:]
        r.node_restrictions.extend([] for _ in range(n - len(r.node_restrictions)))

    def compute_big_street_neighbors(self) -> None:
        """Mark ways that touch a big street as big streets themselves."""
        r = self.routing
        big = [p.is_big_street for p in r.way_properties]
        for way, props in enumerate(r.way_properties):
            if big[way]:
                continue
            if any(big[w] for n in r.way_nodes[way] for w in r.node_ways[n]):
                props.is_big_street = True

    def get_access_restriction(self, way: int) -> str | None:
        """The conditional ``access=no`` value of the way, if it has one."""
        idx = self.way_conditional_access_no.get(way)
        return None if idx is None else self.strings[idx]