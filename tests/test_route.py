import pytest

from osroute.geo import LatLng, distance
from osroute.route import (
    Location,
    RoutingAlgorithm,
    to_algorithm,
    try_direct,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("dijkstra", RoutingAlgorithm.DIJKSTRA),
        ("a_star", RoutingAlgorithm.A_STAR),
        ("bidirectional", RoutingAlgorithm.A_STAR_BI),
    ],
)
def test_to_algorithm_known_names(name, expected):
    assert to_algorithm(name) is expected


@pytest.mark.parametrize("name", ["", "Dijkstra", "astar", "bi"])
def test_to_algorithm_unknown_raises(name):
    with pytest.raises(ValueError, match="unknown routing algorithm"):
        to_algorithm(name)


def test_try_direct_same_point():
    loc = Location(LatLng(50.0, 8.0))
    p = try_direct(loc, loc)
    assert p is not None
    assert p.cost == 60
    assert p.dist == 0.0
    assert len(p.segments) == 1
    assert p.segments[0].cost == 60
    assert p.segments[0].dist == 0
    assert p.uses_elevator is False


def test_try_direct_close_points_segment_geometry():
    a = Location(LatLng(50.0, 8.0), lvl=1.0)
    b = Location(LatLng(50.0, 8.00005), lvl=2.0)
    p = try_direct(a, b)
    assert p is not None
    assert p.dist == pytest.approx(distance(a.pos, b.pos))
    seg = p.segments[0]
    assert seg.polyline == [a.pos, b.pos]
    assert seg.from_level == a.lvl
    assert seg.to_level == b.lvl
    assert seg.from_ is None and seg.to is None and seg.way is None
    assert seg.dist <= p.dist < seg.dist + 1


def test_try_direct_far_points_returns_none():
    a = Location(LatLng(50.0, 8.0))
    b = Location(LatLng(50.01, 8.0))
    assert try_direct(a, b) is None


def test_try_direct_is_symmetric_in_distance():
    a = Location(LatLng(10.0, 20.0))
    b = Location(LatLng(10.00003, 20.00003))
    forward = try_direct(a, b)
    backward = try_direct(b, a)
    assert forward is not None and backward is not None
    assert forward.dist == pytest.approx(backward.dist)
    assert backward.segments[0].polyline == [b.pos, a.pos]


def test_location_default_level_is_none():
    loc = Location(LatLng(1.0, 2.0))
    p = try_direct(loc, loc)
    assert p.segments[0].from_level is None
    assert p.segments[0].to_level is None