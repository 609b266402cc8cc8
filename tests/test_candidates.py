import pytest

from osroute.candidates import NodeCandidate, WayCandidate, component_seen
from osroute.geo import LatLng
from osroute.ways import WayProperties, Ways


def _props() -> WayProperties:
    return WayProperties(is_foot_accessible=True)


@pytest.fixture
def ways() -> Ways:
    w = Ways()
    # Ways 0 and 1 share OSM node 2; way 2 stands alone.
    w.add_way(100, [1, 2], [LatLng(50.0, 8.0), LatLng(50.001, 8.0)], _props())
    w.add_way(101, [2, 3], [LatLng(50.001, 8.0), LatLng(50.002, 8.0)], _props())
    w.add_way(102, [10, 11], [LatLng(51.0, 9.0), LatLng(51.001, 9.0)], _props())
    w.connect_ways()
    w.build_components()
    return w


def _match(way: int, dist: float = 1.0) -> WayCandidate:
    return WayCandidate(dist_to_way=dist, way=way)


def test_components_of_fixture(ways):
    comps = ways.routing.way_component
    assert comps[0] == comps[1]
    assert comps[2] != comps[0]


def test_first_match_never_seen(ways):
    matches = [_match(0), _match(1)]
    assert component_seen(ways, matches, 0) is False


def test_same_component_seen_before(ways):
    matches = [_match(0), _match(1)]
    assert component_seen(ways, matches, 1) is True


def test_other_component_not_seen(ways):
    matches = [_match(0), _match(2)]
    assert component_seen(ways, matches, 1) is False


def test_times_counts_occurrences(ways):
    matches = [_match(0), _match(2), _match(1), _match(0)]
    assert component_seen(ways, matches, 3, 2) is True
    assert component_seen(ways, matches, 3, 3) is False
    assert component_seen(ways, matches, 2, 2) is False


def test_node_candidate_valid():
    assert NodeCandidate().valid() is False
    assert NodeCandidate(node=0).valid() is True


def test_way_candidates_sort_by_distance():
    far = WayCandidate(dist_to_way=5.0, way=1)
    near = WayCandidate(dist_to_way=2.0, way=7)
    assert [c.way for c in sorted([far, near])] == [7, 1]


def test_way_candidate_defaults_are_invalid():
    wc = WayCandidate(dist_to_way=3.0, way=4)
    assert not wc.left.valid()
    assert not wc.right.valid()
    assert wc.left is not wc.right