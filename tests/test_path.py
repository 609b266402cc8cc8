from osroute.elevation_storage import Elevation
from osroute.geo import LatLng
from osroute.mode import Mode
from osroute.path import Path, Segment


def test_segment_defaults():
    seg = Segment()
    assert seg.mode is Mode.FOOT
    assert seg.from_ is None and seg.way is None
    assert seg.elevation == Elevation()
    assert seg.polyline == []


def test_path_defaults():
    p = Path()
    assert p.dist == 0.0
    assert p.uses_elevator is False
    assert p.elevation == Elevation()
    assert p.segments == []


def test_default_lists_are_independent():
    a, b = Path(), Path()
    a.segments.append(Segment())
    assert b.segments == []
    s1, s2 = Segment(), Segment()
    s1.polyline.append(LatLng(1.0, 2.0))
    assert s2.polyline == []


def test_total_elevation_empty():
    assert Path().total_elevation() == Elevation()


def test_total_elevation_sums_segments():
    s1 = Segment(elevation=Elevation(up=1, down=2))
    s2 = Segment(elevation=Elevation(up=3, down=4))
    p = Path(segments=[s1, s2])
    assert p.total_elevation() == s1.elevation + s2.elevation


def test_total_elevation_of_reversed_segments_is_symmetric():
    s1 = Segment(elevation=Elevation(up=5, down=1))
    p = Path(segments=[s1, Segment(elevation=s1.elevation.swapped())])
    total = p.total_elevation()
    assert total.up == total.down