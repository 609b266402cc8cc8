import pytest

from osroute.hgt import GridPoint, parse_grid_point


@pytest.mark.parametrize(
    "name, expected",
    [
        ("N50E008.hgt", GridPoint(50, 8)),
        ("S33W070.hgt", GridPoint(-33, -70)),
        ("S90E000", GridPoint(-90, 0)),
        ("N00W180", GridPoint(0, -180)),
    ],
)
def test_valid_names(name, expected):
    assert parse_grid_point(name) == expected


@pytest.mark.parametrize(
    "name, message",
    [
        ("N90E000", "latitude"),
        ("N00E180", "longitude"),
        ("N91E000", "latitude"),
        ("X10E010", "direction"),
        ("N10X010", "direction"),
        ("", "direction"),
        ("N", "direction"),
    ],
)
def test_invalid_names(name, message):
    with pytest.raises(ValueError, match=message):
        parse_grid_point(name)