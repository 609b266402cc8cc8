import pytest

from osroute.mode import Mode, mode_to_str


@pytest.mark.parametrize(
    ("mode", "name"),
    [
        (Mode.FOOT, "foot"),
        (Mode.WHEELCHAIR, "wheelchair"),
        (Mode.CAR, "car"),
        (Mode.BIKE, "bike"),
    ],
)
def test_mode_names(mode, name):
    assert mode_to_str(mode) == name


def test_str_matches_mode_to_str():
    assert all(str(m) == mode_to_str(m) for m in Mode)


def test_names_are_unique():
    names = [mode_to_str(m) for m in Mode]
    assert len(set(names)) == len(names)


def test_invalid_mode_raises():
    with pytest.raises(ValueError):
        mode_to_str(7)