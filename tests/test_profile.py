import pytest

from osroute.profile import (
    SearchProfile,
    is_rental_profile,
    profile_to_str,
    to_profile,
)


@pytest.mark.parametrize(
    ("name", "profile"),
    [
        ("foot", SearchProfile.FOOT),
        ("wheelchair", SearchProfile.WHEELCHAIR),
        ("bike", SearchProfile.BIKE),
        ("bike_elevation_low", SearchProfile.BIKE_ELEVATION_LOW),
        ("bike_elevation_high", SearchProfile.BIKE_ELEVATION_HIGH),
        ("car", SearchProfile.CAR),
        ("car_parking", SearchProfile.CAR_PARKING),
        ("car_parking_wheelchair", SearchProfile.CAR_PARKING_WHEELCHAIR),
        ("bike_sharing", SearchProfile.BIKE_SHARING),
        ("car_sharing", SearchProfile.CAR_SHARING),
    ],
)
def test_to_profile(name, profile):
    assert to_profile(name) is profile


@pytest.mark.parametrize("profile", list(SearchProfile))
def test_round_trip(profile):
    assert to_profile(profile_to_str(profile)) is profile
    assert str(profile) == profile_to_str(profile)


def test_unknown_profile_raises():
    with pytest.raises(ValueError, match="not a valid profile"):
        to_profile("rocket")


def test_profile_to_str_invalid_raises():
    with pytest.raises(ValueError):
        profile_to_str("foot")


def test_rental_profiles():
    rentals = {p for p in SearchProfile if is_rental_profile(p)}
    assert rentals == {SearchProfile.BIKE_SHARING, SearchProfile.CAR_SHARING}