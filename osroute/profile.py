"""Search profiles and their textual names."""

from __future__ import annotations

from enum import Enum

__all__ = ["SearchProfile", "to_profile", "profile_to_str", "is_rental_profile"]


class SearchProfile(Enum):
    """The profile a route search is run with."""

    FOOT = 0
    WHEELCHAIR = 1
    BIKE = 2
    BIKE_ELEVATION_LOW = 3
    BIKE_ELEVATION_HIGH = 4
    CAR = 5
    CAR_PARKING = 6
    CAR_PARKING_WHEELCHAIR = 7
    BIKE_SHARING = 8
    CAR_SHARING = 9

    def __str__(self) -> str:
        return profile_to_str(self)


_NAMES = {
    SearchProfile.FOOT: "foot",
    SearchProfile.WHEELCHAIR: "wheelchair",
    SearchProfile.BIKE: "bike",
    SearchProfile.BIKE_ELEVATION_LOW: "bike_elevation_low",
    SearchProfile.BIKE_ELEVATION_HIGH: "bike_elevation_high",
    SearchProfile.CAR: "car",
    SearchProfile.CAR_PARKING: "car_parking",
    SearchProfile.CAR_PARKING_WHEELCHAIR: "car_parking_wheelchair",
    SearchProfile.BIKE_SHARING: "bike_sharing",
    SearchProfile.CAR_SHARING: "car_sharing",
}

_BY_NAME = {name: profile for profile, name in _NAMES.items()}


def to_profile(s: str) -> SearchProfile:
    """Parse a profile name such as ``"bike_elevation_low"``."""
    try:
        return _BY_NAME[s]
    except (KeyError, TypeError):
        raise ValueError(f"{s} is not a valid profile") from None


def profile_to_str(p: SearchProfile) -> str:
    """Return the name of a search profile."""
    try:
        return _NAMES[p]
    except (KeyError, TypeError):
        raise ValueError(f"{p!r} is not a valid profile") from None


def is_rental_profile(p: SearchProfile) -> bool:
    """Tell whether the profile involves a shared vehicle."""
    return p in (SearchProfile.BIKE_SHARING, SearchProfile.CAR_SHARING)