"""Parsing of SRTM height tile names such as ``N50E008``."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["GridPoint", "parse_grid_point"]

_GRID_NAME = re.compile(
    r"\s*(?P<lat_dir>\S)"
    r"(?:\s*(?P<lat>[+-]?\d+)"
    r"(?:\s*(?P<lng_dir>\S)"
    r"(?:\s*(?P<lng>[+-]?\d+))?)?)?"
)


@dataclass(frozen=True)
class GridPoint:
    """South-west corner of a one-degree tile, in whole degrees."""

    lat: int
    lng: int


def parse_grid_point(name: str) -> GridPoint:
    """Read the corner from a tile name; raise ValueError if it is invalid."""
    match = _GRID_NAME.match(name)
    groups = match.groupdict() if match else {}
    lat_dir = groups.get("lat_dir") or ""
    lng_dir = groups.get("lng_dir") or ""
    lat = int(groups.get("lat") or 0)
    lng = int(groups.get("lng") or 0)

    if lat_dir not in ("S", "N") or not lat_dir:
        raise ValueError(f"Invalid direction '{lat_dir}'")
    if lng_dir not in ("W", "E") or not lng_dir:
        raise ValueError(f"Invalid direction '{lng_dir}'")
    if not -180 <= lng <= 180:
        raise ValueError(f"Invalid longitude '{lng}'")
    if not -90 <= lat <= 90:
        raise ValueError(f"Invalid latitude '{lat}'")

    signed_lat = lat if lat_dir == "N" else -lat
    signed_lng = lng if lng_dir == "E" else -lng

    if not -180 <= signed_lng < 180:
        raise ValueError(f"Invalid longitude '{lng}'")
    if not -90 <= signed_lat < 90:
        raise ValueError(f"Invalid latitude '{lat}'")
    return GridPoint(signed_lat, signed_lng)