"""Elevation lookups over all raster tiles found in a directory."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Union

from osroute.dem import DemDriver, Resolution, TileIdx
from osroute.geo import LatLng

__all__ = ["ElevationProvider"]


class ElevationProvider:
    """Scans a directory tree for elevation tiles and answers queries."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._drivers: list[DemDriver] = []
        root = Path(path)
        if not root.is_dir():
            return
        dem = DemDriver()
        for file in sorted(root.rglob("*")):
            if file.is_file():
                dem.add_tile(file)
        if dem.n_tiles() > 0:
            self._drivers.append(dem)

    def get(self, pos: LatLng) -> int | None:
        """Elevation in meters at ``pos``, or None if no tile knows it."""
        for driver in self._drivers:
            meters = driver.get(pos)
            if meters is not None:
                return meters
        return None

    def tile_idx(self, pos: LatLng) -> TileIdx | None:
        """Ordering key of ``pos``, or None if no tile covers it."""
        for driver_idx, driver in enumerate(self._drivers):
            idx = driver.tile_idx(pos)
            if idx is not None:
                return replace(idx, driver_idx=driver_idx)
        return None

    def driver_count(self) -> int:
        """Number of drivers that hold at least one tile."""
        return len(self._drivers)

    def max_resolution(self) -> Resolution:
        """The finest pixel size over all drivers."""
        res = Resolution()
        for driver in self._drivers:
            res.update(driver.max_resolution())
        return res