"""Elevation tiles in the EHdr/BIL raster format and a driver over them."""

from __future__ import annotations

import math
import mmap
import re
import struct
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Iterator, Mapping, Union

from osroute.geo import Box, LatLng

__all__ = [
    "Resolution",
    "TileIdx",
    "PixelType",
    "DemError",
    "BilHeader",
    "read_hdr_file",
    "DemTile",
    "DemDriver",
    "SUB_TILE_IDX_SIZE",
    "NO_DATA",
]

SUB_TILE_IDX_SIZE = 16
_PIXELS_PER_DEGREE = 1 << (SUB_TILE_IDX_SIZE // 2)

NO_DATA = -32768

PixelValue = Union[int, float]


@dataclass
class Resolution:
    """Pixel size in degrees; ``update`` keeps the finest seen."""

    x: float = math.inf
    y: float = math.inf

    def update(self, other: "Resolution") -> "Resolution":
        """Merge another resolution into this one, keeping the smaller sizes."""
        self.x = min(self.x, other.x)
        self.y = min(self.y, other.y)
        return self


@dataclass(frozen=True, order=True)
class TileIdx:
    """Orders locations by elevation driver, tile and sub-tile."""

    driver_idx: int = 0
    tile_idx: int = 0
    sub_tile_idx: int = 0


class PixelType(Enum):
    """Sample type of a raster; the value is its little-endian struct format."""

    INT16 = "<h"
    FLOAT32 = "<f"


class DemError(RuntimeError):
    """A raster tile is missing, malformed or unsupported."""


def read_hdr_file(path: Union[str, Path]) -> dict[str, str]:
    """Read whitespace-separated key/value pairs, upper-casing both."""
    tokens = Path(path).read_text().split()
    pairs = iter(tokens)
    return {key.upper(): value.upper() for key, value in zip(pairs, pairs)}


_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def _get_string(hdr: Mapping[str, str], key: str, default: str = "") -> str:
    value = hdr.get(key, "")
    return value if value else default


def _get_int(hdr: Mapping[str, str], key: str, default: int) -> int:
    value = _get_string(hdr, key)
    if not value:
        return default
    match = _INT_PREFIX.match(value)
    if match is None:
        raise DemError(f"Invalid integer for {key}: {value!r}")
    return int(match.group())


def _get_float(hdr: Mapping[str, str], key: str, default: float) -> float:
    value = _get_string(hdr, key)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        raise DemError(f"Invalid number for {key}: {value!r}") from None


def _to_int16(value: int) -> int:
    return (value + 0x8000) % 0x10000 - 0x8000


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


@dataclass(frozen=True)
class BilHeader:
    """The parts of an ``.hdr`` file that describe a single-band BIL raster."""

    rows: int
    cols: int
    ulx: float
    uly: float
    brx: float
    bry: float
    xdim: float
    ydim: float
    pixel_size: int
    row_size: int
    pixel_type: PixelType
    nodata: PixelValue

    @classmethod
    def from_mapping(cls, hdr: Mapping[str, str]) -> "BilHeader":
        """Build a header from upper-cased key/value pairs, validating them."""
        rows = _get_int(hdr, "NROWS", 0)
        cols = _get_int(hdr, "NCOLS", 0)
        if rows == 0 or cols == 0:
            raise DemError("Missing nrows/ncols")
        if _get_int(hdr, "NBANDS", 1) != 1:
            raise DemError("Unsupported nbands value")
        if _get_string(hdr, "BYTEORDER", "I") != "I":
            raise DemError("Unsupported byte order")
        if _get_int(hdr, "SKIPBYTES", 0) != 0:
            raise DemError("Unsupported skipbytes")

        nbits = _get_int(hdr, "NBITS", 8)
        pixeltype = _get_string(hdr, "PIXELTYPE", "UNSIGNEDINT")
        if nbits == 16 and pixeltype.startswith("S"):
            pixel_type = PixelType.INT16
        elif nbits == 32 and pixeltype.startswith("F"):
            pixel_type = PixelType.FLOAT32
        else:
            raise DemError("Unsupported pixeltype")
        pixel_size = nbits // 8
        row_size = pixel_size * cols

        if not _get_string(hdr, "ULXMAP") or not _get_string(hdr, "ULYMAP"):
            raise DemError("Missing ulxmap/ulymap")
        ulx = _get_float(hdr, "ULXMAP", 0.0)
        uly = _get_float(hdr, "ULYMAP", 0.0)

        xdim = _get_float(hdr, "XDIM", 0.0)
        ydim = _get_float(hdr, "YDIM", 0.0)
        if xdim == 0.0 or ydim == 0.0:
            raise DemError("Missing xdim/ydim")

        nodata: PixelValue
        if pixel_type is PixelType.INT16:
            nodata = _to_int16(_get_int(hdr, "NODATA", 0))
        else:
            nodata = _to_float32(_get_float(hdr, "NODATA", 0.0))

        bandrowbytes = _get_int(hdr, "BANDROWBYTES", row_size)
        totalrowbytes = _get_int(hdr, "TOTALROWBYTES", row_size)
        if bandrowbytes != row_size or totalrowbytes != row_size:
            raise DemError("Unsupported bandrowbytes/totalrowbytes")

        return cls(
            rows=rows,
            cols=cols,
            ulx=ulx,
            uly=uly,
            brx=ulx + cols * xdim,
            bry=uly - rows * ydim,
            xdim=xdim,
            ydim=ydim,
            pixel_size=pixel_size,
            row_size=row_size,
            pixel_type=pixel_type,
            nodata=nodata,
        )


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return -rounded if value < 0 else rounded


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class DemTile:
    """One BIL raster, opened through its ``.hdr`` (or ``.bil``) path."""

    def __init__(self, path: Union[str, Path]) -> None:
        path = Path(path)
        self.data_file = path.with_name(path.stem + ".bil")
        if not self.data_file.exists():
            raise DemError(f"Missing bil file: {self.data_file}")
        hdr_path = self.data_file.with_name(self.data_file.stem + ".hdr")
        if not hdr_path.exists():
            raise DemError(f"Missing hdr file: {hdr_path}")
        self.header = BilHeader.from_mapping(read_hdr_file(hdr_path))

        hdr = self.header
        expected = hdr.row_size * hdr.rows
        actual = self.data_file.stat().st_size
        if actual != expected:
            raise DemError(
                f"BIL tile '{self.data_file}' ({hdr.cols}x{hdr.rows}) "
                f"has incorrect file size ({actual} != {expected})"
            )
        with open(self.data_file, "rb") as f:
            self._data = mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ)

        self._box = Box()
        self._box.extend(LatLng(hdr.bry, hdr.brx))
        self._box.extend(LatLng(hdr.uly, hdr.ulx))

    def get_box(self) -> Box:
        """The area the raster covers."""
        return Box(self._box.min, self._box.max)

    def get_raw(self, pos: LatLng) -> PixelValue:
        """The stored sample at ``pos``, or the no-data value outside the tile."""
        hdr = self.header
        if not self._box.contains(pos):
            return hdr.nodata
        pix_x = _clamp(int((pos.lng - hdr.ulx) / hdr.xdim), 0, hdr.cols - 1)
        pix_y = _clamp(int((hdr.uly - pos.lat) / hdr.ydim), 0, hdr.rows - 1)
        offset = hdr.row_size * pix_y + hdr.pixel_size * pix_x
        return struct.unpack_from(hdr.pixel_type.value, self._data, offset)[0]

    def get(self, pos: LatLng) -> int | None:
        """Elevation in whole meters at ``pos``, or None where there is no data."""
        hdr = self.header
        value = self.get_raw(pos)
        if value == hdr.nodata:
            return None
        if hdr.pixel_type is PixelType.FLOAT32:
            if not math.isfinite(value):
                return None
            value = _to_int16(_round_half_away(value))
        return None if value == NO_DATA else int(value)

    def tile_idx(self, pos: LatLng) -> TileIdx:
        """Sub-tile ordering key of ``pos`` within this tile."""
        if not self._box.contains(pos):
            return TileIdx(sub_tile_idx=0)
        hdr = self.header
        size = _PIXELS_PER_DEGREE
        pix_x = _clamp(int((pos.lng - hdr.ulx) * size), 0, size - 1)
        pix_y = _clamp(int((hdr.uly - pos.lat) * size), 0, size - 1)
        return TileIdx(sub_tile_idx=pix_x * size + pix_y)

    def max_resolution(self) -> Resolution:
        """The pixel size of this tile."""
        return Resolution(self.header.xdim, self.header.ydim)


class DemDriver:
    """A collection of BIL tiles queried by position."""

    def __init__(self) -> None:
        self._tiles: list[DemTile] = []

    def add_tile(self, path: Union[str, Path]) -> bool:
        """Add the tile described by an ``.hdr`` file; other files are refused."""
        if Path(path).suffix != ".hdr":
            return False
        self._tiles.append(DemTile(path))
        return True

    def _containing(self, pos: LatLng) -> Iterator[tuple[int, DemTile]]:
        for idx, tile in enumerate(self._tiles):
            if tile.get_box().contains(pos):
                yield idx, tile

    def get(self, pos: LatLng) -> int | None:
        """The first valid elevation any tile holds at ``pos``."""
        for _, tile in self._containing(pos):
            meters = tile.get(pos)
            if meters is not None:
                return meters
        return None

    def tile_idx(self, pos: LatLng) -> TileIdx | None:
        """Ordering key of ``pos``, or None if no tile covers it."""
        for idx, tile in self._containing(pos):
            return replace(tile.tile_idx(pos), tile_idx=idx)
        return None

    def max_resolution(self) -> Resolution:
        """The finest pixel size over all tiles."""
        res = Resolution()
        for tile in self._tiles:
            res.update(tile.max_resolution())
        return res

    def n_tiles(self) -> int:
        """Number of tiles added."""
        return len(self._tiles)