"""Per-segment elevation gain and loss, compressed to four bits each."""

from __future__ import annotations

import logging
import math
import struct
from bisect import bisect_left
from dataclasses import dataclass
from itertools import pairwise
from operator import itemgetter
from pathlib import Path
from typing import Protocol, Union

from osroute.dem import Resolution, TileIdx
from osroute.geo import LatLng
from osroute.ways import Ways

__all__ = [
    "Elevation",
    "Encoding",
    "encode",
    "decode_value",
    "get_way_elevation",
    "ElevationStorage",
    "get_elevations",
    "DATA_FILE_NAME",
    "INDEX_FILE_NAME",
    "COMPRESSED_VALUES",
]

log = logging.getLogger(__name__)

DATA_FILE_NAME = "elevation_data.bin"
INDEX_FILE_NAME = "elevation_idx.bin"

COMPRESSED_VALUES = (0, 1, 2, 4, 6, 8, 11, 14, 17, 21, 25, 29, 34, 38, 43, 48)

_SAFETY_FACTOR = 1.000001
_INDEX_ENTRY = struct.Struct("<Q")


class ElevationSource(Protocol):
    """What elevation computations need from a provider."""

    def get(self, pos: LatLng) -> int | None: ...

    def tile_idx(self, pos: LatLng) -> TileIdx | None: ...

    def max_resolution(self) -> Resolution: ...


@dataclass(frozen=True)
class Elevation:
    """Accumulated climb (``up``) and descent (``down``) in meters."""

    up: int = 0
    down: int = 0

    def swapped(self) -> "Elevation":
        """The same elevation seen when travelling the other way."""
        return Elevation(up=self.down, down=self.up)

    def __add__(self, other: "Elevation") -> "Elevation":
        if not isinstance(other, Elevation):
            return NotImplemented
        return Elevation(self.up + other.up, self.down + other.down)

    def __iadd__(self, other: "Elevation") -> "Elevation":
        return self.__add__(other)


def encode(value: int) -> int:
    """Compress meters to a 4-bit code, rounding up to the next table value."""
    code = bisect_left(COMPRESSED_VALUES, value)
    return min(code, len(COMPRESSED_VALUES) - 1)


def decode_value(code: int) -> int:
    """Meters represented by a 4-bit code."""
    if not 0 <= code < len(COMPRESSED_VALUES):
        raise ValueError(f"invalid elevation code {code}")
    return COMPRESSED_VALUES[code]


@dataclass(frozen=True)
class Encoding:
    """An :class:`Elevation` compressed to two 4-bit codes."""

    up: int = 0
    down: int = 0

    def __post_init__(self) -> None:
        for code in (self.up, self.down):
            if not 0 <= code < len(COMPRESSED_VALUES):
                raise ValueError(f"invalid elevation code {code}")

    @classmethod
    def from_elevation(cls, e: Elevation) -> "Encoding":
        """Compress an elevation."""
        return cls(up=encode(e.up), down=encode(e.down))

    def decode(self) -> Elevation:
        """The elevation this encoding stands for."""
        return Elevation(up=decode_value(self.up), down=decode_value(self.down))

    def __bool__(self) -> bool:
        return self.up != 0 or self.down != 0

    def to_byte(self) -> int:
        """Pack both codes into one byte, ``up`` in the low nibble."""
        return self.up | (self.down << 4)

    @classmethod
    def from_byte(cls, b: int) -> "Encoding":
        """Unpack a byte written by :meth:`to_byte`."""
        return cls(up=b & 0x0F, down=(b >> 4) & 0x0F)


def _adjust_lng(x: float) -> float:
    """Map a longitude in [-360, 360] to [-180, 180]."""
    if x < -180.0:
        return x + 360.0
    if x <= 180.0:
        return x
    return x - 360.0


def get_way_elevation(
    provider: ElevationSource, start: LatLng, end: LatLng, res: Resolution
) -> Elevation:
    """Climb and descent between two points, sampled at the given resolution."""
    a = provider.get(start)
    b = provider.get(end)
    if a is None or b is None:
        return Elevation()

    up = 0
    down = 0
    lng_diff = _adjust_lng(end.lng - start.lng)
    lat_diff = end.lat - start.lat
    steps = int(
        max(
            math.ceil(_SAFETY_FACTOR * abs(lat_diff) / res.y),
            math.ceil(_SAFETY_FACTOR * abs(lng_diff) / res.x),
        )
    )
    if steps > 1:
        step_lng = lng_diff / steps
        step_lat = lat_diff / steps
        for s in range(1, steps):
            m = provider.get(
                LatLng(start.lat + s * step_lat, _adjust_lng(start.lng + s * step_lng))
            )
            if m is None:
                continue
            if a < m:
                up += m - a
            else:
                down += a - m
            a = m
    if a < b:
        up += b - a
    else:
        down += a - b
    return Elevation(up=up, down=down)


class ElevationStorage:
    """Encoded elevations for every segment of every way, kept in a directory."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._elevations: list[list[Encoding]] = []

    @classmethod
    def try_open(cls, path: Union[str, Path]) -> "ElevationStorage | None":
        """Load stored elevations, or return None if the files are missing."""
        root = Path(path)
        for name in (DATA_FILE_NAME, INDEX_FILE_NAME):
            full = root / name
            if not full.exists():
                log.warning("Elevation file %s does not exist", full)
                return None

        data = (root / DATA_FILE_NAME).read_bytes()
        index = (root / INDEX_FILE_NAME).read_bytes()
        if len(index) % _INDEX_ENTRY.size != 0:
            raise ValueError(f"corrupt elevation index: {len(index)} bytes")
        starts = [entry for (entry,) in _INDEX_ENTRY.iter_unpack(index)]
        if starts and (
            starts[0] != 0
            or starts[-1] != len(data)
            or any(x > y for x, y in pairwise(starts))
        ):
            raise ValueError("corrupt elevation index: bucket bounds do not match data")
        if not starts and data:
            raise ValueError("corrupt elevation index: data without index")

        storage = cls(root)
        storage._elevations = [
            [Encoding.from_byte(byte) for byte in data[lo:hi]]
            for lo, hi in pairwise(starts)
        ]
        return storage

    def save(self) -> None:
        """Write the elevations to the storage directory."""
        self.path.mkdir(parents=True, exist_ok=True)
        data = bytearray()
        starts = [0]
        for bucket in self._elevations:
            data.extend(e.to_byte() for e in bucket)
            starts.append(len(data))
        (self.path / DATA_FILE_NAME).write_bytes(bytes(data))
        (self.path / INDEX_FILE_NAME).write_bytes(
            b"".join(_INDEX_ENTRY.pack(s) for s in starts)
        )

    def get_elevations(self, way: int, segment: int) -> Elevation:
        """Elevation of one segment of a way; zero if none is stored."""
        if 0 <= way < len(self._elevations):
            bucket = self._elevations[way]
            if 0 <= segment < len(bucket):
                return bucket[segment].decode()
        return Elevation()

    def set_elevations(self, ways: Ways, provider: ElevationSource) -> None:
        """Compute and store elevations for all ways of the graph."""
        r = ways.routing
        res = provider.max_resolution()

        order: list[tuple[TileIdx, int]] = []
        for way_idx, nodes in enumerate(r.way_nodes):
            if not nodes:
                continue
            tile = provider.tile_idx(ways.get_node_pos(nodes[0]))
            if tile is not None:
                order.append((tile, way_idx))
        order.sort(key=itemgetter(0))

        computed: dict[int, list[Encoding]] = {}
        for _, way_idx in order:
            encodings: list[Encoding] = []
            for seg_idx, (a, b) in enumerate(pairwise(r.way_nodes[way_idx])):
                enc = Encoding.from_elevation(
                    get_way_elevation(
                        provider, ways.get_node_pos(a), ways.get_node_pos(b), res
                    )
                )
                if enc:
                    encodings.extend(Encoding() for _ in range(seg_idx - len(encodings)))
                    encodings.append(enc)
            if encodings:
                computed[way_idx] = encodings

        self._elevations = []
        for way_idx in sorted(computed):
            self._elevations.extend([] for _ in range(way_idx - len(self._elevations)))
            self._elevations.append(computed[way_idx])


def get_elevations(
    storage: ElevationStorage | None, way: int, segment: int
) -> Elevation:
    """Segment elevation from an optional storage; zero without one."""
    if storage is None:
        return Elevation()
    return storage.get_elevations(way, segment)