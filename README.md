# osroute

Building blocks for routing on a street network: a way graph with turn
restrictions, connected components and big-street marking; elevation lookup
from EHdr/BIL raster tiles; compact per-segment elevation storage; and the
path structures a router produces.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `osroute.mode` – `Mode` of travel and `mode_to_str`.
- `osroute.profile` – `SearchProfile`, `to_profile`, `profile_to_str`,
  `is_rental_profile` (true for `BIKE_SHARING` and `CAR_SHARING`).
- `osroute.iteration` – `infinite` (cycles forever when asked, for loop
  ways) and `reverse_if`.
- `osroute.multi_counter` – `MultiCounter`, which records whether an index
  was counted more than once.
- `osroute.geo` – `LatLng`, `Box` and great-circle `distance` in meters.
- `osroute.dem` – `read_hdr_file`, `BilHeader`, `DemTile`, `DemDriver`,
  `Resolution`, `TileIdx`, `PixelType` and `DemError`. Tiles are single-band
  16-bit signed integer or 32-bit float rasters in little-endian byte order;
  a `.hdr` file and a `.bil` file of the same stem make one tile.
- `osroute.hgt` – `GridPoint` and `parse_grid_point`, which read the
  south-west corner from a tile name such as `N50E008`.
- `osroute.provider` – `ElevationProvider`, which scans a directory tree for
  `.hdr`/`.bil` tiles and answers `get`, `tile_idx`, `driver_count` and
  `max_resolution`.
- `osroute.ways` – `Ways`, `Routing`, `WayProperties`, `NodeProperties`,
  `Direction`, `RestrictionType`, `ResolvedRestriction`, `Restriction`.
- `osroute.elevation_storage` – `Elevation`, `Encoding`, `encode`,
  `decode_value`, `get_way_elevation`, `ElevationStorage`, `get_elevations`.
  Climb and descent are each compressed to a 4-bit code; `ElevationStorage`
  saves to and loads from `elevation_data.bin` and `elevation_idx.bin` in a
  directory.
- `osroute.path` – `Segment` and `Path`.
- `osroute.route` – `RoutingAlgorithm`, `to_algorithm`, `Location` and
  `try_direct`, which joins two locations less than 8 m apart with a
  straight one-segment path of cost 60.
- `osroute.candidates` – `NodeCandidate`, `WayCandidate` and
  `component_seen`.

## Examples

Profiles and the direct shortcut:

```python
from osroute.geo import LatLng
from osroute.profile import is_rental_profile, profile_to_str, to_profile
from osroute.route import Location, try_direct

profile = to_profile("bike_sharing")
assert profile_to_str(profile) == "bike_sharing"
assert is_rental_profile(profile)

start = Location(LatLng(50.0, 8.0))
dest = Location(LatLng(50.00001, 8.00001))
path = try_direct(start, dest)   # a Path, since the points are close
```

Building a graph. Ways are added in ascending OSM id order; every OSM node
used more than once becomes a graph node:

```python
from osroute.geo import LatLng
from osroute.ways import Ways, WayProperties

w = Ways()
props = WayProperties(is_foot_accessible=True)
w.add_way(1, [1, 2, 3], [LatLng(50.0, 8.0), LatLng(50.0, 8.001), LatLng(50.0, 8.002)], props)
w.add_way(2, [3, 4, 5], [LatLng(50.0, 8.002), LatLng(50.0, 8.003), LatLng(50.0, 8.004)],
          WayProperties(is_foot_accessible=True), name="Main Street")
w.connect_ways()
w.build_components()
assert w.find_node_idx(3) == 0
assert w.routing.way_component == [0, 0]
```

Elevation data:

```python
from osroute.geo import LatLng
from osroute.provider import ElevationProvider

provider = ElevationProvider("path/to/elevation")
if provider.driver_count():
    print(provider.get(LatLng(50.1, 8.6)))   # meters, or None
```

## What this package does not do

- It does not read OpenStreetMap files; ways are added with `Ways.add_way`.
- It does not run route searches: there is no shortest-path search, no
  matching of locations to nearby ways and no profile cost model. It holds
  the data such a search uses and produces (`Routing`, `WayCandidate`,
  `Path`).
- `ElevationProvider` reads only `.hdr`/`.bil` tiles; for HGT tiles only the
  file name is parsed (`parse_grid_point`), their heights are not read.
- The way graph is kept in memory; only elevations are saved to files.
- There is no command-line program.