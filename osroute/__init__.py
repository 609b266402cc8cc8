"""Street-network routing data: way graphs, BIL elevation tiles, elevation storage and paths."""

__version__ = "0.1.0"