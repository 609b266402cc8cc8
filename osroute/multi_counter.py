"""Counter that records whether an index was seen once or more than once."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["MultiCounter"]


class MultiCounter:
    """Tracks, per non-negative index, whether it was seen at least twice."""

    def __init__(self) -> None:
        self._once: set[int] = set()
        self._multi: set[int] = set()
        self._size = 0

    def increment(self, i: int) -> None:
        """Count one occurrence of index ``i``."""
        if i < 0:
            raise ValueError(f"index must be non-negative, got {i}")
        self._size = max(self._size, i + 1)
        if i in self._once:
            self._multi.add(i)
        else:
            self._once.add(i)

    def is_multi(self, i: int) -> bool:
        """Tell whether index ``i`` was counted more than once."""
        return i in self._multi

    def multi_indices(self) -> Iterator[int]:
        """Yield every index counted more than once, in ascending order."""
        return iter(sorted(self._multi))

    def __len__(self) -> int:
        return self._size