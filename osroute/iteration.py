"""Iteration helpers for walking way geometry forwards, backwards or in loops."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import cycle
from typing import TypeVar

__all__ = ["infinite", "reverse_if"]

T = TypeVar("T")


def infinite(items: Iterable[T], is_infinite: bool) -> Iterator[T]:
    """Yield the items once, or cycle through them forever if ``is_infinite``."""
    if is_infinite:
        return cycle(items)
    return iter(items)


def reverse_if(items: Iterable[T], is_reverse: bool) -> Iterator[T]:
    """Yield the items in order, or in reverse order if ``is_reverse``."""
    if not is_reverse:
        yield from items
        return
    try:
        backwards = reversed(items)  # type: ignore[call-overload]
    except TypeError:
        backwards = reversed(list(items))
    yield from backwards