"""Canonical choice of the threshold subset of points."""
from __future__ import annotations

from typing import Iterable

from .errors import DuplicateIndex, InsufficientShares, InvalidThreshold
from .models import Point


def select(points: Iterable[Point], k: int) -> list[Point]:
    """Return the ``k`` points with the smallest x, in ascending x order.

    Any repeated x fails the whole selection, even when the y values agree.
    """

    if k < 1:
        raise InvalidThreshold(k)
    by_x: dict[int, Point] = {}
    for point in points:
        if point.x in by_x:
            raise DuplicateIndex(point.x)
        by_x[point.x] = point
    if len(by_x) < k:
        raise InsufficientShares(len(by_x), k)
    return [by_x[x] for x in sorted(by_x)[:k]]


__all__ = ["select"]
