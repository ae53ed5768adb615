"""Exact Lagrange interpolation over the integers."""
from __future__ import annotations

from math import gcd
from typing import Sequence

from .errors import DuplicateIndex, InconsistentShares, InsufficientShares
from .models import Point


def _lagrange_term(points: Sequence[Point], i: int, target: int) -> tuple[int, int]:
    """Return ``y_i * L_i(target)`` as an unreduced ``(numerator, denominator)`` pair."""

    xi = points[i].x
    num = points[i].y
    den = 1
    for j, pj in enumerate(points):
        if j == i:
            continue
        num *= target - pj.x
        den *= xi - pj.x
    return num, den


def interpolate(points: Sequence[Point], target: int = 0) -> int:
    """Evaluate the polynomial through ``points`` at ``target``.

    Each term is kept as an exact fraction and the running sum is reduced
    after every addition, so intermediate terms may be non-integers. Only the
    final value has to be an integer; otherwise :class:`InconsistentShares`
    is raised.
    """

    if not points:
        raise InsufficientShares(0, 1)
    seen: set[int] = set()
    for point in points:
        if point.x in seen:
            raise DuplicateIndex(point.x)
        seen.add(point.x)

    total_num, total_den = 0, 1
    for i in range(len(points)):
        num, den = _lagrange_term(points, i, target)
        total_num = total_num * den + num * total_den
        total_den *= den
        divisor = gcd(total_num, total_den)
        total_num //= divisor
        total_den //= divisor

    if total_den < 0:
        total_num, total_den = -total_num, -total_den
    if total_den != 1:
        raise InconsistentShares(total_num, total_den)
    return total_num


__all__ = ["interpolate"]
