"""End-to-end reconstruction: decode, select, interpolate."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from .errors import InvalidThreshold
from .interpolation import interpolate
from .models import Point, Share
from .radix import decode
from .selection import select

if TYPE_CHECKING:
    from .document import ShareDocument

_logger = logging.getLogger(__name__)


def decode_shares(shares: Iterable[Share]) -> list[Point]:
    """Decode every share into an exact integer point, preserving order."""

    return [Point(share.index, decode(share.digits, share.radix)) for share in shares]


def recover_secret(shares: Iterable[Share], k: int, *, n: int | None = None) -> int:
    """Recover the secret (the polynomial's value at 0) from ``shares``.

    Only the ``k`` shares with the smallest indices take part; any consistent
    subset of size ``k`` would give the same answer, this rule just fixes
    which one is trusted.
    """

    if k < 1 or (n is not None and k > n):
        raise InvalidThreshold(k, n)
    points = decode_shares(shares)
    _logger.debug("Decoded %d shares (threshold %d)", len(points), k)
    selected = select(points, k)
    _logger.debug("Interpolating with share indices %s", [p.x for p in selected])
    return interpolate(selected, 0)


def recover_document(document: ShareDocument) -> int:
    """Recover the secret from a parsed share-set document."""

    return recover_secret(document.shares, document.k, n=document.n)


__all__ = ["decode_shares", "recover_secret", "recover_document"]
