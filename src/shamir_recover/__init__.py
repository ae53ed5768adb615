"""Reconstruction of Shamir-shared secrets over the integers.

Shares arrive as ``(index, radix, digits)`` records. They are decoded into
exact integer points, the ``k`` points with the smallest indices are kept,
and exact Lagrange interpolation at ``x = 0`` yields the secret.
"""

from __future__ import annotations

from .document import (
    DocumentError,
    ShareDocument,
    load_document,
    loads_document,
    parse_document,
    recover_from_file,
    recover_from_string,
)
from .errors import (
    DuplicateIndex,
    InconsistentShares,
    InsufficientShares,
    InvalidDigit,
    InvalidRadix,
    InvalidThreshold,
    ReconstructionError,
)
from .interpolation import interpolate
from .models import Point, Share
from .radix import decode
from .reconstruct import decode_shares, recover_document, recover_secret
from .selection import select

__version__ = "0.1.0"

__all__ = [
    "Share",
    "Point",
    "decode",
    "select",
    "interpolate",
    "decode_shares",
    "recover_secret",
    "recover_document",
    "ShareDocument",
    "DocumentError",
    "parse_document",
    "loads_document",
    "load_document",
    "recover_from_string",
    "recover_from_file",
    "ReconstructionError",
    "InvalidRadix",
    "InvalidDigit",
    "InvalidThreshold",
    "DuplicateIndex",
    "InsufficientShares",
    "InconsistentShares",
]
