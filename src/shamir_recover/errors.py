"""Exceptions raised while reconstructing a secret from shares."""
from __future__ import annotations


class ReconstructionError(ValueError):
    """Base class for every failure of the reconstruction pipeline."""


class InvalidRadix(ReconstructionError):
    """Raised when a share declares a base outside the supported range."""

    def __init__(self, radix: object) -> None:
        super().__init__(f"Unsupported radix {radix!r}, expected an integer in [2, 36]")
        self.radix = radix


class InvalidDigit(ReconstructionError):
    """Raised when a digit string contains a character invalid for its radix."""

    def __init__(self, digits: str, radix: int, position: int | None = None) -> None:
        if not isinstance(digits, str):
            message = f"Digits must be a string, got {type(digits).__name__}"
            digit = None
        elif position is None:
            message = f"Empty digit string for radix {radix}"
            digit = None
        else:
            digit = digits[position]
            message = f"Invalid digit {digit!r} at position {position} for radix {radix}"
        super().__init__(message)
        self.digit = digit
        self.position = position
        self.radix = radix


class InvalidThreshold(ReconstructionError):
    def __init__(self, k: int, n: int | None = None) -> None:
        if n is None:
            message = f"Threshold must be at least 1, got {k}"
        else:
            message = f"Threshold {k} is outside [1, {n}]"
        super().__init__(message)
        self.k = k
        self.n = n


class DuplicateIndex(ReconstructionError):
    """Raised when two shares claim the same x coordinate."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Share index {index} appears more than once")
        self.index = index


class InsufficientShares(ReconstructionError):
    def __init__(self, available: int, required: int) -> None:
        super().__init__(f"Need {required} distinct shares, only {available} available")
        self.available = available
        self.required = required


class InconsistentShares(ReconstructionError):
    """Raised when the points do not lie on one integer polynomial.

    The interpolated value at the target is an exact rational; a
    non-integer result means at least one share is corrupted or forged.
    """

    def __init__(self, numerator: int, denominator: int) -> None:
        super().__init__("Shares do not interpolate to an integer secret")
        self.numerator = numerator
        self.denominator = denominator


__all__ = [
    "ReconstructionError",
    "InvalidRadix",
    "InvalidDigit",
    "InvalidThreshold",
    "DuplicateIndex",
    "InsufficientShares",
    "InconsistentShares",
]
