"""Immutable value types flowing through the reconstruction pipeline."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Share:
    """One encoded point: ``digits`` in base ``radix`` sampled at ``index``."""

    index: int
    radix: int
    digits: str


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


__all__ = ["Share", "Point"]
