"""Runtime limits for share-set documents.

Values can be overridden through environment variables so that deployments
handling unusually large share sets do not need code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return default


def _load_str(name: str, default: str) -> str:
    value = os.environ.get(name)
    if not value:
        return default
    return value.strip().upper()


@dataclass(frozen=True)
class RecoveryPolicy:
    """Holds tunables for parsing and reconstruction."""

    max_shares: int = 1024
    max_digits: int = 1_000_000
    strict_count: bool = False
    log_level: str = "WARNING"


def load_policy() -> RecoveryPolicy:
    """Load the policy considering environment overrides."""

    return RecoveryPolicy(
        max_shares=_load_int("SHAMIR_MAX_SHARES", 1024),
        max_digits=_load_int("SHAMIR_MAX_DIGITS", 1_000_000),
        strict_count=_load_bool("SHAMIR_STRICT_COUNT", False),
        log_level=_load_str("SHAMIR_LOG_LEVEL", "WARNING"),
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "policy", "load_policy"]
