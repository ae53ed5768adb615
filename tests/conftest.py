"""Test configuration helpers."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

POLICY_VARIABLES = (
    "SHAMIR_MAX_SHARES",
    "SHAMIR_MAX_DIGITS",
    "SHAMIR_STRICT_COUNT",
    "SHAMIR_LOG_LEVEL",
)


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()


@pytest.fixture
def clean_policy_env(monkeypatch):
    """Remove every SHAMIR_* override so policies load their defaults."""
    for name in POLICY_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
