"""Loading share-set documents.

A document names the share count and threshold under ``keys`` and lists
every share under its index::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"}
    }

JSON is the native format; files ending in ``.yaml`` or ``.yml`` are read
with PyYAML and must have the same shape. Quote digit strings in YAML:
an unquoted value such as ``0777`` is read by YAML as a number first.
"""

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Hashable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, NoReturn

import yaml

from . import config
from .config import RecoveryPolicy
from .errors import DuplicateIndex, ReconstructionError
from .models import Share
from .reconstruct import recover_document

_logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_YAML_SUFFIXES = {".yaml", ".yml"}
META_KEY = "keys"


class DocumentError(ValueError):
    """Raised when a share-set document is malformed."""


@dataclass(frozen=True)
class ShareDocument:
    n: int
    k: int
    shares: tuple[Share, ...]


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise DocumentError(f"{field} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER.fullmatch(value.strip()):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise DocumentError(f"{field} is too large: {exc}") from None
    raise DocumentError(f"{field} must be an integer, got {value!r}")


def _as_digits(value: Any, field: str) -> str:
    # YAML turns an unquoted decimal value into a number.
    if isinstance(value, bool):
        raise DocumentError(f"{field} must be a digit string, got {value!r}")
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError as exc:
            raise DocumentError(f"{field} is too large to read as a number, quote it: {exc}") from None
    if isinstance(value, str):
        return value
    raise DocumentError(f"{field} must be a digit string, got {value!r}")


def _reject_duplicate(key: Any) -> NoReturn:
    try:
        index = _as_int(key, "key")
    except DocumentError:
        raise DocumentError(f"duplicate key {key!r}") from None
    raise DuplicateIndex(index)


def _unique_pairs(pairs: list[tuple[Any, Any]]) -> dict[Any, Any]:
    result: dict[Any, Any] = {}
    for key, value in pairs:
        if key in result:
            _reject_duplicate(key)
        result[key] = value
    return result


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that refuses mappings with repeated keys."""

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _value_node in node.value:
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                _reject_duplicate(key)
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _parse_share(key: Any, entry: Any, active: RecoveryPolicy) -> Share:
    index = _as_int(key, "share index")
    if index < 1:
        raise DocumentError(f"share index must be positive, got {index}")
    if not isinstance(entry, Mapping):
        raise DocumentError(f"share {index} must be a mapping with 'base' and 'value'")
    for name in ("base", "value"):
        if name not in entry:
            raise DocumentError(f"share {index} is missing {name!r}")
    radix = _as_int(entry["base"], f"share {index} base")
    digits = _as_digits(entry["value"], f"share {index} value")
    if len(digits) > active.max_digits:
        raise DocumentError(
            f"share {index} value has {len(digits)} digits, limit is {active.max_digits}"
        )
    return Share(index=index, radix=radix, digits=digits)


def parse_document(data: Any, *, policy: RecoveryPolicy | None = None) -> ShareDocument:
    """Validate a decoded document and turn it into a :class:`ShareDocument`."""

    active = policy or config.policy
    if not isinstance(data, Mapping):
        raise DocumentError("share document must be a mapping")
    meta = data.get(META_KEY)
    if not isinstance(meta, Mapping):
        raise DocumentError(f"share document has no {META_KEY!r} mapping")
    for name in ("n", "k"):
        if name not in meta:
            raise DocumentError(f"{META_KEY!r} is missing {name!r}")
    n = _as_int(meta["n"], "n")
    k = _as_int(meta["k"], "k")

    entries = [(key, entry) for key, entry in data.items() if key != META_KEY]
    if len(entries) > active.max_shares:
        raise DocumentError(f"document holds {len(entries)} shares, limit is {active.max_shares}")
    shares = tuple(_parse_share(key, entry, active) for key, entry in entries)

    if n != len(shares):
        if active.strict_count:
            raise DocumentError(f"n is {n} but the document holds {len(shares)} shares")
        _logger.warning("Document declares n=%d but holds %d shares", n, len(shares))
    _logger.debug("Parsed document with n=%d, k=%d, %d shares", n, k, len(shares))
    return ShareDocument(n=n, k=k, shares=shares)


def loads_document(text: str, *, fmt: str = "json", policy: RecoveryPolicy | None = None) -> ShareDocument:
    """Parse a document from ``text`` in ``fmt`` (``"json"`` or ``"yaml"``)."""

    if fmt == "json":
        try:
            # Integers stay text so digit strings of any length survive.
            data = json.loads(text, object_pairs_hook=_unique_pairs, parse_int=str)
        except json.JSONDecodeError as exc:
            raise DocumentError(f"invalid JSON: {exc}") from exc
    elif fmt == "yaml":
        try:
            data = yaml.load(text, Loader=_UniqueKeyLoader)
        except yaml.YAMLError as exc:
            raise DocumentError(f"invalid YAML: {exc}") from exc
        except (DocumentError, ReconstructionError):
            raise
        except ValueError as exc:
            # PyYAML converts unquoted numbers with int(), which has a length limit.
            raise DocumentError(f"unreadable number in YAML document, quote it: {exc}") from exc
    else:
        raise ValueError(f"unknown document format {fmt!r}")
    return parse_document(data, policy=policy)


def load_document(path: os.PathLike[str] | str, *, policy: RecoveryPolicy | None = None) -> ShareDocument:
    """Read and parse the document stored at ``path``."""

    file_path = Path(path)
    fmt = "yaml" if file_path.suffix.lower() in _YAML_SUFFIXES else "json"
    return loads_document(file_path.read_text(encoding="utf-8"), fmt=fmt, policy=policy)


def recover_from_string(text: str, *, fmt: str = "json") -> int:
    return recover_document(loads_document(text, fmt=fmt))


def recover_from_file(path: os.PathLike[str] | str) -> int:
    return recover_document(load_document(path))


__all__ = [
    "DocumentError",
    "ShareDocument",
    "parse_document",
    "loads_document",
    "load_document",
    "recover_from_string",
    "recover_from_file",
]
