"""Arbitrary-radix decoding of share values into exact integers."""
from __future__ import annotations

import string

from .errors import InvalidDigit, InvalidRadix

MIN_RADIX = 2
MAX_RADIX = 36

_ALPHABET = string.digits + string.ascii_lowercase
_DIGIT_VALUES: dict[str, int] = {}
for _value, _char in enumerate(_ALPHABET):
    _DIGIT_VALUES[_char] = _value
    _DIGIT_VALUES[_char.upper()] = _value
del _value, _char

# int() rejects long non-power-of-two strings once they pass
# sys.get_int_max_str_digits(), whose lowest allowed setting is 640.
_CHUNK = 512


def _check_radix(radix: int) -> None:
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise InvalidRadix(radix)
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidRadix(radix)


def _accumulate(text: str, radix: int) -> int:
    if len(text) <= _CHUNK:
        return int(text, radix)
    half = len(text) // 2
    low = text[half:]
    return _accumulate(text[:half], radix) * radix ** len(low) + _accumulate(low, radix)


def decode(digits: str, radix: int) -> int:
    """Decode ``digits`` written in base ``radix`` into a non-negative integer.

    Surrounding whitespace is stripped first. Every remaining character must
    be an ASCII digit or letter whose value is below ``radix``; signs,
    separators and prefixes such as ``0x`` are rejected with
    :class:`InvalidDigit`, as is a ``digits`` value that is not a string.
    """

    _check_radix(radix)
    if not isinstance(digits, str):
        raise InvalidDigit(digits, radix)
    text = digits.strip()
    if not text:
        raise InvalidDigit(text, radix)
    for position, char in enumerate(text):
        value = _DIGIT_VALUES.get(char)
        if value is None or value >= radix:
            raise InvalidDigit(text, radix, position)
    return _accumulate(text, radix)


__all__ = ["decode", "MIN_RADIX", "MAX_RADIX"]
