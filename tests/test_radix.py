import sys

import pytest
from hypothesis import given, strategies as st

from shamir_recover import InvalidDigit, InvalidRadix, decode

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def test_decode_known_values():
    assert decode("1A", 16) == 26
    assert decode("1a", 16) == 26
    assert decode("111", 2) == 7
    assert decode("zz", 36) == 35 * 36 + 35
    assert decode("0", 10) == 0
    assert decode("000123", 10) == 123


def test_decode_strips_surrounding_whitespace():
    assert decode("  4\n", 10) == 4
    assert decode("\t1A ", 16) == 26


@pytest.mark.parametrize(
    "digits, radix",
    [
        ("2", 2),
        ("g", 16),
        ("1 0", 10),
        ("-5", 10),
        ("+5", 10),
        ("1_000", 10),
        ("0x1a", 16),
        ("0b11", 2),
        ("١٢", 10),
        ("1.5", 10),
    ],
)
def test_decode_rejects_invalid_digits(digits, radix):
    with pytest.raises(InvalidDigit) as exc:
        decode(digits, radix)
    assert exc.value.radix == radix
    assert exc.value.position is not None


def test_decode_reports_offending_position():
    with pytest.raises(InvalidDigit) as exc:
        decode("10201", 2)
    assert exc.value.position == 2
    assert exc.value.digit == "2"


def test_decode_rejects_empty_string():
    for digits in ("", "   "):
        with pytest.raises(InvalidDigit) as exc:
            decode(digits, 10)
        assert exc.value.position is None


@pytest.mark.parametrize("radix", [0, 1, 37, -10, True, 10.0, "10"])
def test_decode_rejects_invalid_radix(radix):
    with pytest.raises(InvalidRadix) as exc:
        decode("1", radix)
    assert exc.value.radix == radix


def test_decode_long_strings_ignore_int_conversion_limit():
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no integer string conversion limit")
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(640)
    try:
        digits = "7" * 5000
        value = decode(digits, 10)
        assert value % 10 == 7
        assert value == 7 * (10**5000 - 1) // 9
        assert decode("1" + "0" * 3000, 3) == 3**3000
    finally:
        sys.set_int_max_str_digits(previous)


@given(
    radix=st.integers(min_value=2, max_value=36),
    data=st.data(),
)
def test_decode_matches_positional_definition(radix, data):
    values = data.draw(
        st.lists(st.integers(min_value=0, max_value=radix - 1), min_size=1, max_size=80)
    )
    upper = data.draw(st.booleans())
    digits = "".join(_ALPHABET[v] for v in values)
    if upper:
        digits = digits.upper()
    expected = sum(v * radix ** (len(values) - 1 - i) for i, v in enumerate(values))
    assert decode(digits, radix) == expected


@pytest.mark.parametrize("digits", [42, None, b"12"])
def test_decode_rejects_non_string_digits(digits):
    with pytest.raises(InvalidDigit) as exc:
        decode(digits, 10)
    assert exc.value.position is None
    assert "must be a string" in str(exc.value)
