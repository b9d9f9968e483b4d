import pytest

from ftlib import numbers


@pytest.mark.parametrize("n", [0, 1, -1, 7, -99, 12345, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert numbers.atoi(numbers.itoa(n)) == n
    assert numbers.atol(numbers.itoa(n)) == n
    assert numbers.atoll(numbers.itoa(n)) == n


def test_itoa_extremes():
    assert numbers.itoa(-2147483648) == "-2147483648"
    assert numbers.itoa(0) == "0"


def test_atoi_skips_whitespace_and_stops_at_junk():
    assert numbers.atoi(" \t\n\v\f\r-42xyz") == -42
    assert numbers.atoi("+17") == numbers.atoi("17")


def test_atoi_no_digits():
    assert numbers.atoi("") == numbers.atoi("abc")
    assert numbers.atoi("--5") == numbers.atoi("")
    assert numbers.atoi("+-5") == numbers.atoi("")


def test_atoi_wraps_at_32_bits():
    assert numbers.atoi("2147483648") == -2147483648
    assert numbers.atoi("4294967296") == numbers.atoi("0")


def test_atol_keeps_values_beyond_32_bits():
    assert numbers.atol("4294967296") == 2**32
    assert numbers.atoll("-4294967296") == -(2**32)


def test_atol_wraps_at_64_bits():
    assert numbers.atol(str(2**63)) == -(2**63)
    assert numbers.atoll(str(2**64 + 3)) == numbers.atoll("3")


def test_atoi_overflow_accepts_limits():
    assert numbers.atoi_overflow("2147483647") == 2147483647
    assert numbers.atoi_overflow("-2147483648") == -2147483648


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "  99999999999"])
def test_atoi_overflow_raises(text):
    with pytest.raises(OverflowError):
        numbers.atoi_overflow(text)


@pytest.mark.parametrize("n", [0, 9, 10, 255, 256, 65535, 10**12])
@pytest.mark.parametrize("base", [2, 8, 10, 16])
def test_base_longlen_matches_formatting(n, base):
    text = {2: format(n, "b"), 8: format(n, "o"), 10: str(n), 16: format(n, "x")}[base]
    assert numbers.base_longlen(n, base) == len(text)


def test_longlen_matches_str():
    for n in (0, 5, 10, 999, 1000, 2**64 - 1):
        assert numbers.longlen(n) == len(str(n))


def test_nbrlen_ignores_sign():
    for n in (0, 3, -3, 10, -10, 2147483647, -2147483648):
        assert numbers.nbrlen(n) == len(str(abs(n)))
        assert numbers.nbrlen(n) == numbers.nbrlen(-n)


def test_base_nbrlen_negative_base_is_zero():
    assert numbers.base_nbrlen(123, -10) == 0


def test_base_nbrlen_matches_hex():
    for n in (-255, 255, -16, 15):
        assert numbers.base_nbrlen(n, 16) == len(format(abs(n), "x"))


def test_bad_arguments_raise():
    with pytest.raises(ValueError):
        numbers.base_longlen(5, 1)
    with pytest.raises(ValueError):
        numbers.base_longlen(-5, 10)
    with pytest.raises(ValueError):
        numbers.base_nbrlen(5, 0)