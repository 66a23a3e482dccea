import pytest

from bigint import BigInt, BigIntOverflowError, ParseError

LOWER = "0123456789abcdefghijklmnopqrstuvwxyz"
MIXED = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

VALUES = [0, 1, -1, 61, -62, 2**32, 2**64 - 1, -(2**64), 3**200, -(7**150) + 1]


def reference_digits(value: int, base: int) -> str:
    symbols = LOWER if base <= 36 else MIXED
    if value == 0:
        return "0"
    digits = []
    remaining = abs(value)
    while remaining:
        remaining, digit = divmod(remaining, base)
        digits.append(symbols[digit])
    return ("-" if value < 0 else "") + "".join(reversed(digits))


@pytest.mark.parametrize("base", [2, 3, 7, 8, 10, 16, 36, 37, 61, 62])
def test_to_string_matches_reference(big, base):
    for value in VALUES:
        assert big(value).to_string(base) == reference_digits(value, base)


@pytest.mark.parametrize("base", range(2, 63))
def test_round_trip_every_base(big, base):
    for value in (3**200, -(2**127 - 1)):
        text = big(value).to_string(base)
        assert big(text, base) == value


def test_canonical_forms(big):
    assert big(255).to_string(16) == "ff"
    assert big(-255).to_string(16) == "-ff"
    assert big(5).to_string(2) == "101"
    assert big(8).to_string(8) == "10"
    assert big(0).to_string(2) == "0"
    assert big(35).to_string(62) == "Z"
    assert big(36).to_string(62) == "a"


def test_to_string_rejects_bad_base(big):
    with pytest.raises(ParseError):
        big(10).to_string(1)
    with pytest.raises(ParseError):
        big(10).to_string(63)


def test_str_and_repr(big):
    assert str(big(-42)) == "-42"
    assert repr(big(10**20)) == "BigInt('100000000000000000000')"


def test_python_conversions(big):
    assert int(big(-(2**100))) == -(2**100)
    assert [10, 20, 30][big(1)] == 20
    assert float(big(2**60)) == 2.0**60
    with pytest.raises(BigIntOverflowError):
        float(big(10) ** 400)


def test_to_native_checks_width(big):
    assert big(-(2**63)).to_native() == -(2**63)
    assert big(255).to_native(bits=8, signed=False) == 255
    with pytest.raises(BigIntOverflowError):
        big(2**63).to_native()
    with pytest.raises(BigIntOverflowError):
        big(-1).to_native(bits=32, signed=False)


def test_big_pow10_matches_integer_power(mpc):
    for exponent in (1, 15, 16, 22, 23, 100, 400):
        assert BigInt.big_pow10(exponent, mpc=mpc) == 10**exponent
