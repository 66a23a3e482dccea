import copy

import pytest

from bigint import BigInt, BigIntOverflowError, InvalidArgumentError, ParseError
from bigint.mpc import LimbMPC, MPC


class FixedInt64:
    """Stand-in for a fixed-width integer scalar that only exposes __index__."""

    def __init__(self, value: int) -> None:
        self._value = value

    def __index__(self) -> int:
        return self._value


INT64_MIN = -(2**63)
UINT64_MAX = 2**64 - 1


def test_default_is_zero(big):
    value = big()
    assert value == 0
    assert value.sign == 0
    assert value.to_string() == "0"


@pytest.mark.parametrize("native", [0, 1, -1, 127, -128, 2**31 - 1, -(2**31), INT64_MIN, UINT64_MAX, 2**200])
def test_native_values_are_exact(big, native):
    assert int(big(native)) == native
    assert big(native).to_string() == str(native)


def test_bool_is_a_native_integer(big):
    assert big(True) == 1
    assert big(False) == 0


def test_index_objects_are_widened(big):
    value = big(FixedInt64(INT64_MIN))
    assert value == INT64_MIN
    assert abs(value) == 2**63


def test_from_native_accepts_width_bounds(mpc):
    assert BigInt.from_native(INT64_MIN, mpc=mpc) == INT64_MIN
    assert BigInt.from_native(UINT64_MAX, bits=64, signed=False, mpc=mpc) == UINT64_MAX
    assert BigInt.from_native(-128, bits=8, mpc=mpc) == -128


@pytest.mark.parametrize(
    "value, bits, signed",
    [(2**63, 64, True), (-1, 64, False), (2**64, 64, False), (128, 8, True), (-32769, 16, True)],
)
def test_from_native_rejects_out_of_range(mpc, value, bits, signed):
    with pytest.raises(BigIntOverflowError):
        BigInt.from_native(value, bits=bits, signed=signed, mpc=mpc)


def test_from_native_rejects_unknown_width(mpc):
    with pytest.raises(InvalidArgumentError):
        BigInt.from_native(1, bits=12, mpc=mpc)


@pytest.mark.parametrize(
    "number, expected",
    [
        (2.9, 2),
        (-2.9, -2),
        (0.5, 0),
        (-0.5, 0),
        (1e20, 10**20),
        (2.0**70, 2**70),
        (-(2.0**100) - 2.0**48, -(2**100) - 2**48),
        (1.5e-300, 0),
        (123456789.999, 123456789),
    ],
)
def test_float_truncates_toward_zero(big, number, expected):
    assert big(number) == expected


def test_negative_zero_is_canonical_zero(big):
    value = big(-0.0)
    assert value == big(0)
    assert value.sign == 0
    assert value.to_string() == "0"
    assert value.size_bytes() == 0


def test_nan_and_infinity_are_rejected(big):
    with pytest.raises(ParseError):
        big(float("nan"))
    with pytest.raises(BigIntOverflowError):
        big(float("inf"))
    with pytest.raises(BigIntOverflowError):
        big(float("-inf"))


@pytest.mark.parametrize(
    "text, base, expected",
    [
        ("123", None, 123),
        ("-123", None, -123),
        ("0", 10, 0),
        ("-0", 10, 0),
        ("000123", 10, 123),
        ("ff", 16, 255),
        ("FF", 16, 255),
        ("-7fffffffffffffff", 16, -(2**63 - 1)),
        ("101", 2, 5),
        ("zz", 36, 36 * 36 - 1),
        ("A", 37, 10),
        ("a", 37, 36),
        ("z", 62, 61),
        ("0x1f", 0, 31),
        ("-0B101", 0, -5),
        ("0o17", 0, 15),
        ("017", 0, 17),
    ],
)
def test_parse_strings(big, text, base, expected):
    assert big(text, base) == expected


@pytest.mark.parametrize(
    "text, base",
    [
        ("", 10),
        ("-", 10),
        ("+5", 10),
        ("--5", 10),
        ("123abc", 10),
        (" 12", 10),
        ("12 ", 10),
        ("1_000", 10),
        ("12.5", 10),
        ("2", 2),
        ("g", 16),
        ("0x", 0),
        ("0x1f", 16),
        ("1", 1),
        ("1", 63),
        ("1", -2),
    ],
)
def test_malformed_strings_raise(big, text, base):
    with pytest.raises(ParseError):
        big(text, base)


def test_parse_error_is_a_value_error(big):
    with pytest.raises(ValueError):
        big("nope")


def test_base_requires_a_string(big):
    with pytest.raises(TypeError):
        big(5, 16)


def test_unsupported_type_raises(big):
    with pytest.raises(TypeError):
        big([1, 2])


def test_big_pow10_is_exact(mpc):
    assert BigInt.big_pow10(0, mpc=mpc) == 1
    assert BigInt.big_pow10(20, mpc=mpc).to_string(10) == "1" + "0" * 20
    assert BigInt.big_pow10(1000, mpc=mpc).to_string(10) == "1" + "0" * 1000
    assert int(BigInt.big_pow10(309, mpc=mpc)) == 10**309


def test_big_pow10_rejects_negative_exponent(mpc):
    with pytest.raises(InvalidArgumentError):
        BigInt.big_pow10(-1, mpc=mpc)


def test_copies_are_independent(big):
    original = big(41)
    for duplicate in (original.copy(), copy.copy(original), copy.deepcopy(original), BigInt(original)):
        duplicate += 1
        assert duplicate == 42
        assert original == 41


def test_copy_keeps_backend(big, mpc):
    assert BigInt(big(3)).get_mpc() is mpc


def test_assign_replaces_value(big):
    value = big(1)
    alias = value
    assert value.assign("ff", 16) is alias
    assert alias == 255


def test_convert_between_backends():
    source = BigInt(-(3**90), mpc=MPC)
    target = BigInt(source, mpc=LimbMPC)
    assert target.get_mpc() is LimbMPC
    assert target == source
    assert int(target) == -(3**90)


def test_backend_by_name():
    assert BigInt(1, mpc="limb").get_mpc() is LimbMPC
    assert BigInt(1, mpc="gmpy2").get_mpc() is MPC
