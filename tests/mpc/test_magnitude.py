import random

import pytest

from bigint.mpc import magnitude
from bigint.mpc.magnitude import LIMB_MASK


def m(value: int):
    return magnitude.from_int(value)


def test_from_int_round_trip():
    for value in (0, 1, LIMB_MASK, LIMB_MASK + 1, 3**150):
        assert magnitude.to_int(m(value)) == value
    assert m(0) == []
    assert m(2**32) == [0, 1]


def test_compare():
    assert magnitude.compare(m(5), m(5)) == 0
    assert magnitude.compare(m(2**32), m(2**32 - 1)) == 1
    assert magnitude.compare([], m(1)) == -1


def test_add_and_sub_carry_across_limbs():
    assert magnitude.to_int(magnitude.add(m(LIMB_MASK), m(1))) == 2**32
    assert magnitude.sub(m(2**64), m(1)) == [LIMB_MASK, LIMB_MASK]
    assert magnitude.sub(m(2**64), m(2**64)) == []


def test_sub_underflow_raises():
    with pytest.raises(ArithmeticError):
        magnitude.sub(m(1), m(2))


def test_divmod_small():
    quotient, remainder = magnitude.divmod_small(m(10**30 + 7), 10)
    assert magnitude.to_int(quotient) == 10**29
    assert remainder == 7
    with pytest.raises(ZeroDivisionError):
        magnitude.divmod_small(m(1), 0)


@pytest.mark.parametrize(
    "dividend, divisor",
    [
        (2**128 - 1, 2**64 - 1),
        (2**192, 2**96 + 1),
        (2**127, (2**32 - 1) * 2**32 + 1),
        (0x7FFF800000000000_0000000000000000, 0x800000000000_0000000000000001),
        (2**64 * 3 + 5, 2**64 + 1),
        (12345, 2**70),
        (2**96 - 1, 2**64 - 2**32),
    ],
)
def test_divmod_magnitude_edge_cases(dividend, divisor):
    quotient, remainder = magnitude.divmod_magnitude(m(dividend), m(divisor))
    assert magnitude.to_int(quotient) == dividend // divisor
    assert magnitude.to_int(remainder) == dividend % divisor


def test_divmod_magnitude_random():
    rng = random.Random(62)
    for _ in range(200):
        dividend = rng.getrandbits(rng.randint(1, 600))
        divisor = rng.getrandbits(rng.randint(33, 300)) or 1
        quotient, remainder = magnitude.divmod_magnitude(m(dividend), m(divisor))
        assert magnitude.to_int(quotient) == dividend // divisor
        assert magnitude.to_int(remainder) == dividend % divisor


def test_mul_random():
    rng = random.Random(32)
    for _ in range(100):
        a = rng.getrandbits(rng.randint(0, 500))
        b = rng.getrandbits(rng.randint(0, 500))
        assert magnitude.to_int(magnitude.mul(m(a), m(b))) == a * b


def test_shifts():
    for count in (0, 1, 31, 32, 33, 100):
        assert magnitude.to_int(magnitude.shift_left(m(3**40), count)) == 3**40 << count
        assert magnitude.to_int(magnitude.shift_right(m(3**40), count)) == 3**40 >> count
    assert magnitude.shift_right(m(5), 64) == []


def test_pow_and_powmod():
    assert magnitude.to_int(magnitude.pow_magnitude(m(3), 100)) == 3**100
    assert magnitude.to_int(magnitude.pow_magnitude(m(7), 0)) == 1
    assert magnitude.to_int(magnitude.powmod_magnitude(m(4), m(13), m(497))) == 445
    result = magnitude.powmod_magnitude(m(2**90 + 1), m(2**70 + 3), m(2**89 - 1))
    assert magnitude.to_int(result) == pow(2**90 + 1, 2**70 + 3, 2**89 - 1)
    assert magnitude.powmod_magnitude(m(5), [], m(1)) == []


def test_twos_complement_round_trip():
    for negative, value in ((False, 0), (False, 2**40), (True, 1), (True, 2**32), (True, 3**30)):
        limbs = magnitude.to_twos_complement(negative, m(value), len(m(value)) + 1)
        assert magnitude.from_twos_complement(limbs) == (negative, m(value))
