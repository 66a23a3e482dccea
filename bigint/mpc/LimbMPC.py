import math
from functools import lru_cache
from typing import Callable, Sequence, Tuple

from ..digits import alphabet, digit_values
from . import magnitude
from .abstract.IMPC import IMPC
from .LimbInt import ZERO, LimbInt
from .magnitude import LIMB_BASE, LIMB_BITS

FLOAT_MANTISSA_BITS = 53


class LimbMPC(IMPC):
    """Pure Python multi-precision computing on 32-bit limb vectors."""

    NAME = "limb"

    @staticmethod
    def from_int(value: int) -> LimbInt:
        return LimbInt(-1 if value < 0 else 1, magnitude.from_int(abs(value)))

    @staticmethod
    def to_int(value: LimbInt) -> int:
        return value.get_sign() * magnitude.to_int(value.get_limbs())

    @staticmethod
    def from_float(value: float) -> LimbInt:
        fraction, exponent = math.frexp(abs(value))
        mantissa = magnitude.from_int(int(math.ldexp(fraction, FLOAT_MANTISSA_BITS)))
        exponent -= FLOAT_MANTISSA_BITS
        if exponent >= 0:
            limbs = magnitude.shift_left(mantissa, exponent)
        else:
            # Dropping the low bits of the magnitude truncates toward zero
            limbs = magnitude.shift_right(mantissa, -exponent)
        return LimbInt(-1 if value < 0 else 1, limbs)

    @staticmethod
    def parse(digits: str, base: int) -> LimbInt:
        values = digit_values(base)
        width, _ = _chunking(base)
        limbs = []
        for start in range(0, len(digits), width):
            chunk = digits[start : start + width]
            chunk_value = 0
            for char in chunk:
                chunk_value = chunk_value * base + values[char]
            limbs = magnitude.add_small(magnitude.mul_small(limbs, base ** len(chunk)), chunk_value)
        return LimbInt(1, limbs)

    @staticmethod
    def format(value: LimbInt, base: int) -> str:
        if value.get_sign() == 0:
            return "0"
        symbols = alphabet(base)
        width, chunk_base = _chunking(base)

        chunks = []
        limbs = list(value.get_limbs())
        while limbs:
            limbs, remainder = magnitude.divmod_small(limbs, chunk_base)
            chunks.append(remainder)

        parts = []
        for index, chunk_value in enumerate(reversed(chunks)):
            text = _render_chunk(chunk_value, base, symbols)
            parts.append(text.rjust(width, symbols[0]) if index else text)

        text = "".join(parts)
        return "-" + text if value.is_negative() else text

    @staticmethod
    def sign(value: LimbInt) -> int:
        return value.get_sign()

    @staticmethod
    def compare(left: LimbInt, right: LimbInt) -> int:
        if left.get_sign() != right.get_sign():
            return -1 if left.get_sign() < right.get_sign() else 1
        order = magnitude.compare(left.get_limbs(), right.get_limbs())
        return order if left.get_sign() >= 0 else -order

    @staticmethod
    def negate(value: LimbInt) -> LimbInt:
        return LimbInt(-value.get_sign(), value.get_limbs())

    @staticmethod
    def add(left: LimbInt, right: LimbInt) -> LimbInt:
        return _signed_add(left.get_sign(), left.get_limbs(), right.get_sign(), right.get_limbs())

    @staticmethod
    def sub(left: LimbInt, right: LimbInt) -> LimbInt:
        return _signed_add(left.get_sign(), left.get_limbs(), -right.get_sign(), right.get_limbs())

    @staticmethod
    def mul(left: LimbInt, right: LimbInt) -> LimbInt:
        return LimbInt(
            left.get_sign() * right.get_sign(),
            magnitude.mul(left.get_limbs(), right.get_limbs()),
        )

    @staticmethod
    def add_ui(left: LimbInt, magnitude_value: int) -> LimbInt:
        return _signed_add(left.get_sign(), left.get_limbs(), 1, magnitude.from_int(magnitude_value))

    @staticmethod
    def sub_ui(left: LimbInt, magnitude_value: int) -> LimbInt:
        return _signed_add(left.get_sign(), left.get_limbs(), -1, magnitude.from_int(magnitude_value))

    @staticmethod
    def ui_sub(magnitude_value: int, right: LimbInt) -> LimbInt:
        return _signed_add(1, magnitude.from_int(magnitude_value), -right.get_sign(), right.get_limbs())

    @staticmethod
    def mul_ui(left: LimbInt, magnitude_value: int) -> LimbInt:
        return LimbInt(left.get_sign(), magnitude.mul(left.get_limbs(), magnitude.from_int(magnitude_value)))

    @staticmethod
    def tdiv_q(dividend: LimbInt, divisor: LimbInt) -> LimbInt:
        quotient, _ = magnitude.divmod_magnitude(dividend.get_limbs(), divisor.get_limbs())
        return LimbInt(dividend.get_sign() * divisor.get_sign(), quotient)

    @staticmethod
    def tdiv_r(dividend: LimbInt, divisor: LimbInt) -> LimbInt:
        _, remainder = magnitude.divmod_magnitude(dividend.get_limbs(), divisor.get_limbs())
        return LimbInt(dividend.get_sign(), remainder)

    @staticmethod
    def tdiv_q_ui(dividend: LimbInt, magnitude_value: int) -> LimbInt:
        return LimbMPC.tdiv_q(dividend, LimbMPC.from_int(magnitude_value))

    @staticmethod
    def tdiv_r_ui(dividend: LimbInt, magnitude_value: int) -> LimbInt:
        return LimbMPC.tdiv_r(dividend, LimbMPC.from_int(magnitude_value))

    @staticmethod
    def pow(base: LimbInt, exp: int) -> LimbInt:
        sign = base.get_sign() if exp % 2 else 1
        return LimbInt(sign, magnitude.pow_magnitude(base.get_limbs(), exp))

    @staticmethod
    def powmod(base: LimbInt, exp: LimbInt, mod: LimbInt) -> LimbInt:
        limbs = magnitude.powmod_magnitude(base.get_limbs(), exp.get_limbs(), mod.get_limbs())
        odd_exponent = bool(exp.get_limbs()) and exp.get_limbs()[0] & 1
        if base.is_negative() and odd_exponent and limbs:
            limbs = magnitude.sub(mod.get_limbs(), limbs)
        return LimbInt(1, limbs)

    @staticmethod
    def shift_left(value: LimbInt, count: int) -> LimbInt:
        return LimbInt(value.get_sign(), magnitude.shift_left(value.get_limbs(), count))

    @staticmethod
    def shift_right(value: LimbInt, count: int) -> LimbInt:
        if not value.is_negative():
            return LimbInt(1, magnitude.shift_right(value.get_limbs(), count))
        # floor(-m / 2^n) == -(((m - 1) >> n) + 1)
        reduced = magnitude.sub(value.get_limbs(), [1])
        return LimbInt(-1, magnitude.add_small(magnitude.shift_right(reduced, count), 1))

    @staticmethod
    def bit_and(left: LimbInt, right: LimbInt) -> LimbInt:
        return _bitwise(left, right, lambda a, b: a & b)

    @staticmethod
    def bit_or(left: LimbInt, right: LimbInt) -> LimbInt:
        return _bitwise(left, right, lambda a, b: a | b)

    @staticmethod
    def bit_xor(left: LimbInt, right: LimbInt) -> LimbInt:
        return _bitwise(left, right, lambda a, b: a ^ b)

    @staticmethod
    def bit_not(value: LimbInt) -> LimbInt:
        if value.is_negative():
            return LimbInt(1, magnitude.sub(value.get_limbs(), [1]))
        return LimbInt(-1, magnitude.add_small(value.get_limbs(), 1))

    @staticmethod
    def bit_length(value: LimbInt) -> int:
        return magnitude.bit_length(value.get_limbs())

    @staticmethod
    def limb_count(value: LimbInt) -> int:
        return len(value.get_limbs())

    @staticmethod
    def limb_bits() -> int:
        return LIMB_BITS


# Private Methods
# ------------------------------------------------------------------------------


def _signed_add(
    left_sign: int, left: Sequence[int], right_sign: int, right: Sequence[int]
) -> LimbInt:
    if not right:
        return LimbInt(left_sign, left)
    if not left:
        return LimbInt(right_sign, right)
    if left_sign == right_sign:
        return LimbInt(left_sign, magnitude.add(left, right))

    order = magnitude.compare(left, right)
    if order == 0:
        return ZERO
    if order > 0:
        return LimbInt(left_sign, magnitude.sub(left, right))
    return LimbInt(right_sign, magnitude.sub(right, left))


def _bitwise(left: LimbInt, right: LimbInt, operation: Callable[[int, int], int]) -> LimbInt:
    width = max(len(left.get_limbs()), len(right.get_limbs())) + 1
    a = magnitude.to_twos_complement(left.is_negative(), left.get_limbs(), width)
    b = magnitude.to_twos_complement(right.is_negative(), right.get_limbs(), width)
    negative, limbs = magnitude.from_twos_complement([operation(x, y) for x, y in zip(a, b)])
    return LimbInt(-1 if negative else 1, limbs)


@lru_cache(maxsize=None)
def _chunking(base: int) -> Tuple[int, int]:
    """Largest digit count whose power of ``base`` still fits a single limb."""
    width = 1
    while base ** (width + 1) < LIMB_BASE:
        width += 1
    return width, base**width


def _render_chunk(value: int, base: int, symbols: str) -> str:
    digits = []
    while value:
        value, digit = divmod(value, base)
        digits.append(symbols[digit])
    return "".join(reversed(digits))
