import math

import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ

_PREFIXED_BASES = {2: "0b", 8: "0o", 16: "0x"}


class MPC(IMPC):
    """Implementation of multi-precision computing operations on top of gmpy2."""

    NAME = "gmpy2"

    @staticmethod
    def from_int(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def to_int(value: MPZ) -> int:
        return int(value)

    @staticmethod
    def from_float(value: float) -> MPZ:
        return gmpy2.mpz(math.trunc(value))

    @staticmethod
    def parse(digits: str, base: int) -> MPZ:
        return gmpy2.mpz(digits, base)

    @staticmethod
    def format(value: MPZ, base: int) -> str:
        text = value.digits(base)
        negative = text.startswith("-")
        body = text[1:] if negative else text

        # gmpy2 prefixes binary, octal and hex output
        prefix = _PREFIXED_BASES.get(base)
        if prefix and body[:2].lower() == prefix:
            body = body[2:]
        if base <= 36:
            body = body.lower()

        return "-" + body if negative else body

    @staticmethod
    def sign(value: MPZ) -> int:
        return gmpy2.sign(value)

    @staticmethod
    def compare(left: MPZ, right: MPZ) -> int:
        return (left > right) - (left < right)

    @staticmethod
    def negate(value: MPZ) -> MPZ:
        return -value

    @staticmethod
    def add(left: MPZ, right: MPZ) -> MPZ:
        return left + right

    @staticmethod
    def sub(left: MPZ, right: MPZ) -> MPZ:
        return left - right

    @staticmethod
    def mul(left: MPZ, right: MPZ) -> MPZ:
        return left * right

    @staticmethod
    def add_ui(left: MPZ, magnitude: int) -> MPZ:
        return left + magnitude

    @staticmethod
    def sub_ui(left: MPZ, magnitude: int) -> MPZ:
        return left - magnitude

    @staticmethod
    def ui_sub(magnitude: int, right: MPZ) -> MPZ:
        return gmpy2.mpz(magnitude) - right

    @staticmethod
    def mul_ui(left: MPZ, magnitude: int) -> MPZ:
        return left * magnitude

    @staticmethod
    def tdiv_q(dividend: MPZ, divisor: MPZ) -> MPZ:
        return gmpy2.t_div(dividend, divisor)

    @staticmethod
    def tdiv_r(dividend: MPZ, divisor: MPZ) -> MPZ:
        return gmpy2.t_mod(dividend, divisor)

    @staticmethod
    def tdiv_q_ui(dividend: MPZ, magnitude: int) -> MPZ:
        return gmpy2.t_div(dividend, gmpy2.mpz(magnitude))

    @staticmethod
    def tdiv_r_ui(dividend: MPZ, magnitude: int) -> MPZ:
        return gmpy2.t_mod(dividend, gmpy2.mpz(magnitude))

    @staticmethod
    def pow(base: MPZ, exp: int) -> MPZ:
        return base**exp

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def shift_left(value: MPZ, count: int) -> MPZ:
        return value << count

    @staticmethod
    def shift_right(value: MPZ, count: int) -> MPZ:
        return value >> count

    @staticmethod
    def bit_and(left: MPZ, right: MPZ) -> MPZ:
        return left & right

    @staticmethod
    def bit_or(left: MPZ, right: MPZ) -> MPZ:
        return left | right

    @staticmethod
    def bit_xor(left: MPZ, right: MPZ) -> MPZ:
        return left ^ right

    @staticmethod
    def bit_not(value: MPZ) -> MPZ:
        return ~value

    @staticmethod
    def bit_length(value: MPZ) -> int:
        return gmpy2.bit_length(abs(value))

    @staticmethod
    def limb_count(value: MPZ) -> int:
        bits = MPC.bit_length(value)
        return -(-bits // MPC.limb_bits())

    @staticmethod
    def limb_bits() -> int:
        return gmpy2.mp_limbsize()
