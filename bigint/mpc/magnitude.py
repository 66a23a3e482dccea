"""Unsigned limb-vector arithmetic.

A magnitude is a list of ``LIMB_BITS``-bit limbs, least significant first, with
no most-significant zero limb; zero is the empty list. Every function returns a
new normalized list and leaves its arguments untouched. Products and partial
remainders of two limbs are held in double-width intermediates, as a C
implementation would hold them in a 64-bit word.
"""

from typing import List, Tuple

from .types import Magnitude

LIMB_BITS = 32
LIMB_BASE = 1 << LIMB_BITS
LIMB_MASK = LIMB_BASE - 1


def normalize(limbs: List[int]) -> Magnitude:
    """Strip most-significant zero limbs in place and return the list."""
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def from_int(value: int) -> Magnitude:
    """Split a non-negative integer into limbs."""
    limbs = []
    while value:
        limbs.append(value & LIMB_MASK)
        value >>= LIMB_BITS
    return limbs


def to_int(limbs: Magnitude) -> int:
    """Join limbs back into a non-negative integer."""
    value = 0
    for limb in reversed(limbs):
        value = (value << LIMB_BITS) | limb
    return value


def compare(left: Magnitude, right: Magnitude) -> int:
    """Return -1, 0 or 1 comparing two magnitudes."""
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    for a, b in zip(reversed(left), reversed(right)):
        if a != b:
            return -1 if a < b else 1
    return 0


def add(left: Magnitude, right: Magnitude) -> Magnitude:
    if len(left) < len(right):
        left, right = right, left
    result = []
    carry = 0
    for index, limb in enumerate(left):
        total = limb + carry
        if index < len(right):
            total += right[index]
        result.append(total & LIMB_MASK)
        carry = total >> LIMB_BITS
    if carry:
        result.append(carry)
    return result


def sub(left: Magnitude, right: Magnitude) -> Magnitude:
    """Return ``left - right``; requires ``left >= right``."""
    result = []
    borrow = 0
    for index, limb in enumerate(left):
        total = limb - borrow
        if index < len(right):
            total -= right[index]
        borrow = 1 if total < 0 else 0
        result.append(total & LIMB_MASK)
    if borrow:
        raise ArithmeticError("Magnitude subtraction underflow")
    return normalize(result)


def mul(left: Magnitude, right: Magnitude) -> Magnitude:
    """Schoolbook multiplication."""
    if not left or not right:
        return []
    result = [0] * (len(left) + len(right))
    for i, a in enumerate(left):
        if a == 0:
            continue
        carry = 0
        for j, b in enumerate(right):
            total = result[i + j] + a * b + carry
            result[i + j] = total & LIMB_MASK
            carry = total >> LIMB_BITS
        result[i + len(right)] = carry
    return normalize(result)


def mul_small(left: Magnitude, factor: int) -> Magnitude:
    """Multiply by a single limb."""
    if factor == 0 or not left:
        return []
    result = []
    carry = 0
    for limb in left:
        total = limb * factor + carry
        result.append(total & LIMB_MASK)
        carry = total >> LIMB_BITS
    if carry:
        result.append(carry)
    return result


def add_small(left: Magnitude, addend: int) -> Magnitude:
    """Add a single limb."""
    result = list(left)
    index = 0
    carry = addend
    while carry:
        if index == len(result):
            result.append(carry)
            break
        total = result[index] + carry
        result[index] = total & LIMB_MASK
        carry = total >> LIMB_BITS
        index += 1
    return result


def divmod_small(dividend: Magnitude, divisor: int) -> Tuple[Magnitude, int]:
    """Divide by a single non-zero limb, returning quotient limbs and remainder."""
    if divisor == 0:
        raise ZeroDivisionError("Magnitude division by zero")
    quotient = [0] * len(dividend)
    remainder = 0
    for index in range(len(dividend) - 1, -1, -1):
        current = (remainder << LIMB_BITS) | dividend[index]
        quotient[index], remainder = divmod(current, divisor)
    return normalize(quotient), remainder


def divmod_magnitude(dividend: Magnitude, divisor: Magnitude) -> Tuple[Magnitude, Magnitude]:
    """Long division of magnitudes, returning quotient and remainder."""
    if not divisor:
        raise ZeroDivisionError("Magnitude division by zero")
    if compare(dividend, divisor) < 0:
        return [], list(dividend)
    if len(divisor) == 1:
        quotient, remainder = divmod_small(dividend, divisor[0])
        return quotient, from_int(remainder)
    return _divmod_knuth(dividend, divisor)


def shift_left(limbs: Magnitude, count: int) -> Magnitude:
    if not limbs:
        return []
    limb_shift, bit_shift = divmod(count, LIMB_BITS)
    return normalize([0] * limb_shift + _shift_left_bits(limbs, bit_shift))


def shift_right(limbs: Magnitude, count: int) -> Magnitude:
    limb_shift, bit_shift = divmod(count, LIMB_BITS)
    if limb_shift >= len(limbs):
        return []
    return normalize(_shift_right_bits(limbs[limb_shift:], bit_shift))


def bit_length(limbs: Magnitude) -> int:
    if not limbs:
        return 0
    return (len(limbs) - 1) * LIMB_BITS + limbs[-1].bit_length()


def pow_magnitude(base: Magnitude, exp: int) -> Magnitude:
    """Left-to-right square-and-multiply."""
    result = [1]
    for bit in bin(exp)[2:]:
        result = mul(result, result)
        if bit == "1":
            result = mul(result, base)
    return result


def powmod_magnitude(base: Magnitude, exp: Magnitude, mod: Magnitude) -> Magnitude:
    """Right-to-left square-and-multiply, reducing after every product."""
    result = divmod_magnitude([1], mod)[1]
    base = divmod_magnitude(base, mod)[1]
    for limb in exp[:-1]:
        for _ in range(LIMB_BITS):
            if limb & 1:
                result = divmod_magnitude(mul(result, base), mod)[1]
            base = divmod_magnitude(mul(base, base), mod)[1]
            limb >>= 1
    if exp:
        limb = exp[-1]
        while limb:
            if limb & 1:
                result = divmod_magnitude(mul(result, base), mod)[1]
            limb >>= 1
            if limb:
                base = divmod_magnitude(mul(base, base), mod)[1]
    return result


def to_twos_complement(negative: bool, limbs: Magnitude, width: int) -> List[int]:
    """Fixed-width two's complement limbs of a signed magnitude.

    ``width`` must leave at least one spare bit above the magnitude.
    """
    if not negative:
        return list(limbs) + [0] * (width - len(limbs))
    # -m == ~(m - 1)
    reduced = sub(limbs, [1])
    reduced = reduced + [0] * (width - len(reduced))
    return [LIMB_MASK ^ limb for limb in reduced]


def from_twos_complement(limbs: List[int]) -> Tuple[bool, Magnitude]:
    """Inverse of ``to_twos_complement``: returns (negative, magnitude)."""
    if limbs and limbs[-1] >> (LIMB_BITS - 1):
        inverted = normalize([LIMB_MASK ^ limb for limb in limbs])
        return True, add_small(inverted, 1)
    return False, normalize(list(limbs))


# Private Methods
# ------------------------------------------------------------------------------


def _shift_left_bits(limbs: Magnitude, bits: int) -> List[int]:
    """Shift by fewer than LIMB_BITS bits; the result has one extra limb."""
    result = []
    carry = 0
    for limb in limbs:
        result.append(((limb << bits) & LIMB_MASK) | carry)
        carry = limb >> (LIMB_BITS - bits)
    result.append(carry)
    return result


def _shift_right_bits(limbs: Magnitude, bits: int) -> List[int]:
    """Shift by fewer than LIMB_BITS bits, keeping the limb count."""
    result = []
    for index, limb in enumerate(limbs):
        high = limbs[index + 1] if index + 1 < len(limbs) else 0
        result.append((limb >> bits) | ((high << (LIMB_BITS - bits)) & LIMB_MASK))
    return result


def _divmod_knuth(dividend: Magnitude, divisor: Magnitude) -> Tuple[Magnitude, Magnitude]:
    """Knuth algorithm D for a divisor of at least two limbs."""
    shift = LIMB_BITS - divisor[-1].bit_length()
    v = _shift_left_bits(divisor, shift)[: len(divisor)]
    u = _shift_left_bits(dividend, shift)

    n = len(v)
    m = len(u) - n - 1
    v_top = v[-1]
    v_next = v[-2]
    quotient = [0] * (m + 1)

    for j in range(m, -1, -1):
        numerator = (u[j + n] << LIMB_BITS) | u[j + n - 1]
        q_hat, r_hat = divmod(numerator, v_top)
        while q_hat >= LIMB_BASE or q_hat * v_next > ((r_hat << LIMB_BITS) | u[j + n - 2]):
            q_hat -= 1
            r_hat += v_top
            if r_hat >= LIMB_BASE:
                break

        # Multiply and subtract q_hat * v from u[j:j + n + 1]
        carry = 0
        borrow = 0
        for i in range(n):
            product = q_hat * v[i] + carry
            carry = product >> LIMB_BITS
            total = u[i + j] - (product & LIMB_MASK) - borrow
            u[i + j] = total & LIMB_MASK
            borrow = 1 if total < 0 else 0
        total = u[j + n] - carry - borrow
        u[j + n] = total & LIMB_MASK

        if total < 0:
            # q_hat was one too large; add v back
            q_hat -= 1
            carry = 0
            for i in range(n):
                total = u[i + j] + v[i] + carry
                u[i + j] = total & LIMB_MASK
                carry = total >> LIMB_BITS
            u[j + n] = (u[j + n] + carry) & LIMB_MASK

        quotient[j] = q_hat

    remainder = _shift_right_bits(u[:n], shift)
    return normalize(quotient), normalize(remainder)
