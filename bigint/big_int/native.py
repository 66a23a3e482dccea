"""Normalization of native integer operands.

Every native operand is converted once into a ``NativeOperand`` holding an
explicit sign and a non-negative magnitude, so each arithmetic family is
written a single time against that pair. ``operator.index`` widens fixed-width
integer types (numpy scalars, for example) to an unbounded ``int`` before the
sign is split off, so the magnitude of the minimum signed value never wraps.
"""

import operator
from typing import NamedTuple, Optional, Tuple

from ..constants import DEFAULT_NATIVE_WIDTH, NATIVE_WIDTHS
from ..exceptions import BigIntOverflowError, InvalidArgumentError


class NativeOperand(NamedTuple):
    negative: bool
    magnitude: int

    @property
    def value(self) -> int:
        return -self.magnitude if self.negative else self.magnitude


def split_native(value: object) -> Optional[NativeOperand]:
    """Split a native integer into sign and magnitude.

    Args:
        value (object): Any object implementing ``__index__``

    Returns:
        Optional[NativeOperand]: The pair, or None if ``value`` is not an integer
    """
    if isinstance(value, (str, bytes, float)) or not hasattr(type(value), "__index__"):
        return None
    widened = operator.index(value)
    return NativeOperand(widened < 0, abs(widened))


def native_range(bits: int = DEFAULT_NATIVE_WIDTH, signed: bool = True) -> Tuple[int, int]:
    """Inclusive bounds of a native integer width.

    Raises:
        InvalidArgumentError: If ``bits`` is not one of 8, 16, 32 or 64
    """
    if bits not in NATIVE_WIDTHS:
        raise InvalidArgumentError(f"Unsupported native width {bits}, expected one of {NATIVE_WIDTHS}")
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def check_native(value: int, bits: int = DEFAULT_NATIVE_WIDTH, signed: bool = True) -> int:
    """Return ``value`` if it is representable in the given width.

    Raises:
        BigIntOverflowError: If the value is out of range
    """
    low, high = native_range(bits, signed)
    if not low <= value <= high:
        kind = "int" if signed else "uint"
        raise BigIntOverflowError(f"{value} does not fit in {kind}{bits} [{low}, {high}]")
    return value


def native_abs(value: int, bits: int = DEFAULT_NATIVE_WIDTH) -> int:
    """Absolute value of a signed native integer, kept in its own width.

    The minimum value of a two's complement width has no positive counterpart
    in that width and raises instead of wrapping. ``split_native`` is the
    widening alternative.

    Raises:
        BigIntOverflowError: For the minimum value of the width
    """
    check_native(value, bits, signed=True)
    return check_native(abs(value), bits, signed=True)
