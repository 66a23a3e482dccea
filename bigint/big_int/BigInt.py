import math
import operator
import sys
from typing import Any, Callable, Optional, Tuple, Type, Union

from ..constants import DEFAULT_BASE, DEFAULT_NATIVE_WIDTH
from ..digits import check_base, parse_literal
from ..exceptions import (
    BigIntOverflowError,
    DivisionByZeroError,
    InvalidArgumentError,
    ParseError,
)
from ..mpc import IMPC, MPCFactory
from ..mpc.types import BackendValue
from .abstract.IBigInt import IBigInt
from .native import NativeOperand, check_native, split_native

Backend = Union[str, Type[IMPC], None]

# Largest left shift attempted before reporting overflow
MAX_SHIFT = sys.maxsize


class BigInt(IBigInt):
    """A signed arbitrary-precision integer.

    Values mix freely with native integers (either side of an operator) and
    with decimal strings in arithmetic and bitwise expressions. Results live on
    the backend of the left-most BigInt operand.

    Semantics differ from ``int`` where fixed-width C integers differ:

    * ``/`` and ``//`` both truncate toward zero and ``%`` takes the sign of the
      dividend, so ``a == (a / b) * b + a % b``.
    * ``**`` rejects negative exponents instead of producing a float.
    * Shifts are arithmetic: ``a >> n`` is ``floor(a / 2 ** n)``, consistent
      with ``&``, ``|``, ``^`` and ``~`` on infinite two's complement. A
      negative count shifts the other way.

    In-place operators, ``assign`` and the increment family rebind the value of
    the receiver, so instances are mutable and unhashable. Copies never share
    mutable state.
    """

    __hash__ = None

    def __init__(self, value: Any = 0, base: Optional[int] = None, mpc: Backend = None) -> None:
        """Initialize a big integer.

        Args:
            value: A BigInt, native integer, float (truncated toward zero) or string
            base (Optional[int]): Digit base for string values, 0 or 2..62; default 10
            mpc (Backend): Backend class or name; defaults to the value's own
                backend for BigInt values, otherwise BIGINT_BACKEND

        Raises:
            ParseError: For malformed strings, invalid bases or NaN
            BigIntOverflowError: For infinite floats
            TypeError: For unsupported value types, or a base with a non-string value
        """
        if mpc is None and isinstance(value, BigInt):
            mpc = value.get_mpc()
        self._mpc = _resolve_mpc(mpc)
        self._value = self._convert(value, base)

    @classmethod
    def from_native(
        cls,
        value: int,
        bits: int = DEFAULT_NATIVE_WIDTH,
        signed: bool = True,
        mpc: Backend = None,
    ) -> "BigInt":
        """Construct from a native integer constrained to a fixed width.

        Args:
            value (int): Native integer
            bits (int): Width in bits, one of 8, 16, 32, 64
            signed (bool): Whether the width is signed

        Returns:
            BigInt: The same value

        Raises:
            BigIntOverflowError: If the value does not fit the width
        """
        native = split_native(value)
        if native is None:
            raise TypeError(f"Expected a native integer, got {type(value).__name__}")
        return cls(check_native(native.value, bits, signed), mpc=mpc)

    @classmethod
    def big_pow10(cls, exponent: int, mpc: Backend = None) -> "BigInt":
        """Exactly 10 ** exponent, built from its decimal digits.

        Args:
            exponent (int): Non-negative power of ten

        Returns:
            BigInt: 1 followed by ``exponent`` zeros

        Raises:
            InvalidArgumentError: If the exponent is negative
        """
        exponent = operator.index(exponent)
        if exponent < 0:
            raise InvalidArgumentError(f"Power of ten exponent must be non-negative, got {exponent}")
        return cls("1" + "0" * exponent, DEFAULT_BASE, mpc=mpc)

    def get_mpc(self) -> Type[IMPC]:
        return self._mpc

    @property
    def sign(self) -> int:
        return self._mpc.sign(self._value)

    # Serialization
    # ------------------------------------------------------------------------------

    def to_string(self, base: int = DEFAULT_BASE) -> str:
        return self._mpc.format(self._value, check_base(base))

    def to_native(self, bits: int = DEFAULT_NATIVE_WIDTH, signed: bool = True) -> int:
        """Convert to a native integer of a fixed width.

        Raises:
            BigIntOverflowError: If the value does not fit the width
        """
        return check_native(int(self), bits, signed)

    def __str__(self) -> str:
        return self.to_string(DEFAULT_BASE)

    def __repr__(self) -> str:
        return f"BigInt('{self.to_string(DEFAULT_BASE)}')"

    def __int__(self) -> int:
        return self._mpc.to_int(self._value)

    __index__ = __int__

    def __float__(self) -> float:
        try:
            return float(int(self))
        except OverflowError as error:
            raise BigIntOverflowError(f"{self!r} is too large for a float") from error

    # Copy and assignment
    # ------------------------------------------------------------------------------

    def copy(self) -> "BigInt":
        return BigInt._from_value(self._mpc, self._value)

    def __copy__(self) -> "BigInt":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInt":
        return self.copy()

    def assign(self, value: Any, base: Optional[int] = None) -> "BigInt":
        """Replace the value of this instance, keeping its backend."""
        self._value = self._convert(value, base)
        return self

    # Arithmetic
    # ------------------------------------------------------------------------------

    def __add__(self, other: Any) -> "BigInt":
        return self._result(self._dispatch(other, self._add_big, self._add_native))

    __radd__ = __add__

    def __iadd__(self, other: Any) -> "BigInt":
        return self._update(self._dispatch(other, self._add_big, self._add_native))

    def __sub__(self, other: Any) -> "BigInt":
        return self._result(self._dispatch(other, self._sub_big, self._sub_native))

    def __rsub__(self, other: Any) -> "BigInt":
        return self._result(self._dispatch(other, self._rsub_big, self._rsub_native))

    def __isub__(self, other: Any) -> "BigInt":
        return self._update(self._dispatch(other, self._sub_big, self._sub_native))

    def __mul__(self, other: Any) -> "BigInt":
        return self._result(self._dispatch(other, self._mul_big, self._mul_native))

    __rmul__ = __mul__

    def __imul__(self, other: Any) -> "BigInt":
        return self._update(self._dispatch(other, self._mul_big, self._mul_native))

    def __truediv__(self, other: Any) -> "BigInt":
        return self._result(self._dispatch(other, self._div_big, self._div_native))

    def __rtruediv__(self, other: Any) -> "BigInt":
        return self._result(self._dispatch(other, self._rdiv_big, self._rdiv_native))

    def __itruediv__(self, other: Any) -> "BigInt":
        return self._update(self._dispatch(other, self._div_big, self._div_native))

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__
    __ifloordiv__ = __itruediv__

    def __mod__(self, other: Any) -> "BigInt":
        return self._result(self._dispatch(other, self._mod_big, self._mod_native))

    def __rmod__(self, other: Any) -> "BigInt":
        return self._result(self._dispatch(other, self._rmod_big, self._rmod_native))

    def __imod__(self, other: Any) -> "BigInt":
        return self._update(self._dispatch(other, self._mod_big, self._mod_native))

    def __divmod__(self, other: Any) -> Tuple["BigInt", "BigInt"]:
        quotient = self.__truediv__(other)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient, self.__mod__(other)

    def __rdivmod__(self, other: Any) -> Tuple["BigInt", "BigInt"]:
        quotient = self.__rtruediv__(other)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient, self.__rmod__(other)

    def __neg__(self) -> "BigInt":
        return BigInt._from_value(self._mpc, self._mpc.negate(self._value))

    def __pos__(self) -> "BigInt":
        return self.copy()

    def __abs__(self) -> "BigInt":
        return -self if self.sign < 0 else self.copy()

    # Exponentiation
    # ------------------------------------------------------------------------------

    def pow(self, exponent: Any) -> "BigInt":
        exp = _exponent(exponent)
        return BigInt._from_value(self._mpc, _guard(self._mpc.pow, self._value, exp))

    def powm(self, exponent: Any, modulus: Any) -> "BigInt":
        exp = _exponent(exponent)
        mod = self._coerce(modulus)
        if mod is None:
            raise TypeError(f"Unsupported modulus type {type(modulus).__name__}")
        if self._mpc.sign(mod) == 0:
            raise DivisionByZeroError("Modular exponentiation with zero modulus")
        if self._mpc.sign(mod) < 0:
            mod = self._mpc.negate(mod)
        return BigInt._from_value(
            self._mpc, self._mpc.powmod(self._value, self._mpc.from_int(exp), mod)
        )

    def __pow__(self, exponent: Any, modulo: Any = None) -> "BigInt":
        if modulo is not None:
            return self.powm(exponent, modulo)
        if not isinstance(exponent, BigInt) and split_native(exponent) is None:
            return NotImplemented
        return self.pow(exponent)

    def __rpow__(self, base: Any, modulo: Any = None) -> "BigInt":
        if split_native(base) is None:
            return NotImplemented
        return BigInt(base, mpc=self._mpc).__pow__(self, modulo)

    def __ipow__(self, exponent: Any) -> "BigInt":
        result = self.__pow__(exponent)
        if result is NotImplemented:
            return NotImplemented
        self._value = result._value
        return self

    # Bitwise
    # ------------------------------------------------------------------------------

    def __and__(self, other: Any) -> "BigInt":
        return self._result(self._bitwise(other, self._mpc.bit_and))

    __rand__ = __and__

    def __iand__(self, other: Any) -> "BigInt":
        return self._update(self._bitwise(other, self._mpc.bit_and))

    def __or__(self, other: Any) -> "BigInt":
        return self._result(self._bitwise(other, self._mpc.bit_or))

    __ror__ = __or__

    def __ior__(self, other: Any) -> "BigInt":
        return self._update(self._bitwise(other, self._mpc.bit_or))

    def __xor__(self, other: Any) -> "BigInt":
        return self._result(self._bitwise(other, self._mpc.bit_xor))

    __rxor__ = __xor__

    def __ixor__(self, other: Any) -> "BigInt":
        return self._update(self._bitwise(other, self._mpc.bit_xor))

    def __invert__(self) -> "BigInt":
        return BigInt._from_value(self._mpc, self._mpc.bit_not(self._value))

    def __lshift__(self, count: Any) -> "BigInt":
        return self._result(self._shift(count, left=True))

    def __rshift__(self, count: Any) -> "BigInt":
        return self._result(self._shift(count, left=False))

    def __ilshift__(self, count: Any) -> "BigInt":
        return self._update(self._shift(count, left=True))

    def __irshift__(self, count: Any) -> "BigInt":
        return self._update(self._shift(count, left=False))

    def __rlshift__(self, other: Any) -> "BigInt":
        if split_native(other) is None:
            return NotImplemented
        return BigInt(other, mpc=self._mpc) << self

    def __rrshift__(self, other: Any) -> "BigInt":
        if split_native(other) is None:
            return NotImplemented
        return BigInt(other, mpc=self._mpc) >> self

    # Comparison and logic
    # ------------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        order = self._compare(other)
        return order if order is NotImplemented else order == 0

    def __ne__(self, other: Any) -> bool:
        order = self._compare(other)
        return order if order is NotImplemented else order != 0

    def __lt__(self, other: Any) -> bool:
        order = self._compare(other)
        return order if order is NotImplemented else order < 0

    def __le__(self, other: Any) -> bool:
        order = self._compare(other)
        return order if order is NotImplemented else order <= 0

    def __gt__(self, other: Any) -> bool:
        order = self._compare(other)
        return order if order is NotImplemented else order > 0

    def __ge__(self, other: Any) -> bool:
        order = self._compare(other)
        return order if order is NotImplemented else order >= 0

    def __bool__(self) -> bool:
        return not self.is_zero()

    def is_zero(self) -> bool:
        return self._mpc.sign(self._value) == 0

    def logical_not(self) -> bool:
        return self.is_zero()

    # Increment and decrement
    # ------------------------------------------------------------------------------

    def increment(self) -> "BigInt":
        """Add one in place and return this instance (prefix ``++``)."""
        self._value = self._mpc.add_ui(self._value, 1)
        return self

    def decrement(self) -> "BigInt":
        """Subtract one in place and return this instance (prefix ``--``)."""
        self._value = self._mpc.sub_ui(self._value, 1)
        return self

    def post_increment(self) -> "BigInt":
        """Add one in place and return a copy of the previous value (postfix ``++``)."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "BigInt":
        """Subtract one in place and return a copy of the previous value (postfix ``--``)."""
        previous = self.copy()
        self.decrement()
        return previous

    # Size introspection
    # ------------------------------------------------------------------------------

    def size_bytes(self) -> int:
        """Bytes of backend limb storage holding the magnitude.

        This is the limb count times the limb size of the backend (32-bit limbs
        for the limb backend, the GMP limb size for gmpy2), not the minimal
        byte length of the value. Zero occupies no limbs.
        """
        return self._mpc.limb_count(self._value) * self._mpc.limb_bits() // 8

    def size_bits(self) -> int:
        """Bits of backend limb storage, always ``size_bytes() * 8``."""
        return self.size_bytes() * 8

    def bit_length(self) -> int:
        """Mathematical bit length of the magnitude."""
        return self._mpc.bit_length(self._value)

    # Private Methods
    # ------------------------------------------------------------------------------

    @classmethod
    def _from_value(cls, mpc: Type[IMPC], value: BackendValue) -> "BigInt":
        result = cls.__new__(cls)
        result._mpc = mpc
        result._value = value
        return result

    def _convert(self, value: Any, base: Optional[int]) -> BackendValue:
        if base is not None and not isinstance(value, str):
            raise TypeError("BigInt() can't convert non-string with explicit base")

        if isinstance(value, BigInt):
            return self._foreign(value)

        if isinstance(value, str):
            literal = parse_literal(value, DEFAULT_BASE if base is None else base)
            parsed = self._mpc.parse(literal.digits, literal.base)
            return self._mpc.negate(parsed) if literal.negative else parsed

        if isinstance(value, float):
            if math.isnan(value):
                raise ParseError("Cannot convert NaN to BigInt")
            if math.isinf(value):
                raise BigIntOverflowError("Cannot convert infinity to BigInt")
            return self._mpc.from_float(value)

        native = split_native(value)
        if native is None:
            raise TypeError(
                f"BigInt() argument must be a string, a number or a BigInt, not {type(value).__name__!r}"
            )
        return self._mpc.from_int(native.value)

    def _foreign(self, other: "BigInt") -> BackendValue:
        """Value of ``other`` on this instance's backend."""
        if other._mpc is self._mpc:
            return other._value
        return self._mpc.from_int(other._mpc.to_int(other._value))

    def _coerce(self, other: Any) -> Optional[BackendValue]:
        if isinstance(other, (BigInt, str)):
            return self._convert(other, None)
        native = split_native(other)
        if native is None:
            return None
        return self._mpc.from_int(native.value)

    def _dispatch(
        self,
        other: Any,
        on_big: Callable[[BackendValue], BackendValue],
        on_native: Callable[[NativeOperand], BackendValue],
    ) -> BackendValue:
        if isinstance(other, (BigInt, str)):
            return on_big(self._coerce(other))
        native = split_native(other)
        if native is None:
            return NotImplemented
        return on_native(native)

    def _result(self, value: BackendValue) -> "BigInt":
        if value is NotImplemented:
            return NotImplemented
        return BigInt._from_value(self._mpc, value)

    def _update(self, value: BackendValue) -> "BigInt":
        if value is NotImplemented:
            return NotImplemented
        self._value = value
        return self

    def _compare(self, other: Any) -> int:
        if isinstance(other, BigInt):
            return self._mpc.compare(self._value, self._foreign(other))
        native = split_native(other)
        if native is None:
            return NotImplemented
        return self._mpc.compare(self._value, self._mpc.from_int(native.value))

    def _bitwise(self, other: Any, operation: Callable) -> BackendValue:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return operation(self._value, value)

    def _shift(self, count: Any, left: bool) -> BackendValue:
        if isinstance(count, BigInt):
            count = int(count)
        else:
            native = split_native(count)
            if native is None:
                return NotImplemented
            count = native.value

        if count < 0:
            count, left = -count, not left
        if left:
            if self.is_zero():
                return self._value
            if count > MAX_SHIFT:
                raise BigIntOverflowError(f"Shift count {count} is too large")
            return _guard(self._mpc.shift_left, self._value, count)
        if count > self._mpc.bit_length(self._value):
            return self._mpc.from_int(-1 if self.sign < 0 else 0)
        return self._mpc.shift_right(self._value, count)

    def _add_big(self, other: BackendValue) -> BackendValue:
        return self._mpc.add(self._value, other)

    def _add_native(self, native: NativeOperand) -> BackendValue:
        if native.negative:
            return self._mpc.sub_ui(self._value, native.magnitude)
        return self._mpc.add_ui(self._value, native.magnitude)

    def _sub_big(self, other: BackendValue) -> BackendValue:
        return self._mpc.sub(self._value, other)

    def _sub_native(self, native: NativeOperand) -> BackendValue:
        if native.negative:
            return self._mpc.add_ui(self._value, native.magnitude)
        return self._mpc.sub_ui(self._value, native.magnitude)

    def _rsub_big(self, other: BackendValue) -> BackendValue:
        return self._mpc.sub(other, self._value)

    def _rsub_native(self, native: NativeOperand) -> BackendValue:
        if native.negative:
            return self._mpc.negate(self._mpc.add_ui(self._value, native.magnitude))
        return self._mpc.ui_sub(native.magnitude, self._value)

    def _mul_big(self, other: BackendValue) -> BackendValue:
        return self._mpc.mul(self._value, other)

    def _mul_native(self, native: NativeOperand) -> BackendValue:
        product = self._mpc.mul_ui(self._value, native.magnitude)
        return self._mpc.negate(product) if native.negative else product

    def _div_big(self, divisor: BackendValue) -> BackendValue:
        _check_divisor(self._mpc.sign(divisor) == 0)
        return self._mpc.tdiv_q(self._value, divisor)

    def _div_native(self, native: NativeOperand) -> BackendValue:
        _check_divisor(native.magnitude == 0)
        quotient = self._mpc.tdiv_q_ui(self._value, native.magnitude)
        return self._mpc.negate(quotient) if native.negative else quotient

    def _rdiv_big(self, dividend: BackendValue) -> BackendValue:
        _check_divisor(self.is_zero())
        return self._mpc.tdiv_q(dividend, self._value)

    def _rdiv_native(self, native: NativeOperand) -> BackendValue:
        return self._rdiv_big(self._mpc.from_int(native.value))

    def _mod_big(self, divisor: BackendValue) -> BackendValue:
        _check_divisor(self._mpc.sign(divisor) == 0)
        return self._mpc.tdiv_r(self._value, divisor)

    def _mod_native(self, native: NativeOperand) -> BackendValue:
        # The remainder follows the dividend, so the divisor's sign is irrelevant
        _check_divisor(native.magnitude == 0)
        return self._mpc.tdiv_r_ui(self._value, native.magnitude)

    def _rmod_big(self, dividend: BackendValue) -> BackendValue:
        _check_divisor(self.is_zero())
        return self._mpc.tdiv_r(dividend, self._value)

    def _rmod_native(self, native: NativeOperand) -> BackendValue:
        return self._rmod_big(self._mpc.from_int(native.value))


def _resolve_mpc(mpc: Backend) -> Type[IMPC]:
    if mpc is None or isinstance(mpc, str):
        return MPCFactory.get_mpc(mpc)
    return mpc


def _check_divisor(is_zero: bool) -> None:
    if is_zero:
        raise DivisionByZeroError("BigInt division by zero")


def _exponent(exponent: Any) -> int:
    if isinstance(exponent, BigInt):
        value = int(exponent)
    else:
        native = split_native(exponent)
        if native is None:
            raise TypeError(f"Exponent must be an integer, got {type(exponent).__name__}")
        value = native.value
    if value < 0:
        raise InvalidArgumentError(f"Exponent must be non-negative, got {value}")
    return value


def _guard(operation: Callable, *args: Any) -> BackendValue:
    """Run a backend operation whose result size is caller controlled."""
    try:
        return operation(*args)
    except (MemoryError, OverflowError) as error:
        raise BigIntOverflowError(f"Result too large for the backend: {error}") from error
