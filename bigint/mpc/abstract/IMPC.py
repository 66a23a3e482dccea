from abc import ABC, abstractmethod
from ..types import BackendValue


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations.

    Backend values are immutable signed integers. Methods suffixed ``_ui`` take a
    native non-negative magnitude as their unsigned operand; callers resolve the
    sign before reaching them. Division and remainder truncate toward zero.
    """

    NAME = ""

    @staticmethod
    @abstractmethod
    def from_int(value: int) -> BackendValue:
        """Convert a Python integer to a backend value.

        Args:
            value (int): Integer value to convert

        Returns:
            BackendValue: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def to_int(value: BackendValue) -> int:
        """Convert a backend value to a Python integer.

        Args:
            value (BackendValue): Value to convert

        Returns:
            int: The same number as a Python integer
        """

    @staticmethod
    @abstractmethod
    def from_float(value: float) -> BackendValue:
        """Convert a finite float, truncating toward zero.

        Args:
            value (float): Finite floating-point value

        Returns:
            BackendValue: The integral part of the value
        """

    @staticmethod
    @abstractmethod
    def parse(digits: str, base: int) -> BackendValue:
        """Evaluate a validated, unsigned digit string.

        Args:
            digits (str): Non-empty digits of ``base`` with no sign or prefix
            base (int): Digit base in 2..62

        Returns:
            BackendValue: Non-negative value of the digits
        """

    @staticmethod
    @abstractmethod
    def format(value: BackendValue, base: int) -> str:
        """Render a value with the canonical alphabet of ``base``.

        Args:
            value (BackendValue): Value to render
            base (int): Digit base in 2..62

        Returns:
            str: Digits with a leading ``-`` for negative values
        """

    @staticmethod
    @abstractmethod
    def sign(value: BackendValue) -> int:
        """Return -1, 0 or 1 according to the sign of ``value``."""

    @staticmethod
    @abstractmethod
    def compare(left: BackendValue, right: BackendValue) -> int:
        """Return -1, 0 or 1 as ``left`` is less than, equal to or greater than ``right``."""

    @staticmethod
    @abstractmethod
    def negate(value: BackendValue) -> BackendValue:
        """Return ``-value``."""

    @staticmethod
    @abstractmethod
    def add(left: BackendValue, right: BackendValue) -> BackendValue:
        """Return ``left + right``."""

    @staticmethod
    @abstractmethod
    def sub(left: BackendValue, right: BackendValue) -> BackendValue:
        """Return ``left - right``."""

    @staticmethod
    @abstractmethod
    def mul(left: BackendValue, right: BackendValue) -> BackendValue:
        """Return ``left * right``."""

    @staticmethod
    @abstractmethod
    def add_ui(left: BackendValue, magnitude: int) -> BackendValue:
        """Return ``left + magnitude`` for a non-negative native magnitude."""

    @staticmethod
    @abstractmethod
    def sub_ui(left: BackendValue, magnitude: int) -> BackendValue:
        """Return ``left - magnitude`` for a non-negative native magnitude."""

    @staticmethod
    @abstractmethod
    def ui_sub(magnitude: int, right: BackendValue) -> BackendValue:
        """Return ``magnitude - right`` for a non-negative native magnitude."""

    @staticmethod
    @abstractmethod
    def mul_ui(left: BackendValue, magnitude: int) -> BackendValue:
        """Return ``left * magnitude`` for a non-negative native magnitude."""

    @staticmethod
    @abstractmethod
    def tdiv_q(dividend: BackendValue, divisor: BackendValue) -> BackendValue:
        """Compute the quotient of ``dividend / divisor`` rounded toward zero.

        Args:
            dividend (BackendValue): Value to divide
            divisor (BackendValue): Non-zero divisor

        Returns:
            BackendValue: Truncated quotient
        """

    @staticmethod
    @abstractmethod
    def tdiv_r(dividend: BackendValue, divisor: BackendValue) -> BackendValue:
        """Compute the remainder of truncating division.

        Args:
            dividend (BackendValue): Value to divide
            divisor (BackendValue): Non-zero divisor

        Returns:
            BackendValue: Remainder carrying the sign of ``dividend``
        """

    @staticmethod
    @abstractmethod
    def tdiv_q_ui(dividend: BackendValue, magnitude: int) -> BackendValue:
        """Truncated quotient by a positive native magnitude."""

    @staticmethod
    @abstractmethod
    def tdiv_r_ui(dividend: BackendValue, magnitude: int) -> BackendValue:
        """Truncated remainder by a positive native magnitude."""

    @staticmethod
    @abstractmethod
    def pow(base: BackendValue, exp: int) -> BackendValue:
        """Compute base ** exp.

        Args:
            base (BackendValue): Base value
            exp (int): Non-negative exponent

        Returns:
            BackendValue: Result of exponentiation
        """

    @staticmethod
    @abstractmethod
    def powmod(base: BackendValue, exp: BackendValue, mod: BackendValue) -> BackendValue:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (BackendValue): Base value, any sign
            exp (BackendValue): Non-negative exponent
            mod (BackendValue): Positive modulus

        Returns:
            BackendValue: Result in [0, mod)
        """

    @staticmethod
    @abstractmethod
    def shift_left(value: BackendValue, count: int) -> BackendValue:
        """Return ``value * 2 ** count`` for a non-negative count."""

    @staticmethod
    @abstractmethod
    def shift_right(value: BackendValue, count: int) -> BackendValue:
        """Return ``floor(value / 2 ** count)`` for a non-negative count."""

    @staticmethod
    @abstractmethod
    def bit_and(left: BackendValue, right: BackendValue) -> BackendValue:
        """Bitwise AND on infinite two's complement."""

    @staticmethod
    @abstractmethod
    def bit_or(left: BackendValue, right: BackendValue) -> BackendValue:
        """Bitwise OR on infinite two's complement."""

    @staticmethod
    @abstractmethod
    def bit_xor(left: BackendValue, right: BackendValue) -> BackendValue:
        """Bitwise XOR on infinite two's complement."""

    @staticmethod
    @abstractmethod
    def bit_not(value: BackendValue) -> BackendValue:
        """Bitwise complement, ``-value - 1``."""

    @staticmethod
    @abstractmethod
    def bit_length(value: BackendValue) -> int:
        """Number of bits needed to write ``abs(value)``; 0 for zero."""

    @staticmethod
    @abstractmethod
    def limb_count(value: BackendValue) -> int:
        """Number of limbs storing the magnitude of ``value``; 0 for zero."""

    @staticmethod
    @abstractmethod
    def limb_bits() -> int:
        """Number of bits per limb."""
