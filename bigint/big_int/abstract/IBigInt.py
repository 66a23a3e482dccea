from abc import ABC, abstractmethod


class IBigInt(ABC):
    """Abstract base class defining the named operations of a big integer.

    Arithmetic, bitwise and comparison operators are provided through the
    Python operator protocol by implementations.
    """

    @abstractmethod
    def to_string(self, base: int = 10) -> str:
        """Render the value in ``base``.

        Args:
            base (int): Digit base in 2..62

        Returns:
            str: Canonical digits, with a leading ``-`` for negative values
        """

    @abstractmethod
    def pow(self, exponent) -> "IBigInt":
        """Raise the value to a non-negative power.

        Args:
            exponent: Non-negative native integer or big integer

        Returns:
            IBigInt: value ** exponent
        """

    @abstractmethod
    def powm(self, exponent, modulus) -> "IBigInt":
        """Modular exponentiation.

        Args:
            exponent: Non-negative exponent
            modulus: Non-zero modulus

        Returns:
            IBigInt: value ** exponent mod |modulus|, in [0, |modulus|)
        """

    @abstractmethod
    def size_bits(self) -> int:
        """Storage size of the magnitude in bits."""

    @abstractmethod
    def size_bytes(self) -> int:
        """Storage size of the magnitude in bytes."""

    @abstractmethod
    def is_zero(self) -> bool:
        """Whether the value equals zero."""
