"""Signed arbitrary-precision integers with C-style operator semantics."""

from .big_int import BigInt
from .exceptions import (
    BigIntError,
    BigIntOverflowError,
    DivisionByZeroError,
    InvalidArgumentError,
    ParseError,
)

__version__ = "0.1.0"

__all__ = [
    "BigInt",
    "BigIntError",
    "BigIntOverflowError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "ParseError",
]
