"""Exceptions raised by BigInt operations."""


class BigIntError(Exception):
    """
    Base BigInt exception class.

    Not raised directly. Each subclass also derives from the builtin exception
    Python code would expect for the same failure on a plain ``int``, so callers
    may catch either.
    """


class ParseError(BigIntError, ValueError):
    """Malformed or empty numeric string, base out of range, or NaN."""


class DivisionByZeroError(BigIntError, ZeroDivisionError):
    """Division, remainder or modular exponentiation with a zero divisor."""


class BigIntOverflowError(BigIntError, OverflowError):
    """Value does not fit a fixed native width, or the backend ran out of room."""


class InvalidArgumentError(BigIntError, ValueError):
    """Argument outside the domain of an operation (e.g. a negative exponent)."""
