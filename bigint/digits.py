"""Digit alphabets and validation of numeric literals."""

from functools import lru_cache
from typing import Dict, NamedTuple, Tuple

from .constants import (
    AUTO_BASE,
    BASE_PREFIXES,
    CASE_INSENSITIVE_MAX_BASE,
    DEFAULT_BASE,
    LOWER_DIGITS,
    MAX_BASE,
    MIN_BASE,
    MIXED_DIGITS,
)
from .exceptions import ParseError


class Literal(NamedTuple):
    """A validated numeric literal: sign, digits and the base they are written in."""

    negative: bool
    digits: str
    base: int


def check_base(base: int) -> int:
    """Ensure ``base`` is a supported digit base.

    Args:
        base (int): Base to check

    Returns:
        int: The base, unchanged

    Raises:
        ParseError: If the base is not an integer in [MIN_BASE, MAX_BASE]
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise ParseError(f"Base must be an integer, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise ParseError(f"Base {base} is out of range [{MIN_BASE}, {MAX_BASE}]")
    return base


@lru_cache(maxsize=None)
def alphabet(base: int) -> str:
    """Canonical digit alphabet of ``base``: lowercase up to base 36, then 0-9A-Za-z."""
    check_base(base)
    if base <= CASE_INSENSITIVE_MAX_BASE:
        return LOWER_DIGITS[:base]
    return MIXED_DIGITS[:base]


@lru_cache(maxsize=None)
def digit_values(base: int) -> Dict[str, int]:
    """Map every accepted digit character of ``base`` to its value."""
    values = {char: value for value, char in enumerate(alphabet(base))}
    if base <= CASE_INSENSITIVE_MAX_BASE:
        values.update({char.upper(): value for char, value in list(values.items())})
    return values


def parse_literal(text: str, base: int = DEFAULT_BASE) -> Literal:
    """Validate a numeric literal without evaluating it.

    The accepted grammar is an optional leading ``-`` followed by one or more
    digits of ``base``. With ``base`` 0 the base is taken from a ``0x``, ``0o``
    or ``0b`` prefix, and is decimal otherwise. Whitespace, underscores and any
    other character outside the alphabet are rejected.

    Args:
        text (str): The literal
        base (int): Digit base, 0 or 2..62

    Returns:
        Literal: Sign, bare digits and resolved base

    Raises:
        ParseError: If the literal is empty, malformed or the base is invalid
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a string literal, got {type(text).__name__}")

    negative = text.startswith("-")
    body = text[1:] if negative else text

    if base == AUTO_BASE and not isinstance(base, bool):
        base, body = _detect_base(body)
    else:
        check_base(base)

    if not body:
        raise ParseError(f"No digits in {text!r}")

    values = digit_values(base)
    offset = len(text) - len(body)
    for position, char in enumerate(body):
        if char not in values:
            raise ParseError(
                f"Invalid digit {char!r} at position {position + offset} for base {base}: {text!r}"
            )

    return Literal(negative, body, base)


# Private Methods
# ------------------------------------------------------------------------------


def _detect_base(body: str) -> Tuple[int, str]:
    prefix = body[:2].lower()
    if prefix in BASE_PREFIXES:
        return BASE_PREFIXES[prefix], body[2:]
    return DEFAULT_BASE, body
