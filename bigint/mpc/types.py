"""Type definitions for multi-precision computing operations."""

from typing import Any, List, NewType, TypeVar
from gmpy2 import mpz as _mpz

# Define base types from gmpy2
MPZ = NewType("MPZ", _mpz)

# A limb vector, least significant limb first
Magnitude = List[int]

# Opaque signed value owned by a backend (MPZ for gmpy2, LimbInt for limbs)
T = TypeVar("T")
BackendValue = Any
