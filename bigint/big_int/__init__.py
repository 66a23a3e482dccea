"""Big integer value type module."""

from .BigInt import BigInt
from .abstract.IBigInt import IBigInt
from .native import NativeOperand, check_native, native_abs, native_range, split_native

__all__ = [
    "BigInt",
    "IBigInt",
    "NativeOperand",
    "check_native",
    "native_abs",
    "native_range",
    "split_native",
]
