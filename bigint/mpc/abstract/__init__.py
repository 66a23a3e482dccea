"""Abstract multi-precision backend interfaces."""

from .IMPC import IMPC

__all__ = ["IMPC"]
