"""Abstract big integer interfaces."""

from .IBigInt import IBigInt

__all__ = ["IBigInt"]
