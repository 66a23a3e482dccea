"""Database entity models."""

from .BigIntEntity import BigIntEntity

__all__ = ["BigIntEntity"]
