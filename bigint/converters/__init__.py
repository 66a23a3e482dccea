"""Converters for database entities."""

from .BigIntConverter import BigIntConverter

__all__ = ["BigIntConverter"]
