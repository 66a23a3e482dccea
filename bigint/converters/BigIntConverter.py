"""Converter for BigInt values."""

from typing import Optional

from ..big_int.BigInt import Backend, BigInt
from ..database.entity.BigIntEntity import BigIntEntity

STORAGE_BASE = 16


class BigIntConverter:
    """Converter for storing BigInt values in the database."""

    @staticmethod
    def to_entity(label: str, value: BigInt) -> BigIntEntity:
        """Convert a BigInt to a BigIntEntity.

        Args:
            label (str): Name to store the value under
            value (BigInt): The value to convert

        Returns:
            BigIntEntity: The database entity
        """
        if not isinstance(value, BigInt):
            raise TypeError(f"Expected a BigInt, got {type(value).__name__}")
        return BigIntEntity(label, value.to_string(STORAGE_BASE))

    @staticmethod
    def from_entity(entity: BigIntEntity, mpc: Optional[Backend] = None) -> BigInt:
        """Convert a BigIntEntity back to a BigInt.

        Args:
            entity (BigIntEntity): The stored entity
            mpc: Backend for the result; defaults to BIGINT_BACKEND

        Returns:
            BigInt: The stored value

        Raises:
            ParseError: If the stored digits are not valid base 16
        """
        return BigInt(entity.value, STORAGE_BASE, mpc=mpc)
