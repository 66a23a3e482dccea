import uuid
from sqlalchemy import Column, String

from ..mixins.saveable import Saveable
from ..database import get_orm_base

# Define the Base class for ORM models
Base = get_orm_base()


class BigIntEntity(Base, Saveable):
    """Database entity for storing a labelled big integer."""

    __tablename__ = "big_ints"

    id = Column(String, primary_key=True)  # Unique generated string ID
    label = Column(String, nullable=False)  # Caller supplied name of the value
    value = Column(String, nullable=False)  # Store hex string of the value, '-' prefixed when negative

    def __repr__(self):
        return f"<BigInt(id={self.id}, label={self.label})>"

    def __init__(self, label: str, value_hex: str):
        """Initialize a big integer entity.

        Args:
            label (str): Name of the stored value
            value_hex (str): Base 16 digits of the value
        """
        self.id = str(uuid.uuid4())  # Generate ID on creation
        self.label = label
        self.value = value_hex
