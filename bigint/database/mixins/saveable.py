from typing import Optional, Type, TypeVar

from ..database import load_instance, save_instance

T = TypeVar("T", bound="Saveable")


class Saveable:
    """Persistence helpers for ORM entities keyed by a string id."""

    def save(self) -> None:
        save_instance(self)

    @classmethod
    def load(cls: Type[T], instance_id: str) -> Optional[T]:
        """Load a stored entity of this type, or None if no row has that id."""
        return load_instance(cls, instance_id)
