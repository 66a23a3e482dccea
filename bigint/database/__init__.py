"""Persistence of big integers through SQLAlchemy."""

from .database import get_engine, get_orm_base, load_instance, save_instance, set_engine

__all__ = ["get_engine", "get_orm_base", "load_instance", "save_instance", "set_engine"]
