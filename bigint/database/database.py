from typing import Any, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .constants import DATABASE_ECHO, DATABASE_URL

# Global variable to hold the singleton engine
_engine = None


def get_engine() -> Engine:
    """
    Creates and returns a singleton SQLAlchemy engine connected to the database specified by DATABASE_URL.

    The schema is created on first use.

    :return: SQLAlchemy Engine instance.
    :rtype: sqlalchemy.engine.Engine
    """
    global _engine
    if _engine is None:
        _engine = create_engine(DATABASE_URL, echo=DATABASE_ECHO)
        Base.metadata.create_all(_engine)
    return _engine


def set_engine(engine: Optional[Engine]) -> None:
    """
    Replace the singleton engine, e.g. with an in-memory database. Passing None
    resets it so the next call to get_engine() reconnects to DATABASE_URL.

    :param engine: Engine to use, or None.
    """
    global _engine
    if engine is not None:
        Base.metadata.create_all(engine)
    _engine = engine


Base = declarative_base()  # Single instance of Base


def get_orm_base():
    return Base


def save_instance(instance: Any) -> None:
    """
    Save an instance of an ORM model to the database.

    :param instance: The ORM model instance to save.
    """
    engine = get_engine()
    Session = sessionmaker(bind=engine, expire_on_commit=False)
    session = Session()

    try:
        session.add(instance)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def load_instance(model: Any, instance_id: str) -> Optional[Any]:
    """
    Load an instance of an ORM model by primary key.

    :param model: The ORM model class.
    :param instance_id: Primary key value.
    :return: The instance, or None when absent.
    """
    engine = get_engine()
    Session = sessionmaker(bind=engine, expire_on_commit=False)
    session = Session()

    try:
        return session.get(model, instance_id)
    finally:
        session.close()
