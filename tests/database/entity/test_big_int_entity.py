import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from bigint.database import get_orm_base, load_instance
from bigint.database.entity.BigIntEntity import BigIntEntity


# Setup in-memory SQLite database for testing
@pytest.fixture(scope="module")
def test_database():
    engine = create_engine("sqlite:///:memory:")
    Base = get_orm_base()
    Base.metadata.create_all(engine)

    Session = sessionmaker(bind=engine)
    session = Session()

    yield session

    session.close()
    Base.metadata.drop_all(engine)


def test_big_int_entity_save(test_database):
    """Test the saving functionality of BigIntEntity."""
    entity = BigIntEntity(label="modulus", value_hex="-1f")

    test_database.add(entity)
    test_database.commit()

    saved_entity = test_database.query(BigIntEntity).filter_by(id=entity.id).first()
    assert saved_entity is not None, "Entity was not saved."
    assert saved_entity.label == "modulus"
    assert saved_entity.value == "-1f"


def test_big_int_entity_ids_are_unique():
    assert BigIntEntity("a", "1").id != BigIntEntity("a", "1").id


def test_big_int_entity_repr():
    entity = BigIntEntity(label="answer", value_hex="2a")
    assert repr(entity) == f"<BigInt(id={entity.id}, label=answer)>"


def test_saveable_round_trip(memory_engine):
    entity = BigIntEntity(label="answer", value_hex="2a")
    entity.save()

    loaded = load_instance(BigIntEntity, entity.id)
    assert loaded is not None
    assert loaded.label == "answer"
    assert loaded.value == "2a"
    assert BigIntEntity.load("missing") is None
