import pytest

from bigint import BigInt
from bigint.mpc import LimbMPC, MPC


@pytest.fixture(params=[MPC, LimbMPC], ids=["gmpy2", "limb"])
def mpc(request):
    """Every BigInt test runs once per backend."""
    return request.param


@pytest.fixture
def big(mpc):
    """Factory building BigInt values on the backend under test."""
    def make(value=0, base=None):
        return BigInt(value, base, mpc=mpc)
    return make


def tdiv(a: int, b: int) -> int:
    """Reference quotient rounded toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def tmod(a: int, b: int) -> int:
    """Reference remainder with the sign of the dividend."""
    return a - tdiv(a, b) * b


@pytest.fixture
def memory_engine():
    """Route the persistence layer to a private in-memory SQLite database."""
    from sqlalchemy import create_engine
    from sqlalchemy.pool import StaticPool

    from bigint.database import set_engine

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    set_engine(engine)
    yield engine
    set_engine(None)
    engine.dispose()
