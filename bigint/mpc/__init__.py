"""Multi-precision computing module."""

from .MPC import MPC
from .LimbMPC import LimbMPC
from .LimbInt import LimbInt
from .MPCFactory import MPCFactory
from .abstract.IMPC import IMPC
from .types import MPZ, Magnitude

__all__ = ["MPC", "LimbMPC", "LimbInt", "MPCFactory", "IMPC", "MPZ", "Magnitude"]
