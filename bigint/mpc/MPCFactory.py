import logging
from typing import Dict, Optional, Type

from ..exceptions import InvalidArgumentError
from ..utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .abstract.IMPC import IMPC
from .LimbMPC import LimbMPC
from .MPC import MPC

logger = logging.getLogger(__name__)

_BACKENDS: Dict[str, Type[IMPC]] = {
    MPC.NAME: MPC,
    LimbMPC.NAME: LimbMPC,
}


class MPCFactory:
    """Factory resolving multi-precision backends by name."""

    @staticmethod
    def get_mpc(name: Optional[str] = None) -> Type[IMPC]:
        """Get a backend by name, or the one configured in the environment.

        Args:
            name (Optional[str]): Backend name; defaults to BIGINT_BACKEND

        Returns:
            Type[IMPC]: The backend implementation

        Raises:
            InvalidArgumentError: If no backend has that name
        """
        if name is None:
            name = EnvironmentManager.get_string(EnvironmentVariables.BIGINT_BACKEND)
        key = name.strip().lower()
        try:
            backend = _BACKENDS[key]
        except KeyError:
            raise InvalidArgumentError(
                f"Unknown backend {name!r}, expected one of {sorted(_BACKENDS)}"
            ) from None
        logger.debug("Using %s multi-precision backend", backend.NAME)
        return backend

    @staticmethod
    def available() -> list:
        return sorted(_BACKENDS)
