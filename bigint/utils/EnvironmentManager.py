"""Utility class for environment variable management."""

import logging
import os
from enum import Enum
from typing import Any, cast

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class EnvVarType(Enum):
    """Types of environment variables."""
    INT = "int"
    STRING = "str"
    BOOL = "bool"


class EnvironmentVariables(Enum):
    """
    Enum of known environment variables used by the library.

    Each enum value is a tuple of (env_var_name, default_value, type).
    """
    BIGINT_BACKEND = ("BIGINT_BACKEND", "gmpy2", EnvVarType.STRING)
    DATABASE_TYPE = ("DATABASE_TYPE", "sqlite", EnvVarType.STRING)
    DATABASE_NAME = ("DATABASE_NAME", "bigint.db", EnvVarType.STRING)
    DATABASE_USER = ("DATABASE_USER", "", EnvVarType.STRING)
    DATABASE_PASSWORD = ("DATABASE_PASSWORD", "", EnvVarType.STRING)
    DATABASE_HOST = ("DATABASE_HOST", "localhost", EnvVarType.STRING)
    DATABASE_PORT = ("DATABASE_PORT", 5432, EnvVarType.INT)
    DATABASE_ECHO = ("DATABASE_ECHO", False, EnvVarType.BOOL)

    def __init__(self, env_name: str, default_value: Any, var_type: EnvVarType):
        self.env_name = env_name
        self.default_value = default_value
        self.var_type = var_type


class EnvironmentManager:
    """Static utility class for environment variable management."""

    @staticmethod
    def get_value(env_var: EnvironmentVariables, override_default: Any = None) -> Any:
        """
        Get a value from an environment variable with appropriate type conversion.

        Args:
            env_var: The environment variable to retrieve
            override_default: Optional value to override the default defined in the enum

        Returns:
            The value of the environment variable or the default with appropriate type
        """
        default = override_default if override_default is not None else env_var.default_value

        value = os.environ.get(env_var.env_name)
        if value is None:
            return default

        if env_var.var_type == EnvVarType.INT:
            try:
                return int(value)
            except ValueError:
                logger.warning(
                    "Ignoring non-integer %s=%r, using %r", env_var.env_name, value, default
                )
                return default
        elif env_var.var_type == EnvVarType.BOOL:
            return value.lower() in ('true', 'yes', '1', 'y')
        else:  # STRING or any other type
            return value

    @staticmethod
    def get_int(env_var: EnvironmentVariables, default = None) -> int:
        return cast(int, EnvironmentManager.get_value(env_var, default))

    @staticmethod
    def get_string(env_var: EnvironmentVariables, default = None) -> str:
        return cast(str, EnvironmentManager.get_value(env_var, default))

    @staticmethod
    def get_bool(env_var: EnvironmentVariables, default = None) -> bool:
        return cast(bool, EnvironmentManager.get_value(env_var, default))
