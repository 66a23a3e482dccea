"""Utility modules for the bigint package."""

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables, EnvVarType

__all__ = ["EnvironmentManager", "EnvironmentVariables", "EnvVarType"]
