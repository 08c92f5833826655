"""Utility modules for secrand."""

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .Settings import BackendPreference, Settings

__all__ = ["EnvironmentManager", "EnvironmentVariables", "BackendPreference", "Settings"]
