"""Secure randomness backend module."""

from .BackendState import BackendState, BackendStateCell, reset_backend_states, state_for_path
from .DeviceRandomSource import DeviceRandomSource
from .LibraryRandomSource import LibraryRandomSource
from .RandomSourceProvider import RandomSourceProvider, get_provider, reset_provider
from .abstract.IRandomSource import IRandomSource

__all__ = [
    "BackendState",
    "BackendStateCell",
    "reset_backend_states",
    "state_for_path",
    "DeviceRandomSource",
    "LibraryRandomSource",
    "RandomSourceProvider",
    "get_provider",
    "reset_provider",
    "IRandomSource",
]
