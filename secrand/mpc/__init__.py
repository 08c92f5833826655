"""Multi-precision integer module."""

from .MPC import MPC
from .abstract.IMPC import IMPC
from .types import MPZ, T

__all__ = ["MPC", "IMPC", "MPZ", "T"]
