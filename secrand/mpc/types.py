"""Type definitions for multi-precision integer operations."""

from typing import TypeVar, NewType
from gmpy2 import mpz as _mpz

# Define base types from gmpy2
MPZ = NewType("MPZ", _mpz)

# Generic type variable for numeric operations
T = TypeVar("T", MPZ, int)
