"""
Module-level secure randomness API.

Every function draws from the process-wide provider returned by
`secrand.random_source.get_provider()`, which is configured from the
SECRAND_* environment variables on first use.

Example:

    >>> import secrand
    >>> secrand.hex(10)          # 20 lowercase hex digits
    >>> secrand.base64(12)       # 16 base64 characters
    >>> secrand.secure_random(6) # integer in [0, 6)
    >>> secrand.secure_random()  # float in [0.0, 1.0)
"""

from numbers import Real
from typing import Optional

from .encoders import Encoders
from .floats import UniformFloatGenerator
from .random_source import get_provider
from .sampler import BoundedIntegerSampler


def random_bytes(n: Optional[int] = None) -> bytes:
    """Get n secure random bytes (16 when omitted)."""
    return get_provider().random_bytes(n)


def hex(n: Optional[int] = None) -> str:
    """Get a lowercase hex string encoding n secure random bytes (16 when omitted)."""
    return Encoders(get_provider()).hex(n)


def base64(n: Optional[int] = None) -> str:
    """Get a single-line base64 string encoding n secure random bytes (16 when omitted)."""
    return Encoders(get_provider()).base64(n)


def bounded_integer(n: int) -> int:
    """Get a uniformly distributed integer in [0, n); n must be positive."""
    provider = get_provider()
    return BoundedIntegerSampler(provider, provider.get_settings().max_rejections).bounded_integer(n)


def uniform_float() -> float:
    """Get a uniformly distributed float in [0.0, 1.0)."""
    return UniformFloatGenerator(get_provider()).uniform_float()


def secure_random(n: Real = 0) -> int | float:
    """
    Get a secure random number.

    Args:
        n: A positive integer gives an integer r with 0 <= r < n.
           Zero, a negative number or no argument gives a float in [0.0, 1.0).

    Returns:
        The sampled integer or float
    """
    if n > 0:
        return bounded_integer(n)
    return uniform_float()
