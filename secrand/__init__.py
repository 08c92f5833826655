"""Secure random number generator interface.

Wraps the platform's cryptographically secure randomness (OpenSSL when the
interpreter links it, otherwise the OS entropy device) for values such as
HTTP cookies, tokens and session identifiers.
"""

from .errors import RandomSourceUnavailable, SamplingExhausted, SecRandError, ShortRead
from .secure_random import (
    base64,
    bounded_integer,
    hex,
    random_bytes,
    secure_random,
    uniform_float,
)
from .random_source import get_provider, reset_provider

__all__ = [
    "random_bytes",
    "hex",
    "base64",
    "bounded_integer",
    "uniform_float",
    "secure_random",
    "get_provider",
    "reset_provider",
    "SecRandError",
    "RandomSourceUnavailable",
    "ShortRead",
    "SamplingExhausted",
]
