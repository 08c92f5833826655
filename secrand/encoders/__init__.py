"""Random text encoders."""

from .Encoders import Encoders

__all__ = ["Encoders"]
