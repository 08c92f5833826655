"""Bounded integer sampling."""

from .BoundedIntegerSampler import BoundedIntegerSampler
from .SampleMask import fill_down

__all__ = ["BoundedIntegerSampler", "fill_down"]
