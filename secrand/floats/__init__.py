"""Uniform float generation."""

from .UniformFloatGenerator import UniformFloatGenerator, MANT_DIG

__all__ = ["UniformFloatGenerator", "MANT_DIG"]
