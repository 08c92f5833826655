import math
import sys

from ..protocol_constants import FLOAT_SOURCE_BITS, FLOAT_SOURCE_BYTES
from ..random_source.abstract.IRandomSource import IRandomSource

# Bits of precision in a double, at most 64
MANT_DIG = sys.float_info.mant_dig


class UniformFloatGenerator:
    """Uniform floats in [0.0, 1.0) built from 64 random bits."""

    def __init__(self, source: IRandomSource) -> None:
        self._source = source

    def uniform_float(self) -> float:
        raw = int.from_bytes(self._source.random_bytes(FLOAT_SOURCE_BYTES), sys.byteorder)
        return math.ldexp(raw >> (FLOAT_SOURCE_BITS - MANT_DIG), -MANT_DIG)
