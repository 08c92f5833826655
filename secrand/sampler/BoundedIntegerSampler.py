import logging
import operator

from ..errors import SamplingExhausted
from ..mpc import MPC
from ..random_source.abstract.IRandomSource import IRandomSource
from .SampleMask import fill_down

logger = logging.getLogger(__name__)


class BoundedIntegerSampler:
    """Uniform integers below a bound, by masked rejection sampling.

    The top random byte is masked down to the bit width of the bound's top byte,
    so at least half of all draws are accepted. Candidates at or above the bound
    are thrown away rather than reduced, which keeps the result free of modulo bias.
    """

    def __init__(self, source: IRandomSource, max_rejections: int = 10_000) -> None:
        """Initialize the sampler.

        Args:
            source (IRandomSource): Where raw bytes come from
            max_rejections (int): Draws allowed before the source is declared broken
        """
        self._source = source
        self._max_rejections = max_rejections

    def bounded_integer(self, n: int) -> int:
        """Get a uniformly distributed integer r with 0 <= r < n.

        Args:
            n (int): Exclusive upper bound, must be positive

        Returns:
            int: The sampled value
        """
        n = operator.index(n)
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")

        bound = MPC.to_bytes(n)
        mask = fill_down(bound[0])

        for _ in range(self._max_rejections):
            rnd = bytearray(self._source.random_bytes(len(bound)))
            rnd[0] &= mask
            # Equal-length big-endian strings compare like the integers they encode
            if rnd < bound:
                return int(MPC.from_bytes(bytes(rnd)))

        logger.critical(
            "Rejection sampling below %d failed %d times in a row; random source is suspect",
            n,
            self._max_rejections,
        )
        raise SamplingExhausted(n, self._max_rejections)
