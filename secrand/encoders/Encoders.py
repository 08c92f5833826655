from base64 import b64encode
from typing import Optional

from ..protocol_constants import DEFAULT_BYTE_COUNT
from ..random_source.abstract.IRandomSource import IRandomSource


class Encoders:
    """Text renderings of fresh random bytes."""

    def __init__(self, source: IRandomSource) -> None:
        self._source = source

    def hex(self, n: Optional[int] = None) -> str:
        """Get a random lowercase hex string.

        Args:
            n (int): Number of random bytes, 16 when omitted. The result is 2n characters.

        Returns:
            str: Lowercase hex digits
        """
        return self._random_bytes(n).hex()

    def base64(self, n: Optional[int] = None) -> str:
        """Get a random base64 string on a single line, padding kept.

        Args:
            n (int): Number of random bytes, 16 when omitted

        Returns:
            str: Standard base64 text of length ceil(n / 3) * 4
        """
        return b64encode(self._random_bytes(n)).decode("ascii")

    def _random_bytes(self, n: Optional[int]) -> bytes:
        return self._source.random_bytes(DEFAULT_BYTE_COUNT if n is None else n)
