from abc import ABC, abstractmethod


class IRandomSource(ABC):
    """Abstract base class defining the interface for a secure randomness source."""

    @abstractmethod
    def name(self) -> str:
        """Get a short name identifying the source.

        Returns:
            str: Source name, e.g. "openssl" or "device"
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the source can currently be used.

        Returns:
            bool: False once the source is known to be unusable
        """

    @abstractmethod
    def random_bytes(self, n: int) -> bytes:
        """Get exactly n cryptographically secure random bytes.

        Args:
            n (int): Number of bytes to return

        Returns:
            bytes: n random bytes

        Raises:
            RandomSourceUnavailable: If the source cannot be used
            ShortRead: If the source returned fewer than n bytes
        """
