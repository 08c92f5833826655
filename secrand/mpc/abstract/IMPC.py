from abc import ABC, abstractmethod
from ..types import MPZ, T


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision integer operations."""

    @staticmethod
    @abstractmethod
    def to_hex(value: T) -> str:
        """Render a non-negative integer as lowercase hex, padded to whole bytes.

        Args:
            value (int): Non-negative integer

        Returns:
            str: Even-length lowercase hex digits, most significant first
        """

    @staticmethod
    @abstractmethod
    def from_hex(digits: str) -> MPZ:
        """Parse hex digits into an integer.

        Args:
            digits (str): Hex digits, most significant first

        Returns:
            MPZ: Parsed value
        """

    @staticmethod
    @abstractmethod
    def to_bytes(value: T) -> bytes:
        """Encode a non-negative integer big-endian in the fewest whole bytes.

        Args:
            value (int): Non-negative integer

        Returns:
            bytes: Minimal big-endian encoding
        """

    @staticmethod
    @abstractmethod
    def from_bytes(data: bytes) -> MPZ:
        """Decode a big-endian byte string into an integer.

        Args:
            data (bytes): Big-endian encoding, at least one byte

        Returns:
            MPZ: Decoded value
        """
