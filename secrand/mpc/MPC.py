import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ, T


class MPC(IMPC):
    """Implementation of multi-precision integer operations."""

    @staticmethod
    def to_hex(value: T) -> str:
        if value < 0:
            raise ValueError(f"Cannot encode negative value {value}")
        digits = gmpy2.digits(gmpy2.mpz(value), 16).lower()
        if len(digits) & 1:
            digits = "0" + digits
        return digits

    @staticmethod
    def from_hex(digits: str) -> MPZ:
        return gmpy2.mpz(digits, 16)

    @staticmethod
    def to_bytes(value: T) -> bytes:
        return bytes.fromhex(MPC.to_hex(value))

    @staticmethod
    def from_bytes(data: bytes) -> MPZ:
        if not data:
            raise ValueError("Cannot decode an empty byte string")
        return MPC.from_hex(data.hex())
