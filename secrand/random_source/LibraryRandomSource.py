try:
    import ssl
except ImportError:  # interpreter built without OpenSSL
    ssl = None

from ..errors import RandomSourceUnavailable
from .abstract.IRandomSource import IRandomSource


class LibraryRandomSource(IRandomSource):
    """OpenSSL's CSPRNG, reached through the interpreter's ssl module."""

    def name(self) -> str:
        return "openssl"

    def is_available(self) -> bool:
        return ssl is not None and hasattr(ssl, "RAND_bytes")

    def random_bytes(self, n: int) -> bytes:
        if not self.is_available():
            raise RandomSourceUnavailable("OpenSSL random generator is not available")
        return ssl.RAND_bytes(n)
