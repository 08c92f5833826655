import logging
import operator
import threading
from typing import Optional

from ..errors import RandomSourceUnavailable
from ..protocol_constants import DEFAULT_BYTE_COUNT
from ..utils.Settings import BackendPreference, Settings
from .DeviceRandomSource import DeviceRandomSource
from .LibraryRandomSource import LibraryRandomSource
from .abstract.IRandomSource import IRandomSource

logger = logging.getLogger(__name__)


class RandomSourceProvider(IRandomSource):
    """Picks the secure randomness backend once and serves raw bytes from it.

    Priority is fixed: the library backend when present, then the entropy
    device. Nothing falls back to a weaker source.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        library: Optional[IRandomSource] = None,
        device: Optional[IRandomSource] = None,
    ) -> None:
        """Initialize the provider and resolve which backend it will use.

        Args:
            settings (Settings): Configuration, defaults to built-in settings
            library (IRandomSource): Library backend, defaults to OpenSSL
            device (IRandomSource): Device backend, defaults to the configured device path
        """
        self._settings = settings if settings is not None else Settings()
        self._library = library if library is not None else LibraryRandomSource()
        self._device = (
            device if device is not None else DeviceRandomSource(self._settings.device_path)
        )
        self._source = self._select_source()
        logger.debug(
            "Selected random backend %s (preference: %s)",
            self._source.name() if self._source else None,
            self._settings.backend.value,
        )

    def name(self) -> str:
        return self._source.name() if self._source is not None else "none"

    def is_available(self) -> bool:
        return self._source is not None and self._source.is_available()

    def get_settings(self) -> Settings:
        return self._settings

    def get_source(self) -> Optional[IRandomSource]:
        return self._source

    def random_bytes(self, n: Optional[int] = None) -> bytes:
        """Get n random bytes from the selected backend.

        Args:
            n (int): Number of bytes, 16 when omitted

        Returns:
            bytes: Exactly n random bytes
        """
        n = DEFAULT_BYTE_COUNT if n is None else operator.index(n)
        if n < 0:
            raise ValueError(f"Byte count must be non-negative, got {n}")
        if self._source is None:
            raise RandomSourceUnavailable("No secure random number generator is available")
        return self._source.random_bytes(n)

    # Private Methods
    # ------------------------------------------------------------------------------

    def _select_source(self) -> Optional[IRandomSource]:
        preference = self._settings.backend
        if preference is not BackendPreference.DEVICE and self._library.is_available():
            return self._library
        if preference is BackendPreference.LIBRARY:
            logger.warning("Library random backend requested but not available")
            return None
        return self._device


# Global variable to hold the singleton provider
_provider = None
_provider_lock = threading.Lock()


def get_provider() -> RandomSourceProvider:
    """
    Return the process-wide provider, building it from the environment on first use.

    :return: Shared RandomSourceProvider instance.
    """
    global _provider
    if _provider is None:
        with _provider_lock:
            if _provider is None:
                _provider = RandomSourceProvider(Settings.from_environment())
    return _provider


def reset_provider(provider: Optional[RandomSourceProvider] = None) -> None:
    """
    Replace the process-wide provider.

    :param provider: Provider to install, or None to rebuild from the environment on next use.
    """
    global _provider
    with _provider_lock:
        _provider = provider
