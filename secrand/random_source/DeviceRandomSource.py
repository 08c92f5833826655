import logging
import os
import stat
from typing import BinaryIO

from ..errors import RandomSourceUnavailable, ShortRead
from ..protocol_constants import DEFAULT_DEVICE_PATH
from .BackendState import BackendState, state_for_path
from .abstract.IRandomSource import IRandomSource

logger = logging.getLogger(__name__)

# Read-only, never block, never become a controlling tty, never follow a symlink
_OPEN_FLAGS = (
    os.O_RDONLY
    | getattr(os, "O_NONBLOCK", 0)
    | getattr(os, "O_NOCTTY", 0)
    | getattr(os, "O_NOFOLLOW", 0)
)


class DeviceRandomSource(IRandomSource):
    """Entropy read straight from an operating system character device."""

    def __init__(self, path: str = DEFAULT_DEVICE_PATH) -> None:
        """Initialize the source. The device is not touched until first use.

        Args:
            path (str): Path of the entropy character device
        """
        self._path = path
        self._state = state_for_path(path)

    def name(self) -> str:
        return "device"

    def is_available(self) -> bool:
        return self._state.get() is not BackendState.UNAVAILABLE

    def get_state(self) -> BackendState:
        return self._state.get()

    def random_bytes(self, n: int) -> bytes:
        if self._state.get() is BackendState.UNAVAILABLE:
            raise RandomSourceUnavailable(f"No random device at {self._path}")

        try:
            device = self._open()
        except (FileNotFoundError, IsADirectoryError) as e:
            self._mark_unusable(e.strerror or "cannot be opened")
            raise RandomSourceUnavailable(f"No random device at {self._path}") from None
        except OSError as e:
            # Symlinks, permissions: unusable for good, error passed through as is
            self._mark_unusable(e.strerror or "cannot be opened")
            raise

        with device:
            if not self._is_character_device(device):
                self._mark_unusable("is not a character device")
                raise RandomSourceUnavailable(f"No random device at {self._path}")
            if self._state.get() is BackendState.UNKNOWN:
                logger.debug("Random device %s is a character device", self._path)
            self._state.resolve(BackendState.AVAILABLE)
            data = device.read(n) or b""

        if len(data) != n:
            raise ShortRead(n, len(data))
        return data

    # Private Methods
    # ------------------------------------------------------------------------------

    def _open(self) -> BinaryIO:
        """Open the device unbuffered so each read is a single system call."""
        return open(
            self._path, "rb", buffering=0, opener=lambda path, _: os.open(path, _OPEN_FLAGS)
        )

    @staticmethod
    def _is_character_device(device: BinaryIO) -> bool:
        return stat.S_ISCHR(os.fstat(device.fileno()).st_mode)

    def _mark_unusable(self, reason: str) -> None:
        state = self._state.resolve(BackendState.UNAVAILABLE)
        logger.warning("Random device %s unusable: %s (backend state: %s)", self._path, reason, state.value)
