"""Process-wide availability state of the entropy device backend."""

import os
import threading
from enum import Enum
from typing import Dict


class BackendState(Enum):
    """Whether the entropy device has been found usable."""
    UNKNOWN = "unknown"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class BackendStateCell:
    """Initialize-once holder for a BackendState.

    The state leaves UNKNOWN exactly once. Concurrent first users may each probe
    the device, but only the first resolution is kept and every caller sees it.
    """

    def __init__(self) -> None:
        self._state = BackendState.UNKNOWN
        self._lock = threading.Lock()

    def get(self) -> BackendState:
        return self._state

    def resolve(self, state: BackendState) -> BackendState:
        """Set the state if it is still UNKNOWN.

        Args:
            state (BackendState): AVAILABLE or UNAVAILABLE

        Returns:
            BackendState: The state that is now in effect
        """
        if state is BackendState.UNKNOWN:
            raise ValueError("Cannot resolve a backend state back to UNKNOWN")
        with self._lock:
            if self._state is BackendState.UNKNOWN:
                self._state = state
            return self._state


# One cell per device path, shared by every source in the process
_cells: Dict[str, BackendStateCell] = {}
_cells_lock = threading.Lock()


def state_for_path(path: str) -> BackendStateCell:
    """
    Return the process-wide state cell for a device path, creating it on first use.

    :param path: Device path; relative paths are resolved against the working directory.
    :return: The BackendStateCell shared by all sources reading that path.
    """
    key = os.path.abspath(path)
    with _cells_lock:
        cell = _cells.get(key)
        if cell is None:
            cell = _cells[key] = BackendStateCell()
        return cell


def reset_backend_states() -> None:
    """Forget every cached device state so the next use probes again."""
    with _cells_lock:
        _cells.clear()
