from typing import List, Optional

import pytest

from secrand.errors import RandomSourceUnavailable
from secrand.random_source import IRandomSource, reset_backend_states, reset_provider


class StubSource(IRandomSource):
    """Random source replaying scripted chunks, then an optional fill byte."""

    def __init__(
        self,
        chunks: Optional[List[bytes]] = None,
        fill: Optional[int] = None,
        available: bool = True,
        name: str = "stub",
    ) -> None:
        self._chunks = list(chunks or [])
        self._fill = fill
        self._available = available
        self._name = name
        self.calls: List[int] = []

    def name(self) -> str:
        return self._name

    def is_available(self) -> bool:
        return self._available

    def random_bytes(self, n: int) -> bytes:
        self.calls.append(n)
        if not self._available:
            raise RandomSourceUnavailable(f"{self._name} is not available")
        if self._chunks:
            chunk = self._chunks.pop(0)
            assert len(chunk) == n, f"scripted chunk {chunk!r} does not have {n} bytes"
            return chunk
        if self._fill is not None:
            return bytes([self._fill]) * n
        raise AssertionError("stub source ran out of scripted bytes")


@pytest.fixture
def make_source():
    """Factory fixture building StubSource instances."""
    return StubSource


@pytest.fixture(autouse=True)
def fresh_provider():
    """Make every test start and end without a cached provider or device state."""
    reset_provider()
    reset_backend_states()
    yield
    reset_provider()
    reset_backend_states()
