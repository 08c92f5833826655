"""
Secure randomness errors.

Callers can catch the base `SecRandError` to handle every failure raised by the
generators, or the concrete subclasses for finer control. None of these are
retryable by silently switching to a weaker source.
"""


class SecRandError(Exception):
    """Base class for all secrand errors."""
    pass


class RandomSourceUnavailable(SecRandError):
    """No usable secure randomness source exists (no library backend, no device)."""

    def __init__(self, message: str = "No random device") -> None:
        super().__init__(message)


class ShortRead(SecRandError):
    """
    The entropy device returned fewer bytes than requested.

    Attributes:
        requested: Number of bytes asked for.
        received: Number of bytes the device actually returned.
    """

    def __init__(self, requested: int, received: int) -> None:
        self.requested = requested
        self.received = received
        super().__init__(
            f"Unexpected partial read from random device: "
            f"requested {requested} bytes, got {received}"
        )


class SamplingExhausted(SecRandError):
    """Rejection sampling hit its safety cap; the randomness source is suspect."""

    def __init__(self, bound: int, attempts: int) -> None:
        self.bound = bound
        self.attempts = attempts
        super().__init__(
            f"Rejection sampling below {bound} gave up after {attempts} draws"
        )
