"""Resolved secrand configuration."""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from ..protocol_constants import DEFAULT_DEVICE_PATH
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class BackendPreference(Enum):
    """Which randomness backends the provider may use."""
    AUTO = "auto"
    LIBRARY = "library"
    DEVICE = "device"


@dataclass(frozen=True)
class Settings:
    """Configuration snapshot, resolved once when a provider is built."""

    backend: BackendPreference = BackendPreference.AUTO
    device_path: str = DEFAULT_DEVICE_PATH
    max_rejections: int = 10_000

    @classmethod
    def from_environment(cls) -> Self:
        """Build settings from the SECRAND_* environment variables.

        Raises:
            ValueError: If SECRAND_BACKEND names an unknown backend or
                SECRAND_MAX_REJECTIONS is not positive.
        """
        max_rejections = EnvironmentManager.get_int(EnvironmentVariables.MAX_REJECTIONS)
        if max_rejections <= 0:
            raise ValueError(
                f"SECRAND_MAX_REJECTIONS must be positive, got {max_rejections}"
            )

        return cls(
            backend=EnvironmentManager.get_choice(EnvironmentVariables.BACKEND, BackendPreference),
            device_path=EnvironmentManager.get_string(EnvironmentVariables.DEVICE_PATH),
            max_rejections=max_rejections,
        )
