"""Typed access to the SECRAND_* environment variables."""

import os
from enum import Enum
from typing import Any, Optional, Type, TypeVar, cast

from dotenv import load_dotenv

from ..protocol_constants import DEFAULT_DEVICE_PATH

# A .env file next to the working directory may carry the settings
load_dotenv()

E = TypeVar("E", bound=Enum)


class EnvVarType(Enum):
    """Types of environment variables."""
    INT = "int"
    STRING = "str"


class EnvironmentVariables(Enum):
    """
    Environment variables read by secrand.

    Each enum value is a tuple of (env_var_name, default_value, type).
    """
    BACKEND = ("SECRAND_BACKEND", "auto", EnvVarType.STRING)
    DEVICE_PATH = ("SECRAND_DEVICE_PATH", DEFAULT_DEVICE_PATH, EnvVarType.STRING)
    MAX_REJECTIONS = ("SECRAND_MAX_REJECTIONS", 10_000, EnvVarType.INT)
    LOG_LEVEL = ("SECRAND_LOG_LEVEL", "WARNING", EnvVarType.STRING)

    def __init__(self, env_name: str, default_value: Any, var_type: EnvVarType):
        self.env_name = env_name
        self.default_value = default_value
        self.var_type = var_type


class EnvironmentManager:
    """Static helpers turning environment variables into typed settings."""

    @staticmethod
    def get_value(env_var: EnvironmentVariables, override_default: Any = None) -> Any:
        """
        Read a variable, converted according to its declared type.

        Unset or blank variables give the default, and so do integers that fail
        to parse.

        Args:
            env_var: The variable to read
            override_default: Replaces the default declared on the enum member

        Returns:
            The converted value or the default
        """
        default = override_default if override_default is not None else env_var.default_value

        raw = os.environ.get(env_var.env_name, "").strip()
        if not raw:
            return default

        if env_var.var_type == EnvVarType.INT:
            try:
                return int(raw)
            except ValueError:
                return default
        return raw

    @staticmethod
    def get_int(env_var: EnvironmentVariables, default: Optional[int] = None) -> int:
        return cast(int, EnvironmentManager.get_value(env_var, default))

    @staticmethod
    def get_string(env_var: EnvironmentVariables, default: Optional[str] = None) -> str:
        return cast(str, EnvironmentManager.get_value(env_var, default))

    @staticmethod
    def get_choice(env_var: EnvironmentVariables, choices: Type[E]) -> E:
        """
        Read a variable naming one member of an enum, by value, case-insensitively.

        Args:
            env_var: The variable to read
            choices: Enum whose string values are the accepted spellings

        Returns:
            The matching enum member

        Raises:
            ValueError: If the value names no member of the enum
        """
        name = EnvironmentManager.get_string(env_var).lower()
        try:
            return choices(name)
        except ValueError:
            accepted = ", ".join(str(member.value) for member in choices)
            raise ValueError(
                f"Unknown {env_var.env_name} {name!r}, expected one of: {accepted}"
            ) from None
