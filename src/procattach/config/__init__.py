"""Shared configuration helpers."""

from .errors import ConfigurationError
from .shared import DEFAULT_SERVER_ADDRESS, default_server_address
from .runtime import (
    env_bool,
    env_float,
    env_seconds,
    env_str,
    reset_default_values,
)

__all__ = [
    "ConfigurationError",
    "DEFAULT_SERVER_ADDRESS",
    "default_server_address",
    "env_bool",
    "env_float",
    "env_seconds",
    "env_str",
    "reset_default_values",
]
