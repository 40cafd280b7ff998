"""Helper modules for runtime configuration."""

from .dotenv_loader import DotenvLoader
from .json_config_loader import JsonConfigLoader

__all__ = [
    "DotenvLoader",
    "JsonConfigLoader",
]
