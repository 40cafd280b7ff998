"""Async client for the instrumentation server's HTTP API."""

from .client import OPEN_PROCESS_PATH, ServerClient, ServerClientConfig
from .response_parser import ENUM_PROCESS_PATH, SERVER_INFO_PATH

__all__ = [
    "ENUM_PROCESS_PATH",
    "OPEN_PROCESS_PATH",
    "SERVER_INFO_PATH",
    "ServerClient",
    "ServerClientConfig",
]
