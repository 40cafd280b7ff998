"""Async REST client for the process instrumentation server."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..config import ConfigurationError, env_seconds
from ..data_models import ProcessDescriptor, ServerInfo
from ..http_utils import build_base_url
from .request_executor import RequestExecutor
from .response_parser import ENUM_PROCESS_PATH, SERVER_INFO_PATH, parse_process_list, parse_server_info
from .session_manager import SessionManager

__all__ = ["OPEN_PROCESS_PATH", "ServerClient", "ServerClientConfig"]

DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0
DEFAULT_CONNECT_TIMEOUT_SECONDS = 5.0
DEFAULT_SOCK_READ_TIMEOUT_SECONDS = 10.0

OPEN_PROCESS_PATH = "/openprocess"


@dataclass(frozen=True)
class ServerClientConfig:
    """Timeouts applied to every request; all values in seconds."""

    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT_SECONDS
    sock_read_timeout_seconds: float = DEFAULT_SOCK_READ_TIMEOUT_SECONDS

    def __post_init__(self):
        for name in ("request_timeout_seconds", "connect_timeout_seconds", "sock_read_timeout_seconds"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError.invalid_value(name, value, "Timeouts must be positive")

    @classmethod
    def from_env(cls) -> "ServerClientConfig":
        """Build the config from PROCATTACH_* environment variables."""
        return cls(
            request_timeout_seconds=env_seconds("PROCATTACH_REQUEST_TIMEOUT_SECONDS", or_value=DEFAULT_REQUEST_TIMEOUT_SECONDS),
            connect_timeout_seconds=env_seconds("PROCATTACH_CONNECT_TIMEOUT_SECONDS", or_value=DEFAULT_CONNECT_TIMEOUT_SECONDS),
            sock_read_timeout_seconds=env_seconds("PROCATTACH_SOCK_READ_TIMEOUT_SECONDS", or_value=DEFAULT_SOCK_READ_TIMEOUT_SECONDS),
        )


class ServerClient:
    """Typed wrapper around the three server endpoints.

    The client is stateless apart from its HTTP session: every call takes the
    server address so the session layer owns which address is current.
    """

    def __init__(self, config: Optional[ServerClientConfig] = None) -> None:
        self._config = config if config else ServerClientConfig()
        self._session_manager = SessionManager(self._config)
        self._executor = RequestExecutor(self._session_manager)
        self._logger = logging.getLogger(__name__)

    @property
    def config(self) -> ServerClientConfig:
        return self._config

    async def __aenter__(self) -> "ServerClient":
        await self._session_manager.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._session_manager.close()

    async def get_server_info(self, address: str) -> ServerInfo:
        """GET /serverinfo and validate the identity payload."""
        url = build_base_url(address) + SERVER_INFO_PATH
        payload = await self._executor.execute_request("GET", url, path=SERVER_INFO_PATH)
        info = parse_server_info(payload)
        self._logger.debug("Server at %s: %s", address, info.describe())
        return info

    async def enum_processes(self, address: str) -> List[ProcessDescriptor]:
        """GET /enumprocess; entries are validated but not sorted."""
        url = build_base_url(address) + ENUM_PROCESS_PATH
        payload = await self._executor.execute_request("GET", url, path=ENUM_PROCESS_PATH)
        processes = parse_process_list(payload)
        self._logger.debug("Server at %s reported %d processes", address, len(processes))
        return processes

    async def open_process(self, address: str, pid: int) -> None:
        """POST /openprocess; any 2xx counts as success and the body is ignored."""
        url = build_base_url(address) + OPEN_PROCESS_PATH
        await self._executor.execute_request(
            "POST",
            url,
            path=OPEN_PROCESS_PATH,
            json_body={"pid": pid},
            expect_json=False,
        )
