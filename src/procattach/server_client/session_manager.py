"""HTTP session management for the server client."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Optional

import aiohttp

from ..http_utils import is_aiohttp_session_open

if TYPE_CHECKING:
    from .client import ServerClientConfig


class SessionManager:
    """Manages the aiohttp session lifecycle shared by all server requests."""

    def __init__(self, config: ServerClientConfig) -> None:
        self._config = config
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Ensure the HTTP session is ready."""
        async with self._session_lock:
            if is_aiohttp_session_open(self._session):
                return

            timeout = aiohttp.ClientTimeout(
                total=self._config.request_timeout_seconds,
                connect=self._config.connect_timeout_seconds,
                sock_read=self._config.sock_read_timeout_seconds,
            )
            self._session = aiohttp.ClientSession(timeout=timeout)

    async def close(self) -> None:
        """Close the HTTP session if one exists."""
        async with self._session_lock:
            if self._session is not None:
                await self._session.close()
                self._session = None

    def get_session(self) -> aiohttp.ClientSession:
        """Get the current session, raising if not initialized."""
        if self._session is None:
            raise RuntimeError("HTTP session not initialized")
        return self._session

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        """Access the current session without raising if absent."""
        return self._session
