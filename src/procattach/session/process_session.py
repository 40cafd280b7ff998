"""Process session facade wiring the connection, catalog and controller together."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..data_models import OpenedProcess, ProcessDescriptor, ServerInfo
from ..server_client import ServerClient, ServerClientConfig
from ..session_state import SessionState
from .connection_manager import ConnectionManager
from .context import SessionContext, StateListener
from .process_catalog import FilterView, ProcessCatalog
from .session_controller import SessionController

logger = logging.getLogger(__name__)


class ProcessSession:
    """One operator session: connect, browse processes, open one.

    The three components share a single SessionContext, which is the only
    place session state is stored.
    """

    def __init__(self, client: Optional[ServerClient] = None, config: Optional[ServerClientConfig] = None):
        self.client = client if client is not None else ServerClient(config)
        self.context = SessionContext()
        self.connection = ConnectionManager(self.context, self.client)
        self.catalog = ProcessCatalog(self.context, self.client)
        self.controller = SessionController(self.context, self.client, self.catalog)

    async def __aenter__(self) -> "ProcessSession":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the HTTP session; session state is left as it is."""
        await self.client.close()

    @property
    def state(self) -> SessionState:
        return self.context.state

    @property
    def server_info(self) -> Optional[ServerInfo]:
        return self.context.server_info

    @property
    def selected(self) -> Optional[ProcessDescriptor]:
        return self.context.selected

    @property
    def opened(self) -> Optional[OpenedProcess]:
        return self.context.opened

    def add_listener(self, listener: StateListener) -> None:
        """Call *listener(old_state, new_state)* after every workflow transition."""
        self.context.add_listener(listener)

    def remove_listener(self, listener: StateListener) -> None:
        self.context.remove_listener(listener)

    async def setup(self, address: str) -> ServerInfo:
        """Connect, then load the catalog.

        A catalog failure propagates as CatalogError while the session stays
        Connected, so the operator can refresh again without reconnecting.
        """
        info = await self.connection.connect(address)
        await self.catalog.refresh()
        return info

    async def connect(self, address: str) -> ServerInfo:
        return await self.connection.connect(address)

    async def refresh(self, address: Optional[str] = None) -> Tuple[ProcessDescriptor, ...]:
        return await self.catalog.refresh(address)

    def filter(self, text: str = "") -> FilterView:
        return self.catalog.filter(text)

    def select_process(self, descriptor: ProcessDescriptor) -> None:
        self.controller.select_process(descriptor)

    def select_pid(self, pid: int) -> ProcessDescriptor:
        return self.controller.select_pid(pid)

    async def open_selected(self) -> OpenedProcess:
        return await self.controller.open_selected()


__all__ = ["ProcessSession"]
