"""Session controller: operator selection and server-confirmed open."""

import logging
from typing import Optional

from ..data_models import OpenedProcess, ProcessDescriptor
from ..exceptions import CatalogError, OpenError, ServerRequestError, SupersededRequestError
from ..server_client import ServerClient
from .context import RequestSlot, SessionContext
from .process_catalog import ProcessCatalog

logger = logging.getLogger(__name__)


class SessionController:
    """Tracks the selected process and the process the server has opened."""

    def __init__(self, context: SessionContext, client: ServerClient, catalog: ProcessCatalog):
        self._context = context
        self._client = client
        self._catalog = catalog

    @property
    def selected(self) -> Optional[ProcessDescriptor]:
        return self._context.selected

    @property
    def opened(self) -> Optional[OpenedProcess]:
        return self._context.opened

    def select_process(self, descriptor: ProcessDescriptor) -> None:
        """Local selection only; no request is sent and the opened process is kept."""
        self._context.select(descriptor)

    def select_pid(self, pid: int) -> ProcessDescriptor:
        """Select the catalog entry with *pid*."""
        descriptor = self._catalog.find(pid)
        if descriptor is None:
            raise CatalogError.not_found(pid)
        self.select_process(descriptor)
        return descriptor

    def clear_selection(self) -> None:
        self._context.select(None)

    async def open_selected(self) -> OpenedProcess:
        """
        Ask the server to open the selected process.

        The selection is captured before the request goes out; that captured
        descriptor is what gets recorded on success, even if the operator picks
        something else meanwhile. On failure the selection and any earlier
        opened process stay as they were, so the call can simply be repeated.

        Raises:
            OpenError: NO_SELECTION, NETWORK or REJECTED
            SupersededRequestError: a newer open or a reconnect happened while waiting
        """
        snapshot = self._context.selected
        if snapshot is None:
            raise OpenError.no_selection()

        address = self._context.address
        if not self._context.is_connected or address is None:
            raise OpenError.network(snapshot.pid, "session is not connected")

        token = self._context.begin_request(RequestSlot.OPEN)
        logger.info("Opening process %s on %s", snapshot, address)
        try:
            await self._client.open_process(address, snapshot.pid)
        except ServerRequestError as exc:
            if exc.is_rejection:
                raise OpenError.rejected(snapshot.pid, exc.status) from exc
            raise OpenError.network(snapshot.pid, str(exc)) from exc

        if not self._context.is_current(token):
            logger.debug("Discarding stale open response for process %d", snapshot.pid)
            raise SupersededRequestError("open", pid=snapshot.pid)

        opened = OpenedProcess.confirm(snapshot, address)
        self._context.install_opened(opened)
        logger.info("Process %s opened on %s", snapshot, address)
        return opened


__all__ = ["SessionController"]
