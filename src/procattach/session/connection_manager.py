"""Connection manager: identity probe and the Disconnected to Connected transition."""

import logging

from ..data_models import ServerInfo
from ..exceptions import MalformedResponseError, ServerConnectionError, ServerRequestError, SupersededRequestError
from ..http_utils import validate_address
from ..server_client import ServerClient
from .context import RequestSlot, SessionContext

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Owns the target address and probes the server before trusting it."""

    def __init__(self, context: SessionContext, client: ServerClient):
        self._context = context
        self._client = client

    @property
    def address(self):
        return self._context.address

    @property
    def server_info(self):
        return self._context.server_info

    @property
    def is_connected(self) -> bool:
        return self._context.is_connected

    async def connect(self, address: str) -> ServerInfo:
        """
        Probe the server at *address* and start a fresh session partition.

        A successful probe drops server info, catalog, selection and opened
        process from any earlier connect, even to the same address. A failed
        probe leaves the session Disconnected. No retry is attempted.

        An address that fails validation is rejected before any request is
        issued and leaves the current session, connected or not, untouched.

        Raises:
            ServerConnectionError: probe failed or returned a malformed body
            SupersededRequestError: a newer connect was issued while this one was in flight
        """
        host = validate_address(address)
        token = self._context.begin_request(RequestSlot.CONNECT)
        logger.info("Connecting to server at %s", host)

        try:
            info = await self._client.get_server_info(host)
        except ServerRequestError as exc:
            self._revert_if_current(token, host, exc)
            raise ServerConnectionError(f"Identity probe to {host!r} failed: {exc}", address=host, status=exc.status) from exc
        except MalformedResponseError as exc:
            self._revert_if_current(token, host, exc)
            raise ServerConnectionError(f"Identity probe to {host!r} returned malformed data: {exc}", address=host) from exc

        if not self._context.is_current(token):
            logger.debug("Discarding stale identity probe response from %s", host)
            raise SupersededRequestError("connect", address=host)

        self._context.install_connection(host, info)
        logger.info("Connected to %s: %s", host, info.describe())
        return info

    def _revert_if_current(self, token, host: str, exc: Exception) -> None:
        if not self._context.is_current(token):
            logger.debug("Ignoring stale probe failure for %s: %s", host, exc)
            return
        logger.warning("Connection to %s failed: %s", host, exc)
        self._context.reset()
