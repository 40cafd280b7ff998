"""Process catalog: fetch, sort and filter the server's process list."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from ..data_models import ProcessDescriptor
from ..exceptions import CatalogError, MalformedResponseError, ServerRequestError, SupersededRequestError
from ..server_client import ServerClient
from .context import RequestSlot, SessionContext

logger = logging.getLogger(__name__)


def _matches(descriptor: ProcessDescriptor, needle: str) -> bool:
    return needle in descriptor.process_name.casefold()


class FilterView:
    """
    Read-only view over a catalog snapshot.

    Matching is a case-insensitive substring test on the process name and is
    evaluated lazily on each iteration, so the view can be iterated any number
    of times. Empty text matches everything.
    """

    def __init__(self, source: Sequence[ProcessDescriptor], text: str = "") -> None:
        self._source = tuple(source)
        self._text = text
        self._needle = text.casefold()

    @property
    def text(self) -> str:
        return self._text

    def __iter__(self) -> Iterator[ProcessDescriptor]:
        if not self._needle:
            return iter(self._source)
        return (descriptor for descriptor in self._source if _matches(descriptor, self._needle))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilterView):
            return tuple(self) == tuple(other)
        if isinstance(other, (tuple, list)):
            return tuple(self) == tuple(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"FilterView(text={self._text!r}, matches={len(self)})"

    def filter(self, text: str) -> "FilterView":
        """Narrow this view further."""
        return FilterView(tuple(self), text)


def sort_catalog(processes: Iterable[ProcessDescriptor]) -> Tuple[ProcessDescriptor, ...]:
    """Stable ascending sort by pid, rejecting duplicate pids."""
    ordered = tuple(sorted(processes, key=lambda descriptor: descriptor.pid))
    for previous, current in zip(ordered, ordered[1:]):
        if previous.pid == current.pid:
            raise CatalogError.malformed(f"duplicate pid {current.pid}")
    return ordered


class ProcessCatalog:
    """Cached, pid-sorted process list for the connected server."""

    def __init__(self, context: SessionContext, client: ServerClient):
        self._context = context
        self._client = client

    @property
    def snapshot(self) -> Optional[Tuple[ProcessDescriptor, ...]]:
        """Current catalog, or None before the first successful refresh."""
        return self._context.catalog

    async def refresh(self, address: Optional[str] = None) -> Tuple[ProcessDescriptor, ...]:
        """
        Fetch the process list and replace the catalog wholesale.

        Args:
            address: optional guard; must match the connected address when given

        Returns:
            The new catalog, sorted ascending by pid

        Raises:
            CatalogError: NOT_CONNECTED, MALFORMED or NETWORK
            SupersededRequestError: a newer refresh or a reconnect happened while waiting
        """
        current_address = self._context.address
        if not self._context.is_connected or current_address is None:
            raise CatalogError.not_connected(address)
        if address is not None and address.strip() != current_address:
            raise CatalogError.not_connected(address)

        token = self._context.begin_request(RequestSlot.REFRESH)
        try:
            processes = await self._client.enum_processes(current_address)
        except ServerRequestError as exc:
            raise CatalogError.network(str(exc), status=exc.status) from exc
        except MalformedResponseError as exc:
            raise CatalogError.malformed(str(exc)) from exc

        if not self._context.is_current(token):
            logger.debug("Discarding stale process list from %s", current_address)
            raise SupersededRequestError("refresh", address=current_address)

        catalog = sort_catalog(processes)
        self._context.install_catalog(catalog)
        logger.info("Loaded %d processes from %s", len(catalog), current_address)
        return catalog

    def filter(self, text: str = "") -> FilterView:
        """Filtered view of the current catalog; empty before the first refresh."""
        return FilterView(self._context.catalog or (), text or "")

    def find(self, pid: int) -> Optional[ProcessDescriptor]:
        for descriptor in self._context.catalog or ():
            if descriptor.pid == pid:
                return descriptor
        return None


__all__ = ["FilterView", "ProcessCatalog", "sort_catalog"]
