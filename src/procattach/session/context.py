"""
Explicit session context shared by the session components.

All session state lives here and changes only through the methods below.
Responses are applied through request tokens: a response whose token is no
longer the newest for its slot, or that belongs to an earlier address epoch,
is rejected instead of overwriting newer state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from ..data_models import OpenedProcess, ProcessDescriptor, ServerInfo
from ..session_state import SessionState

logger = logging.getLogger(__name__)

StateListener = Callable[[SessionState, SessionState], None]


class RequestSlot(Enum):
    """Independent request streams; a newer request only supersedes its own slot."""

    CONNECT = "connect"
    REFRESH = "refresh"
    OPEN = "open"


@dataclass(frozen=True)
class RequestToken:
    slot: RequestSlot
    sequence: int
    epoch: int


class SessionContext:
    """Single owner of address, server info, catalog, selection and opened process."""

    def __init__(self) -> None:
        self._address: Optional[str] = None
        self._server_info: Optional[ServerInfo] = None
        self._catalog: Optional[Tuple[ProcessDescriptor, ...]] = None
        self._selected: Optional[ProcessDescriptor] = None
        self._opened: Optional[OpenedProcess] = None
        self._epoch = 0
        self._sequences: Dict[RequestSlot, int] = {slot: 0 for slot in RequestSlot}
        self._listeners: List[StateListener] = []

    # Read access

    @property
    def address(self) -> Optional[str]:
        return self._address

    @property
    def server_info(self) -> Optional[ServerInfo]:
        return self._server_info

    @property
    def catalog(self) -> Optional[Tuple[ProcessDescriptor, ...]]:
        return self._catalog

    @property
    def selected(self) -> Optional[ProcessDescriptor]:
        return self._selected

    @property
    def opened(self) -> Optional[OpenedProcess]:
        return self._opened

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def is_connected(self) -> bool:
        return self._server_info is not None

    @property
    def state(self) -> SessionState:
        if self._server_info is None:
            return SessionState.DISCONNECTED
        if self._opened is not None:
            return SessionState.PROCESS_OPENED
        if self._catalog is not None:
            return SessionState.CATALOG_LOADED
        return SessionState.CONNECTED

    # Request tokens

    def begin_request(self, slot: RequestSlot) -> RequestToken:
        """Issue a token that supersedes every earlier token of the same slot."""
        self._sequences[slot] += 1
        return RequestToken(slot=slot, sequence=self._sequences[slot], epoch=self._epoch)

    def is_current(self, token: RequestToken) -> bool:
        if self._sequences[token.slot] != token.sequence:
            return False
        if token.slot is RequestSlot.CONNECT:
            return True
        return token.epoch == self._epoch

    # Listeners

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, old_state: SessionState, *, restart: bool = False) -> None:
        """Report a state change; an unchanged state is reported only for a fresh connect."""
        new_state = self.state
        if new_state is old_state and not restart:
            return
        for listener in list(self._listeners):
            try:
                listener(old_state, new_state)
            except Exception:  # policy_guard: allow-silent-handler
                logger.exception("Session state listener %r failed", listener)

    # Mutations

    def install_connection(self, address: str, server_info: ServerInfo) -> None:
        """Start a new partition for *address*; all downstream state is dropped."""
        old_state = self.state
        self._epoch += 1
        self._address = address
        self._server_info = server_info
        self._catalog = None
        self._selected = None
        self._opened = None
        self._notify(old_state, restart=True)

    def reset(self) -> None:
        """Return to Disconnected, dropping everything tied to the previous address."""
        old_state = self.state
        self._epoch += 1
        self._address = None
        self._server_info = None
        self._catalog = None
        self._selected = None
        self._opened = None
        self._notify(old_state)

    def install_catalog(self, catalog: Tuple[ProcessDescriptor, ...]) -> None:
        """Swap in a new catalog snapshot in one assignment and clear the selection."""
        old_state = self.state
        self._catalog = catalog
        self._selected = None
        self._notify(old_state)

    def select(self, descriptor: Optional[ProcessDescriptor]) -> None:
        """Replace the selection; the opened process is never touched here."""
        self._selected = descriptor

    def install_opened(self, opened: OpenedProcess) -> None:
        old_state = self.state
        self._opened = opened
        self._notify(old_state)


__all__ = ["RequestSlot", "RequestToken", "SessionContext", "StateListener"]
