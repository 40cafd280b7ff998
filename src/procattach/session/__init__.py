"""Client-side session workflow: connect, browse the process catalog, open a process."""

from .connection_manager import ConnectionManager
from .context import RequestSlot, RequestToken, SessionContext
from .process_catalog import FilterView, ProcessCatalog, sort_catalog
from .process_session import ProcessSession
from .session_controller import SessionController

__all__ = [
    "ConnectionManager",
    "FilterView",
    "ProcessCatalog",
    "ProcessSession",
    "RequestSlot",
    "RequestToken",
    "SessionContext",
    "SessionController",
    "sort_catalog",
]
