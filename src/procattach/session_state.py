"""
Canonical session state definitions.

Kept apart from the session package so data models and listeners can import
the enum without pulling in the HTTP client.
"""

from enum import Enum


class SessionState(Enum):
    """
    Workflow states of one client session.

    States progress from disconnected through an opened process. A fresh
    connect always restarts the progression, whatever the current state.
    """

    DISCONNECTED = "disconnected"
    CONNECTED = "connected"
    CATALOG_LOADED = "catalog_loaded"
    PROCESS_OPENED = "process_opened"
