"""Session workflow exceptions.

Each workflow step reports failures through its own error type so the
initiating action can tell a failed probe from a failed catalog refresh or
open request. Reasons are tagged with enums rather than subclasses.
"""

from enum import Enum
from typing import Any, Optional

from . import ApplicationError


class CatalogErrorReason(Enum):
    """Why a catalog operation failed"""

    NOT_CONNECTED = "not_connected"
    MALFORMED = "malformed"
    NETWORK = "network"
    NOT_FOUND = "not_found"


class OpenErrorReason(Enum):
    """Why an open request failed"""

    NO_SELECTION = "no_selection"
    NETWORK = "network"
    REJECTED = "rejected"


class ServerConnectionError(ApplicationError):
    """Identity probe failed; the session is not connected."""

    def __init__(self, message: str = "", *, address: str = "", status: Optional[int] = None, **kwargs: Any) -> None:
        if not message:
            message = f"Unable to connect to server at {address!r}"
        super().__init__(message, address=address, status=status, **kwargs)

    @classmethod
    def empty_address(cls) -> "ServerConnectionError":
        """Create error for a blank address."""
        return cls("Server address must be a non-empty string")

    @classmethod
    def invalid_address(cls, address: str, reason: str) -> "ServerConnectionError":
        """Create error for an address that cannot be turned into a server URL."""
        return cls(f"Invalid server address {address!r}: {reason}", address=address)


class CatalogError(ApplicationError):
    """Process catalog could not be refreshed or queried."""

    def __init__(self, reason: CatalogErrorReason, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = f"Process catalog error: {reason.value}"
        super().__init__(message, reason=reason, **kwargs)
        self.reason = reason

    @classmethod
    def not_connected(cls, address: Optional[str] = None) -> "CatalogError":
        """Create error for a refresh against a disconnected session."""
        if address:
            msg = f"Session is not connected to {address!r}"
        else:
            msg = "Session is not connected"
        return cls(CatalogErrorReason.NOT_CONNECTED, msg, address=address)

    @classmethod
    def malformed(cls, detail: str) -> "CatalogError":
        """Create error for a process list that violates the server contract."""
        return cls(CatalogErrorReason.MALFORMED, f"Malformed process list: {detail}")

    @classmethod
    def network(cls, detail: str, status: Optional[int] = None) -> "CatalogError":
        """Create error for a failed enumerate request."""
        return cls(CatalogErrorReason.NETWORK, f"Process list request failed: {detail}", status=status)

    @classmethod
    def not_found(cls, pid: int) -> "CatalogError":
        """Create error for a pid absent from the current catalog."""
        return cls(CatalogErrorReason.NOT_FOUND, f"Process {pid} is not in the current catalog", pid=pid)


class OpenError(ApplicationError):
    """Open request for the selected process failed."""

    def __init__(self, reason: OpenErrorReason, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = f"Open process error: {reason.value}"
        super().__init__(message, reason=reason, **kwargs)
        self.reason = reason

    @classmethod
    def no_selection(cls) -> "OpenError":
        """Create error for an open attempt with nothing selected."""
        return cls(OpenErrorReason.NO_SELECTION, "No process selected")

    @classmethod
    def network(cls, pid: int, detail: str) -> "OpenError":
        """Create error for a transport failure while opening."""
        return cls(OpenErrorReason.NETWORK, f"Open request for process {pid} failed: {detail}", pid=pid)

    @classmethod
    def rejected(cls, pid: int, status: int) -> "OpenError":
        """Create error for a non-success server answer."""
        return cls(OpenErrorReason.REJECTED, f"Server rejected open of process {pid} (HTTP {status})", pid=pid, status=status)


class SupersededRequestError(ApplicationError):
    """Response arrived after a newer request replaced it and was discarded."""

    def __init__(self, operation: str = "", message: str = "", **kwargs: Any) -> None:
        if not message:
            message = f"{operation or 'Request'} was superseded by a newer request"
        super().__init__(message, operation=operation, **kwargs)


__all__ = [
    "CatalogError",
    "CatalogErrorReason",
    "OpenError",
    "OpenErrorReason",
    "ServerConnectionError",
    "SupersededRequestError",
]
