"""Transport-level exceptions raised by the server client."""

from typing import Optional

from . import DataError, NetworkError


class ServerRequestError(NetworkError):
    """Request to the instrumentation server failed.

    ``status`` holds the HTTP status code when the server answered with a
    non-success response, and is ``None`` for transport failures and timeouts.
    """

    def __init__(self, message: str = "", *, path: str = "", status: Optional[int] = None) -> None:
        if not message:
            if status is None:
                message = f"Request to {path or 'server'} failed"
            else:
                message = f"Request to {path or 'server'} returned HTTP {status}"
        super().__init__(message, path=path, status=status)

    @property
    def is_rejection(self) -> bool:
        """True when the server answered with a non-success status."""
        return self.status is not None


class MalformedResponseError(DataError):
    """Server response did not match the expected schema."""

    def __init__(self, message: str = "", *, path: str = "") -> None:
        if not message:
            message = f"Malformed response from {path or 'server'}"
        super().__init__(message, path=path)


__all__ = ["MalformedResponseError", "ServerRequestError"]
