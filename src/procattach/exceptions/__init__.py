"""Common exception classes for procattach.

All custom exceptions inherit from ApplicationError so callers can catch a
single base type at the operator boundary.

Exception classes support two patterns:
1. No-argument raise: raise NetworkError()
2. Contextual attributes: err = NetworkError(address="10.0.0.2", status=503); raise err
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class DataError(ApplicationError):
    """Data processing or parsing error."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Data processing or parsing error"
        super().__init__(message, **kwargs)


class NetworkError(ApplicationError):
    """Network communication error."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Network communication error"
        super().__init__(message, **kwargs)


from .server import MalformedResponseError, ServerRequestError  # noqa: E402
from .session import (  # noqa: E402
    CatalogError,
    CatalogErrorReason,
    OpenError,
    OpenErrorReason,
    ServerConnectionError,
    SupersededRequestError,
)

__all__ = [
    "ApplicationError",
    "CatalogError",
    "CatalogErrorReason",
    "DataError",
    "MalformedResponseError",
    "NetworkError",
    "OpenError",
    "OpenErrorReason",
    "ServerConnectionError",
    "ServerRequestError",
    "SupersededRequestError",
]
