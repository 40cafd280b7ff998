"""
Network error detection and classification.

This module provides canonical detection of network-level failures
versus server answers. The server client imports from here rather than
listing exception types itself.
"""

import asyncio
import socket

import aiohttp

NETWORK_ERROR_TYPES = (
    aiohttp.ClientConnectorError,
    aiohttp.ClientProxyConnectionError,
    aiohttp.ServerTimeoutError,
    aiohttp.ServerDisconnectedError,
    aiohttp.ClientHttpProxyError,
    asyncio.TimeoutError,
    socket.gaierror,
    OSError,
)

TRANSPORT_ERROR_TYPES = (aiohttp.ClientError, asyncio.TimeoutError, OSError)


def is_network_unreachable_error(exception: BaseException) -> bool:
    """
    Determine if an exception represents a network connectivity failure.

    Args:
        exception: Exception to check

    Returns:
        True if this is a network-level error that indicates connectivity issues
    """
    if isinstance(exception, NETWORK_ERROR_TYPES):
        return True

    os_error = getattr(exception, "os_error", None)
    return isinstance(os_error, OSError)


def is_timeout_error(exception: BaseException) -> bool:
    """Return True when the failure was a bounded wait running out."""
    return isinstance(exception, (asyncio.TimeoutError, aiohttp.ServerTimeoutError))


def describe_transport_error(exception: BaseException) -> str:
    """Short operator-facing description of a transport failure."""
    if is_timeout_error(exception):
        return "request timed out"
    if is_network_unreachable_error(exception):
        return f"server unreachable ({exception.__class__.__name__})"
    return f"{exception.__class__.__name__}: {exception}"


__all__ = [
    "NETWORK_ERROR_TYPES",
    "TRANSPORT_ERROR_TYPES",
    "describe_transport_error",
    "is_network_unreachable_error",
    "is_timeout_error",
]
