from __future__ import annotations

"""HTTP helper utilities for talking to the instrumentation server."""

import ipaddress
from typing import Any, Optional
from urllib.parse import urlsplit

from .exceptions import ServerConnectionError

SERVER_PORT = 3030


def is_aiohttp_session_open(session: Optional[Any]) -> bool:
    """Return True when the provided aiohttp session exists and remains open."""
    if session is None:
        return False
    if not hasattr(session, "closed"):
        return False
    return not bool(session.closed)


def ensure_http_url(request_url: str) -> str:
    """Ensure the provided URL uses an allowed HTTP/HTTPS scheme."""
    parsed = urlsplit(request_url)
    scheme = parsed.scheme.lower()
    if scheme not in {"http", "https"}:
        raise ValueError(f"Unsupported URL scheme: {request_url}")
    if not parsed.netloc:
        raise ValueError(f"URL missing network location: {request_url}")
    return request_url


def normalize_address(address: Any) -> str:
    """Return the stripped host string, rejecting blanks, schemes and paths."""
    if not isinstance(address, str) or not address.strip():
        raise ServerConnectionError.empty_address()
    host = address.strip()
    if "://" in host:
        raise ServerConnectionError.invalid_address(host, "expected a host, not a URL")
    if "/" in host or "?" in host or "#" in host:
        raise ServerConnectionError.invalid_address(host, "unexpected path characters")
    if any(ch.isspace() for ch in host):
        raise ServerConnectionError.invalid_address(host, "contains whitespace")
    return host


def _is_ipv6_literal(text: str) -> bool:
    try:
        return ipaddress.ip_address(text).version == 6
    except ValueError:
        return False


def _bracket_ipv6(address: str, host: str) -> str:
    """Return *host* ready for a URL authority, rejecting anything carrying a port."""
    if host.startswith("["):
        closing = host.find("]")
        if closing == -1:
            raise ServerConnectionError.invalid_address(address, "unbalanced brackets")
        if closing != len(host) - 1:
            raise ServerConnectionError.invalid_address(address, f"port is fixed at {SERVER_PORT}")
        if not _is_ipv6_literal(host[1:-1]):
            raise ServerConnectionError.invalid_address(address, "brackets must enclose an IPv6 literal")
        return host
    if _is_ipv6_literal(host):
        return f"[{host}]"
    if ":" in host or "[" in host or "]" in host:
        raise ServerConnectionError.invalid_address(address, f"port is fixed at {SERVER_PORT}")
    return host


def validate_address(address: Any) -> str:
    """
    Check that *address* names a host reachable on the fixed port.

    Returns the normalized host. Raises ServerConnectionError for blanks,
    URLs, paths, explicit ports and malformed IPv6 literals.
    """
    host = normalize_address(address)
    build_base_url(host)
    return host


def build_base_url(address: str) -> str:
    """Base URL for the server at *address*; the port is fixed."""
    host = _bracket_ipv6(address, normalize_address(address))
    try:
        return ensure_http_url(f"http://{host}:{SERVER_PORT}")
    except ValueError as exc:
        raise ServerConnectionError.invalid_address(address, str(exc)) from exc


__all__ = [
    "SERVER_PORT",
    "build_base_url",
    "ensure_http_url",
    "is_aiohttp_session_open",
    "normalize_address",
    "validate_address",
]
