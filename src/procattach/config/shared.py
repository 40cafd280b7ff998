"""Settings shared by the command line script and library callers."""

from __future__ import annotations

from .runtime import env_str

DEFAULT_SERVER_ADDRESS = "127.0.0.1"


def default_server_address() -> str:
    """Address offered to the operator when none is given explicitly."""
    value = env_str("PROCATTACH_DEFAULT_ADDRESS", or_value=DEFAULT_SERVER_ADDRESS)
    return value if value else DEFAULT_SERVER_ADDRESS


__all__ = ["DEFAULT_SERVER_ADDRESS", "default_server_address"]
