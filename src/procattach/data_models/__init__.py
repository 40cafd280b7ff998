"""Data models shared by the server client and the session components."""

from .process import OpenedProcess, ProcessDescriptor
from .server_info import ServerInfo

__all__ = ["OpenedProcess", "ProcessDescriptor", "ServerInfo"]
