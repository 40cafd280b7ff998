"""Process records exchanged with the server and held by the session."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class ProcessDescriptor:
    """A process visible to the server, unique by pid within one catalog snapshot."""

    pid: int
    process_name: str

    def __str__(self) -> str:
        return f"{self.pid}:{self.process_name}"


@dataclass(frozen=True)
class OpenedProcess:
    """
    Process the server confirmed as opened.

    ``descriptor`` is the selection captured when the open request was issued,
    which may differ from the live selection by the time the response arrives.
    """

    descriptor: ProcessDescriptor
    address: str
    opened_at: datetime

    @classmethod
    def confirm(cls, descriptor: ProcessDescriptor, address: str) -> "OpenedProcess":
        return cls(descriptor=descriptor, address=address, opened_at=datetime.now(timezone.utc))

    @property
    def pid(self) -> int:
        return self.descriptor.pid

    @property
    def process_name(self) -> str:
        return self.descriptor.process_name
