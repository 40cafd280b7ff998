"""Server identity snapshot reported by the identity probe."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServerInfo:
    """
    Metadata the server reports about itself.

    Replaced wholesale on every successful probe; never patched field by field.
    ``build_id`` carries the server's ``git_hash`` field.
    """

    mode: str
    target_os: str
    arch: str
    pid: int
    build_id: str

    def __post_init__(self):
        if self.pid < 0:
            raise ValueError(f"Server pid must be non-negative, got {self.pid}")

    def describe(self) -> str:
        """One-line summary for logs and the command line script."""
        return f"{self.mode} server on {self.target_os}/{self.arch} (pid {self.pid}, build {self.build_id})"
