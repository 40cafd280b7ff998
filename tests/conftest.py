"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

from procattach.config import reset_default_values
from procattach.data_models import ProcessDescriptor, ServerInfo
from procattach.server_client import ServerClient

# Keep tests independent of any developer .env
os.environ.setdefault("PROCATTACH_REQUEST_TIMEOUT_SECONDS", "10")
os.environ.setdefault("PROCATTACH_CONNECT_TIMEOUT_SECONDS", "5")
os.environ.setdefault("PROCATTACH_SOCK_READ_TIMEOUT_SECONDS", "10")


@pytest.fixture(autouse=True)
def _fresh_config_defaults():
    reset_default_values()
    yield
    reset_default_values()


@pytest.fixture
def server_info():
    return ServerInfo(mode="embedded", target_os="android", arch="aarch64", pid=4321, build_id="abc123")


@pytest.fixture
def processes():
    return [
        ProcessDescriptor(pid=3, process_name="a"),
        ProcessDescriptor(pid=1, process_name="b"),
        ProcessDescriptor(pid=2, process_name="c"),
    ]


@pytest.fixture
def mock_client(server_info, processes):
    """ServerClient double answering every endpoint successfully."""
    client = MagicMock(spec=ServerClient)
    client.get_server_info = AsyncMock(return_value=server_info)
    client.enum_processes = AsyncMock(return_value=list(processes))
    client.open_process = AsyncMock(return_value=None)
    client.close = AsyncMock()
    return client
