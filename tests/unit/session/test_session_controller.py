"""Tests for session session_controller."""

import asyncio
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from procattach.data_models import ProcessDescriptor
from procattach.exceptions import (
    CatalogError,
    CatalogErrorReason,
    OpenError,
    OpenErrorReason,
    ServerRequestError,
    SupersededRequestError,
)
from procattach.session import ConnectionManager, ProcessCatalog, SessionContext, SessionController
from procattach.session_state import SessionState


@pytest.fixture
def context():
    return SessionContext()


@pytest.fixture
def catalog(context, mock_client):
    return ProcessCatalog(context, mock_client)


@pytest.fixture
def controller(context, mock_client, catalog):
    return SessionController(context, mock_client, catalog)


@pytest_asyncio.fixture
async def connected(context, mock_client):
    await ConnectionManager(context, mock_client).connect("10.0.0.5")
    return context


@pytest.mark.asyncio
async def test_open_without_selection_fails_without_request(controller, connected, mock_client):
    with pytest.raises(OpenError) as exc_info:
        await controller.open_selected()

    assert exc_info.value.reason is OpenErrorReason.NO_SELECTION
    assert controller.opened is None
    mock_client.open_process.assert_not_called()


@pytest.mark.asyncio
async def test_select_then_open_sets_opened_process(controller, connected, mock_client):
    controller.select_process(ProcessDescriptor(42, "x"))

    opened = await controller.open_selected()

    assert opened.descriptor == ProcessDescriptor(42, "x")
    assert opened.address == "10.0.0.5"
    assert controller.opened == opened
    assert connected.state is SessionState.PROCESS_OPENED
    mock_client.open_process.assert_awaited_once_with("10.0.0.5", 42)


@pytest.mark.asyncio
async def test_reselect_without_open_keeps_opened_process(controller, connected):
    controller.select_process(ProcessDescriptor(42, "x"))
    await controller.open_selected()

    controller.select_process(ProcessDescriptor(7, "y"))

    assert controller.opened.descriptor == ProcessDescriptor(42, "x")
    assert controller.selected == ProcessDescriptor(7, "y")


@pytest.mark.asyncio
async def test_rejected_open_keeps_selection_and_allows_retry(controller, connected, mock_client):
    descriptor = ProcessDescriptor(42, "x")
    controller.select_process(descriptor)
    mock_client.open_process.side_effect = [ServerRequestError(path="/openprocess", status=403), None]

    with pytest.raises(OpenError) as exc_info:
        await controller.open_selected()

    assert exc_info.value.reason is OpenErrorReason.REJECTED
    assert exc_info.value.status == 403
    assert controller.selected == descriptor
    assert controller.opened is None

    opened = await controller.open_selected()
    assert opened.descriptor == descriptor


@pytest.mark.asyncio
async def test_network_failure_keeps_previous_opened_process(controller, connected, mock_client):
    controller.select_process(ProcessDescriptor(1, "first"))
    first = await controller.open_selected()
    controller.select_process(ProcessDescriptor(2, "second"))
    mock_client.open_process.side_effect = ServerRequestError("timed out", path="/openprocess")

    with pytest.raises(OpenError) as exc_info:
        await controller.open_selected()

    assert exc_info.value.reason is OpenErrorReason.NETWORK
    assert controller.opened == first
    assert controller.selected == ProcessDescriptor(2, "second")


@pytest.mark.asyncio
async def test_open_records_selection_at_request_time(context, mock_client, catalog):
    await ConnectionManager(context, mock_client).connect("10.0.0.5")
    controller = SessionController(context, mock_client, catalog)
    release = asyncio.Event()

    async def slow_open(address, pid):
        await release.wait()

    mock_client.open_process = AsyncMock(side_effect=slow_open)
    controller.select_process(ProcessDescriptor(42, "x"))

    pending = asyncio.create_task(controller.open_selected())
    await asyncio.sleep(0)
    controller.select_process(ProcessDescriptor(7, "y"))
    release.set()
    opened = await pending

    assert opened.descriptor == ProcessDescriptor(42, "x")
    assert controller.selected == ProcessDescriptor(7, "y")


@pytest.mark.asyncio
async def test_older_open_response_is_discarded(context, mock_client, catalog):
    await ConnectionManager(context, mock_client).connect("10.0.0.5")
    controller = SessionController(context, mock_client, catalog)
    release_first = asyncio.Event()

    async def open_process(address, pid):
        if pid == 1:
            await release_first.wait()

    mock_client.open_process = AsyncMock(side_effect=open_process)

    controller.select_process(ProcessDescriptor(1, "first"))
    first = asyncio.create_task(controller.open_selected())
    await asyncio.sleep(0)
    controller.select_process(ProcessDescriptor(2, "second"))
    await controller.open_selected()
    release_first.set()

    with pytest.raises(SupersededRequestError):
        await first
    assert controller.opened.descriptor == ProcessDescriptor(2, "second")


@pytest.mark.asyncio
async def test_open_when_disconnected_is_network_error(controller, mock_client):
    controller.select_process(ProcessDescriptor(42, "x"))

    with pytest.raises(OpenError) as exc_info:
        await controller.open_selected()

    assert exc_info.value.reason is OpenErrorReason.NETWORK
    mock_client.open_process.assert_not_called()


@pytest.mark.asyncio
async def test_select_pid_uses_catalog(controller, catalog, connected):
    await catalog.refresh()

    assert controller.select_pid(2) == ProcessDescriptor(2, "c")
    assert controller.selected == ProcessDescriptor(2, "c")

    with pytest.raises(CatalogError) as exc_info:
        controller.select_pid(404)
    assert exc_info.value.reason is CatalogErrorReason.NOT_FOUND
    assert controller.selected == ProcessDescriptor(2, "c")


def test_clear_selection(controller):
    controller.select_process(ProcessDescriptor(1, "a"))
    controller.clear_selection()

    assert controller.selected is None


@pytest.mark.asyncio
async def test_repeated_opens_stay_in_opened_state(controller, connected):
    controller.select_process(ProcessDescriptor(1, "a"))
    await controller.open_selected()
    controller.select_process(ProcessDescriptor(2, "b"))
    second = await controller.open_selected()

    assert connected.state is SessionState.PROCESS_OPENED
    assert controller.opened == second
