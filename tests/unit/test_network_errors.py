"""Tests for network_errors."""

import asyncio
import socket

import aiohttp

from procattach.network_errors import describe_transport_error, is_network_unreachable_error, is_timeout_error


def test_timeout_is_network_error():
    assert is_network_unreachable_error(asyncio.TimeoutError())
    assert is_timeout_error(asyncio.TimeoutError())


def test_gaierror_is_network_error():
    assert is_network_unreachable_error(socket.gaierror("no such host"))


def test_value_error_is_not_network_error():
    assert not is_network_unreachable_error(ValueError("bad"))


def test_os_error_attribute_detected():
    class Wrapped(Exception):
        os_error = OSError("refused")

    assert is_network_unreachable_error(Wrapped())


def test_describe_transport_error():
    assert describe_transport_error(asyncio.TimeoutError()) == "request timed out"
    assert "unreachable" in describe_transport_error(ConnectionRefusedError())
    assert "ClientPayloadError" in describe_transport_error(aiohttp.ClientPayloadError("truncated"))
