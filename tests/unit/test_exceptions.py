"""Tests for exception hierarchy."""

from procattach.exceptions import (
    ApplicationError,
    CatalogError,
    CatalogErrorReason,
    MalformedResponseError,
    NetworkError,
    OpenError,
    OpenErrorReason,
    ServerConnectionError,
    ServerRequestError,
    SupersededRequestError,
)


def test_application_error_default_message_and_attributes():
    err = NetworkError(address="10.0.0.5")

    assert str(err) == "Network communication error"
    assert err.address == "10.0.0.5"


def test_all_session_errors_are_application_errors():
    for err in (
        ServerConnectionError(address="h"),
        CatalogError.not_connected(),
        OpenError.no_selection(),
        SupersededRequestError("refresh"),
        MalformedResponseError(path="/x"),
        ServerRequestError(path="/x"),
    ):
        assert isinstance(err, ApplicationError)


def test_catalog_error_factories():
    assert CatalogError.not_connected("h").reason is CatalogErrorReason.NOT_CONNECTED
    assert CatalogError.malformed("dup").reason is CatalogErrorReason.MALFORMED
    assert CatalogError.network("down", status=502).status == 502
    assert CatalogError.not_found(9).pid == 9


def test_open_error_factories():
    rejected = OpenError.rejected(42, 409)

    assert rejected.reason is OpenErrorReason.REJECTED
    assert rejected.status == 409
    assert "409" in str(rejected)
    assert OpenError.network(42, "timeout").reason is OpenErrorReason.NETWORK


def test_server_request_error_messages():
    assert "HTTP 500" in str(ServerRequestError(path="/serverinfo", status=500))
    assert ServerRequestError(path="/serverinfo").is_rejection is False


def test_superseded_message():
    assert "connect" in str(SupersededRequestError("connect"))
