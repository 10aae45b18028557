# File: tests/conftest.py
"""Global pytest fixtures for the test suite.

Provides a scripted in-memory transport so session and client tests never
touch the network.
"""

import re
from collections.abc import Callable

import pytest

RE_METHOD = re.compile(r"<METHOD>(.*?)</METHOD>")
RE_REQUEST_ID = re.compile(r"<REQUEST_ID>(\d+)</REQUEST_ID>")

HTTP_FRAMING = "HTTP/1.1 200 OK\r\nContent-Type: text/xml; charset=UTF-8\r\nConnection: close\r\n\r\n"


def xml_response(body: str, framing: str = HTTP_FRAMING) -> bytes:
    """Wrap a RESPONSE body the way the plugin sends it."""
    return (framing + '<?xml version="1.0" encoding="UTF-8"?><RESPONSE>' + body + "</RESPONSE>").encode("utf-8")


def object_response(object_id: str, extra: str = "") -> bytes:
    """Build a response describing a single remote object."""
    return xml_response(f"<_object_id>{object_id}</_object_id>{extra}")


DEFAULT_HANDLERS: dict[str, Callable[[str], bytes]] = {
    "getSingleton": lambda doc: xml_response("<_connection_id>c1</_connection_id><_object_id>100</_object_id>"),
    "getDownloadManager": lambda doc: object_response("200"),
    "getTorrentManager": lambda doc: object_response("300"),
    "getDownloads": lambda doc: xml_response(
        "<ENTRY><_object_id>11</_object_id><name>first</name></ENTRY>"
        "<ENTRY><_object_id>12</_object_id><name>second</name></ENTRY>"
    ),
    "createFromBEncodedData[byte[]]": lambda doc: object_response("400"),
    "addDownload[Torrent]": lambda doc: object_response("500"),
    "addDownload[URL]": lambda doc: object_response("501"),
}


class FakeTransport:
    """Transport double that answers by method name and records every request."""

    def __init__(self, handlers: dict[str, Callable[[str], bytes]] | None = None) -> None:
        self.handlers = dict(DEFAULT_HANDLERS)
        if handlers:
            self.handlers.update(handlers)
        self.documents: list[str] = []

    def exchange(self, document: str) -> bytes:
        self.documents.append(document)
        match = RE_METHOD.search(document)
        method = match.group(1) if match else ""
        handler = self.handlers.get(method)
        if handler is None:
            return xml_response("")
        return handler(document)

    @property
    def methods(self) -> list[str]:
        """Remote method names in the order they were sent."""
        return [m.group(1) for m in (RE_METHOD.search(d) for d in self.documents) if m]

    @property
    def request_ids(self) -> list[int]:
        return [int(m.group(1)) for m in (RE_REQUEST_ID.search(d) for d in self.documents) if m]


@pytest.fixture
def fake_transport() -> FakeTransport:
    """A transport with default handshake and manager responses."""
    return FakeTransport()


@pytest.fixture
def make_transport() -> Callable[..., FakeTransport]:
    """Fixture that returns a factory for transports with custom handlers.

    Handlers are keyed by remote method name and receive the request document.
    """

    def _make(handlers: dict[str, Callable[[str], bytes]] | None = None) -> FakeTransport:
        return FakeTransport(handlers)

    return _make


@pytest.fixture
def plugin_xml() -> Callable[..., bytes]:
    """Fixture exposing the RESPONSE builder to tests."""
    return xml_response
