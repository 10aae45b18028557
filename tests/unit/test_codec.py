# File: tests/unit/test_codec.py
"""Unit tests for response extraction and decoding."""

import pytest

from vuze_client.errors import DecodeError, ProtocolFramingError, ResponseError
from vuze_client.protocol.codec import decode_payload, decode_response, extract_payload

PAYLOAD = '<?xml version="1.0" encoding="UTF-8"?><RESPONSE><_object_id>X</_object_id></RESPONSE>'


def test_extract_payload_strips_framing() -> None:
    raw = b"HTTP/1.1 200 OK\r\nContent-Type: text/xml\r\n\r\n" + PAYLOAD.encode()

    assert extract_payload(raw) == PAYLOAD.encode()


def test_extract_payload_accepts_text() -> None:
    assert extract_payload("junk" + PAYLOAD) == PAYLOAD.encode()


def test_extract_payload_rejects_missing_marker() -> None:
    with pytest.raises(ProtocolFramingError):
        extract_payload(b"HTTP/1.1 200 OK\r\n\r\n<RESPONSE/>")


def test_extract_payload_rejects_two_markers() -> None:
    """Two payloads are malformed, not 'take the first one'."""
    with pytest.raises(ProtocolFramingError):
        extract_payload(b"HTTP/1.1 200 OK\r\n\r\n" + PAYLOAD.encode() + PAYLOAD.encode())


def test_framing_and_decode_errors_share_response_base() -> None:
    assert issubclass(ProtocolFramingError, ResponseError)
    assert issubclass(DecodeError, ResponseError)


def test_decode_nested_objects() -> None:
    """Nested object-bearing fields decode into nested mappings."""
    result = decode_payload(
        '<?xml version="1.0"?><RESPONSE><_object_id>X</_object_id>'
        "<child><_object_id>Y</_object_id></child></RESPONSE>"
    )

    assert result == {"_object_id": "X", "child": {"_object_id": "Y"}}
    assert isinstance(result["child"], dict)


def test_decode_preserves_field_order() -> None:
    result = decode_payload("<R><b>1</b><a>2</a><c>3</c></R>")

    assert list(result) == ["b", "a", "c"]


def test_decode_repeated_elements_are_indexed() -> None:
    """Array-like nodes flatten through the same mapping walk, keyed by position."""
    result = decode_payload(
        "<RESPONSE><ENTRY><_object_id>1</_object_id></ENTRY><ENTRY><_object_id>2</_object_id></ENTRY></RESPONSE>"
    )

    assert result == {"ENTRY": {0: {"_object_id": "1"}, 1: {"_object_id": "2"}}}


def test_decode_empty_element_is_empty_mapping() -> None:
    assert decode_payload("<RESPONSE><torrent/><name>x</name></RESPONSE>") == {"torrent": {}, "name": "x"}


def test_decode_attributes() -> None:
    result = decode_payload('<RESPONSE><ENTRY index="0"><name>a</name></ENTRY><flag on="yes">1</flag></RESPONSE>')

    assert result["ENTRY"] == {"@attributes": {"index": "0"}, "name": "a"}
    assert result["flag"] == {"@attributes": {"on": "yes"}, 0: "1"}


def test_decode_text_only_root() -> None:
    assert decode_payload("<RESPONSE>true</RESPONSE>") == {0: "true"}


def test_decode_keeps_whitespace_in_values() -> None:
    """Trimming is the caller's decision."""
    assert decode_payload("<R><_connection_id> c1 </_connection_id></R>") == {"_connection_id": " c1 "}


def test_decode_malformed_payload() -> None:
    with pytest.raises(DecodeError):
        decode_payload('<?xml version="1.0"?><RESPONSE><_object_id>X</RESPONSE>')


def test_decode_response_end_to_end() -> None:
    raw = b"HTTP/1.1 200 OK\r\n\r\n" + PAYLOAD.encode()

    assert decode_response(raw) == {"_object_id": "X"}


def test_decode_response_truncated_payload() -> None:
    with pytest.raises(DecodeError):
        decode_response(b"HTTP/1.1 200 OK\r\n\r\n" + PAYLOAD.encode()[:-5])
