# vuze_client/protocol/codec.py
"""Response codec for the XML over HTTP plugin.

Turns the raw bytes of a plugin response into a generic nested mapping.
The codec knows nothing about individual methods; callers decide which
fields they need.
"""

import logging
from typing import Union

from lxml import etree

from vuze_client.constants import ATTRIBUTES_KEY, PAYLOAD_MARKER
from vuze_client.errors import DecodeError, ProtocolFramingError

logger = logging.getLogger(__name__)

# A decoded node is either scalar text or an ordered mapping of further nodes.
# Repeated sibling elements are keyed by their integer position.
Node = Union[str, dict[Union[str, int], "Node"]]
Mapping = dict[Union[str, int], Node]

_MARKER_BYTES = PAYLOAD_MARKER.encode("ascii")

# Strict parser: no DTD entity expansion and no network lookups.
_PARSER = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True, remove_pis=True)


def extract_payload(raw: bytes | str) -> bytes:
    """Strip transport framing and return the embedded XML document.

    Args:
        raw: The complete response as read from the wire.

    Returns:
        bytes: The payload, starting at the ``<?xml`` marker.

    Raises:
        ProtocolFramingError: If the marker occurs zero times or more than once.
    """
    data = raw.encode("utf-8") if isinstance(raw, str) else raw
    parts = data.split(_MARKER_BYTES)
    if len(parts) != 2:  # noqa: PLR2004
        logger.error(f"Unexpected response format: found {len(parts) - 1} payload markers in {len(data)} bytes.")
        raise ProtocolFramingError(f"Unexpected response format: expected exactly one '{PAYLOAD_MARKER}' marker.")
    return _MARKER_BYTES + parts[1]


def _element_children(element: etree._Element) -> list[etree._Element]:
    return [child for child in element if isinstance(child.tag, str)]


def _element_to_mapping(element: etree._Element) -> Mapping:
    """Flatten an element into a mapping, whatever its shape."""
    result: Mapping = {}
    if element.attrib:
        result[ATTRIBUTES_KEY] = {str(k): str(v) for k, v in element.attrib.items()}

    children = _element_children(element)
    if not children:
        # Text-only element at mapping level (root, or a leaf with attributes)
        if element.text:
            result[0] = element.text
        return result

    # Group siblings by tag, preserving first-seen order
    grouped: dict[str, list[etree._Element]] = {}
    for child in children:
        grouped.setdefault(etree.QName(child).localname, []).append(child)

    for tag, elements in grouped.items():
        if len(elements) == 1:
            result[tag] = _flatten(elements[0])
        else:
            result[tag] = {index: _flatten(item) for index, item in enumerate(elements)}
    return result


def _flatten(element: etree._Element) -> Node:
    """Flatten a child element: plain leaves collapse to their text."""
    if not element.attrib and not _element_children(element) and element.text:
        return str(element.text)
    return _element_to_mapping(element)


def decode_payload(payload: bytes | str) -> Mapping:
    """Parse an XML payload into a nested mapping.

    The root element itself is not part of the result; its children become
    the top-level keys.

    Raises:
        DecodeError: If the payload is not well-formed XML.
    """
    data = payload.encode("utf-8") if isinstance(payload, str) else payload
    try:
        root = etree.fromstring(data, parser=_PARSER)
    except etree.XMLSyntaxError as e:
        logger.error(f"Failed to parse plugin response: {e}")
        raise DecodeError(f"Malformed response payload: {e}") from e

    return _element_to_mapping(root)


def decode_response(raw: bytes | str) -> Mapping:
    """Extract and decode the payload of a raw plugin response."""
    return decode_payload(extract_payload(raw))
