"""Protocol package: request building, HTTP transport and response decoding."""

from .codec import Mapping, Node, decode_payload, decode_response, extract_payload
from .network import HttpTransport, Transport, get_session
from .request import build_request, is_numeric

__all__ = [
    "build_request",
    "is_numeric",
    "HttpTransport",
    "Transport",
    "get_session",
    "Mapping",
    "Node",
    "decode_payload",
    "decode_response",
    "extract_payload",
]
