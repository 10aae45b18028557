"""Client library for the Vuze XML over HTTP control plugin."""

from .client import VuzeClient
from .config import ClientConfig
from .errors import (
    DecodeError,
    ProtocolFramingError,
    RemoteError,
    ResponseError,
    SessionNotInitializedError,
    TransportHTTPError,
    VuzeConnectionError,
    VuzeError,
)
from .session import Session

__all__ = [
    "VuzeClient",
    "ClientConfig",
    "Session",
    "VuzeError",
    "VuzeConnectionError",
    "TransportHTTPError",
    "ResponseError",
    "ProtocolFramingError",
    "DecodeError",
    "RemoteError",
    "SessionNotInitializedError",
]
