# File: vuze_client/session.py
"""Session state for one conversation with the XML over HTTP plugin.

The plugin is stateless at the HTTP level. Continuity comes from the
connection id and object ids it hands out, which the session keeps and
echoes back on every later request.
"""

import logging
import threading

from vuze_client.constants import (
    FIELD_CONNECTION_ID,
    FIELD_ERROR,
    FIELD_OBJECT_ID,
    METHOD_GET_DOWNLOAD_MANAGER,
    METHOD_GET_SINGLETON,
    METHOD_GET_TORRENT_MANAGER,
)
from vuze_client.errors import RemoteError, SessionNotInitializedError
from vuze_client.protocol.codec import Mapping, decode_response
from vuze_client.protocol.network import Transport
from vuze_client.protocol.request import Parameter, build_request

logger = logging.getLogger(__name__)


def _required_id(response: Mapping, field: str, method: str) -> str:
    """Return a non-empty, stripped string field from a response."""
    value = response.get(field)
    if not isinstance(value, str) or not value.strip():
        raise RemoteError(f"Response to '{method}' is missing '{field}'.")
    return value.strip()


class Session:
    """Identity and correlation state for one client.

    Holds the connection id and plugin root id established by the handshake,
    lazily resolved manager ids, and the request counter. Counter increments
    and lazy resolution are locked, so a session may be shared by threads.
    """

    def __init__(self, transport: Transport) -> None:
        """Initialize an empty session; call ``initialize()`` before use."""
        self.transport = transport
        self.connection_id: str | None = None
        self.plugin_id: str | None = None
        self.download_manager_id: str | None = None
        self.torrent_manager_id: str | None = None
        self._request_id = 0
        self._counter_lock = threading.Lock()
        self._identity_lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        """True once the handshake has stored both root identifiers."""
        return bool(self.connection_id and self.plugin_id)

    def next_request_id(self) -> int:
        """Issue the next request id. Ids start at 1 and never repeat."""
        with self._counter_lock:
            self._request_id += 1
            return self._request_id

    def call(
        self,
        method: str,
        object_id: str | int | None = None,
        parameter: Parameter | None = None,
    ) -> Mapping:
        """Invoke a remote method and return the decoded response.

        Args:
            method: Remote method name.
            object_id: Target object id, if the method is called on an object.
            parameter: Optional single parameter (see ``build_request``).

        Returns:
            Mapping: The decoded response payload.

        Raises:
            SessionNotInitializedError: If called before the handshake.
            RemoteError: If the plugin reports an error.
        """
        if not self.initialized and method != METHOD_GET_SINGLETON:
            raise SessionNotInitializedError(f"Cannot call '{method}' before the session handshake.")

        target = str(object_id) if object_id is not None else None
        request_id = self.next_request_id()
        document = build_request(
            method,
            request_id,
            object_id=target,
            parameter=parameter,
            connection_id=self.connection_id,
        )
        logger.debug(f"Request #{request_id}: {method} on {target or '-'}")

        response = decode_response(self.transport.exchange(document))

        if FIELD_ERROR in response:
            error = response[FIELD_ERROR]
            logger.warning(f"Vuze rejected '{method}' (request #{request_id}): {error}")
            raise RemoteError(f"Vuze error for '{method}': {error}")

        return response

    def initialize(self) -> None:
        """Run the handshake and store the connection and plugin root ids.

        Safe to call again; once identifiers are stored it does nothing.
        """
        with self._identity_lock:
            if self.initialized:
                return

            response = self.call(METHOD_GET_SINGLETON)
            connection_id = _required_id(response, FIELD_CONNECTION_ID, METHOD_GET_SINGLETON)
            plugin_id = _required_id(response, FIELD_OBJECT_ID, METHOD_GET_SINGLETON)

            self.connection_id = connection_id
            self.plugin_id = plugin_id
            logger.info(f"Vuze session established (connection {connection_id}, plugin {plugin_id})")

    def _resolve_manager(self, attribute: str, method: str) -> str:
        cached = getattr(self, attribute)
        if cached:
            return str(cached)

        with self._identity_lock:
            # Another thread may have resolved it while we waited
            cached = getattr(self, attribute)
            if cached:
                return str(cached)

            response = self.call(method, self.plugin_id)
            manager_id = _required_id(response, FIELD_OBJECT_ID, method)
            setattr(self, attribute, manager_id)
            logger.info(f"Resolved {method[3:]} as object {manager_id}")
            return manager_id

    def resolve_download_manager_id(self) -> str:
        """Return the download manager id, looking it up on first use."""
        return self._resolve_manager("download_manager_id", METHOD_GET_DOWNLOAD_MANAGER)

    def resolve_torrent_manager_id(self) -> str:
        """Return the torrent manager id, looking it up on first use."""
        return self._resolve_manager("torrent_manager_id", METHOD_GET_TORRENT_MANAGER)
