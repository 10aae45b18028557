# File: vuze_client/client.py
"""High-level client for controlling Vuze through the XML over HTTP plugin."""

import logging
from pathlib import Path

from vuze_client.config import ClientConfig
from vuze_client.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    FIELD_OBJECT_ID,
    METHOD_ADD_DOWNLOAD_TORRENT,
    METHOD_ADD_DOWNLOAD_URL,
    METHOD_CREATE_FROM_BENCODED,
    METHOD_GET_DOWNLOADS,
    METHOD_MOVE_DOWN,
    METHOD_MOVE_UP,
    METHOD_REMOVE,
    METHOD_RESTART,
    METHOD_SET_FORCE_START,
    METHOD_STOP,
)
from vuze_client.errors import RemoteError
from vuze_client.protocol.codec import Mapping
from vuze_client.protocol.network import HttpTransport, Transport
from vuze_client.session import Session

logger = logging.getLogger(__name__)

TorrentId = str | int


class VuzeClient:
    """Remote control for a Vuze daemon.

    Constructing a client performs the session handshake, so a connection
    or protocol problem surfaces immediately. The client is not closed
    explicitly; the plugin has no teardown call.
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        username: str | None = None,
        password: str | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
        scheme: str = "http",
        transport: Transport | None = None,
    ) -> None:
        """Initialize the client and run the handshake.

        Args:
            host: Hostname or IP of the Vuze daemon.
            port: Port of the XML over HTTP plugin.
            username: Optional username for Basic auth.
            password: Optional password for Basic auth.
            timeout: Socket timeout in seconds, ``None`` to wait forever.
            scheme: ``http`` or ``https``.
            transport: Replacement transport, mainly for tests.
        """
        self.config = ClientConfig(
            host=host,
            port=port,
            username=username,
            password=password,
            scheme=scheme,
            timeout=timeout,
        )
        self.config.validate()
        self.session = Session(transport or HttpTransport(self.config))
        self.session.initialize()

    @classmethod
    def from_config(cls, config: ClientConfig, transport: Transport | None = None) -> "VuzeClient":
        """Create a client from an existing configuration object."""
        return cls(
            host=config.host,
            port=config.port,
            username=config.username,
            password=config.password,
            timeout=config.timeout,
            scheme=config.scheme,
            transport=transport,
        )

    @classmethod
    def from_env(cls, transport: Transport | None = None) -> "VuzeClient":
        """Create a client configured from ``VUZE_*`` environment variables."""
        return cls.from_config(ClientConfig.from_env(), transport=transport)

    @property
    def connection_id(self) -> str | None:
        return self.session.connection_id

    @property
    def plugin_id(self) -> str | None:
        return self.session.plugin_id

    def start(self, torrent_id: TorrentId) -> Mapping:
        """Start or restart downloading a torrent."""
        return self.session.call(METHOD_RESTART, torrent_id)

    def force_start(self, torrent_id: TorrentId) -> Mapping:
        """Force start a torrent, bypassing queue limits."""
        return self.session.call(METHOD_SET_FORCE_START, torrent_id, True)

    def stop(self, torrent_id: TorrentId) -> Mapping:
        """Stop downloading a torrent."""
        return self.session.call(METHOD_STOP, torrent_id)

    def move_up(self, torrent_id: TorrentId) -> Mapping:
        """Move a torrent one position up the queue."""
        return self.session.call(METHOD_MOVE_UP, torrent_id)

    def move_down(self, torrent_id: TorrentId) -> Mapping:
        """Move a torrent one position down the queue."""
        return self.session.call(METHOD_MOVE_DOWN, torrent_id)

    def remove(self, torrent_id: TorrentId) -> Mapping:
        """Remove a torrent from the daemon."""
        logger.info(f"Removing torrent {torrent_id} from Vuze")
        return self.session.call(METHOD_REMOVE, torrent_id)

    def add_torrent(self, data: bytes) -> Mapping:
        """Add a torrent from the raw contents of a .torrent file.

        The daemon decodes the data itself: it is first turned into a torrent
        object by the torrent manager, then handed to the download manager.

        Args:
            data: Bencoded torrent file contents.

        Returns:
            Mapping: The daemon's description of the new download.
        """
        torrent = self.session.call(
            METHOD_CREATE_FROM_BENCODED,
            self.session.resolve_torrent_manager_id(),
            data.hex(),
        )
        torrent_object_id = torrent.get(FIELD_OBJECT_ID)
        if not isinstance(torrent_object_id, str) or not torrent_object_id.strip():
            raise RemoteError(f"Response to '{METHOD_CREATE_FROM_BENCODED}' is missing '{FIELD_OBJECT_ID}'.")

        logger.info(f"Adding torrent object {torrent_object_id} ({len(data)} bytes) to Vuze")
        return self.session.call(
            METHOD_ADD_DOWNLOAD_TORRENT,
            self.session.resolve_download_manager_id(),
            torrent_object_id.strip(),
        )

    def add_torrent_file(self, path: str | Path) -> Mapping:
        """Read a .torrent file from disk and add it."""
        return self.add_torrent(Path(path).read_bytes())

    def add_torrent_url(self, url: str) -> Mapping:
        """Add a torrent by URL; the daemon fetches it."""
        logger.info(f"Adding torrent URL to Vuze: {url}")
        return self.session.call(METHOD_ADD_DOWNLOAD_URL, self.session.resolve_download_manager_id(), url)

    def get_downloads(self) -> Mapping:
        """Return the daemon's list of downloads as a decoded mapping."""
        return self.session.call(METHOD_GET_DOWNLOADS, self.session.resolve_download_manager_id())
