# vuze_client/constants.py
"""Protocol constants and configuration defaults."""

from typing import Final

# --- Connection Defaults ---
DEFAULT_HOST: Final[str] = "127.0.0.1"
DEFAULT_PORT: Final[int] = 6884
# Seconds. None disables the deadline entirely.
DEFAULT_TIMEOUT: Final[int] = 30

# --- Wire Format ---
PROCESS_PATH: Final[str] = "/process.cgi"
PAYLOAD_MARKER: Final[str] = "<?xml"
ATTRIBUTES_KEY: Final[str] = "@attributes"

# Fields the plugin attaches to object-bearing responses
FIELD_CONNECTION_ID: Final[str] = "_connection_id"
FIELD_OBJECT_ID: Final[str] = "_object_id"
FIELD_ERROR: Final[str] = "ERROR"

# --- Remote Methods ---
METHOD_GET_SINGLETON: Final[str] = "getSingleton"
METHOD_GET_DOWNLOAD_MANAGER: Final[str] = "getDownloadManager"
METHOD_GET_TORRENT_MANAGER: Final[str] = "getTorrentManager"
METHOD_RESTART: Final[str] = "restart"
METHOD_SET_FORCE_START: Final[str] = "setForceStart"
METHOD_STOP: Final[str] = "stop"
METHOD_MOVE_UP: Final[str] = "moveUp"
METHOD_MOVE_DOWN: Final[str] = "moveDown"
METHOD_REMOVE: Final[str] = "remove"
METHOD_CREATE_FROM_BENCODED: Final[str] = "createFromBEncodedData[byte[]]"
METHOD_ADD_DOWNLOAD_TORRENT: Final[str] = "addDownload[Torrent]"
METHOD_ADD_DOWNLOAD_URL: Final[str] = "addDownload[URL]"
METHOD_GET_DOWNLOADS: Final[str] = "getDownloads"
