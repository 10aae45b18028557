"""Network module handling the HTTP exchange with the plugin."""

import logging
from typing import Protocol

import requests
from requests.adapters import HTTPAdapter
from requests.auth import HTTPBasicAuth
from requests.sessions import Session
from urllib3.exceptions import MaxRetryError, NewConnectionError
from urllib3.util.retry import Retry

from vuze_client.config import ClientConfig
from vuze_client.constants import PROCESS_PATH
from vuze_client.errors import TransportHTTPError, VuzeConnectionError

logger = logging.getLogger(__name__)

HTTP_ERROR_THRESHOLD = 400


def connection_error_phase(error: requests.ConnectionError) -> str:
    """Tell a refused or unresolvable connection apart from one dropped mid-exchange.

    requests raises ConnectionError for both; only a NewConnectionError cause
    means the socket was never established.
    """
    cause = error.args[0] if error.args else None
    if isinstance(cause, MaxRetryError):
        cause = cause.reason
    if isinstance(cause, NewConnectionError):
        return "connect"
    return "read"


class Transport(Protocol):
    """Anything that can carry one request document to the plugin and back."""

    def exchange(self, document: str) -> bytes:
        """Send ``document`` and return the complete raw response."""
        ...


def get_session() -> Session:
    """Configure and return a requests Session with ZERO retries.

    A new session is created for every exchange so no connection outlives
    the request that opened it. Retrying is left to the caller.

    Returns:
        Session: A configured requests Session object with 0 retries.
    """
    session = requests.Session()
    retry_strategy = Retry(
        total=0,
        backoff_factor=0,
        status_forcelist=[],
        allowed_methods=["POST"],
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class HttpTransport:
    """POSTs request documents to ``/process.cgi`` on the configured daemon."""

    def __init__(self, config: ClientConfig) -> None:
        """Initialize the transport.

        Args:
            config: Host, port, credentials and timeout to use.
        """
        self.config = config
        self.url = f"{config.base_url}{PROCESS_PATH}"
        self.auth = HTTPBasicAuth(config.username or "", config.password or "") if config.has_credentials else None

    def exchange(self, document: str) -> bytes:
        """Perform one request/response round trip on a fresh connection.

        The plugin closes the connection after answering, so the response is
        read until end of stream.

        Args:
            document: The serialized ``<REQUEST>`` document.

        Returns:
            bytes: The raw response body, framing included.

        Raises:
            VuzeConnectionError: If connecting, sending or reading fails.
            TransportHTTPError: If the plugin answers with an HTTP error status.
        """
        body = document.encode("utf-8")
        headers = {
            "Content-Type": "text/xml; charset=utf-8",
            "Content-Length": str(len(body)),
            "Connection": "close",
        }

        with get_session() as session:
            try:
                response = session.post(
                    self.url,
                    data=body,
                    headers=headers,
                    auth=self.auth,
                    timeout=self.config.timeout,
                )
            # ConnectTimeout is both a Timeout and a ConnectionError; report it as a timeout.
            except requests.Timeout as e:
                logger.error(f"Timed out talking to Vuze at {self.url}: {e}")
                raise VuzeConnectionError(str(e), phase="timeout") from e
            except requests.ConnectionError as e:
                phase = connection_error_phase(e)
                if phase == "connect":
                    logger.error(f"Could not connect to Vuze at {self.url}: {e}")
                else:
                    logger.error(f"Vuze at {self.url} dropped the connection before answering: {e}")
                raise VuzeConnectionError(str(e), phase=phase) from e
            except requests.RequestException as e:
                logger.error(f"Failed reading response from Vuze at {self.url}: {e}")
                raise VuzeConnectionError(str(e), phase="read") from e

            if response.status_code >= HTTP_ERROR_THRESHOLD:
                logger.error(f"Vuze returned HTTP {response.status_code} for {self.url}")
                raise TransportHTTPError(
                    f"Vuze returned HTTP {response.status_code} {response.reason or ''}".strip(),
                    status_code=response.status_code,
                )

            logger.debug(f"Received {len(response.content)} bytes from {self.url}")
            return response.content
