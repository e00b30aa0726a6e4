"""Atrea client for communicating with RD5 ventilation units over HTTP."""

import logging
import threading
from typing import Mapping, Optional
from urllib.parse import urlencode

import requests

from .exceptions import (
    AccessModeError,
    AuthenticationError,
    DeviceRejectedError,
    TransportError,
)
from .protocol import (
    ALARMS_PATH,
    DATA_PATH,
    DEFAULT_TIMEOUT,
    LOGIN_NONCE_LENGTH,
    LOGIN_PATH,
    READ_NONCE_LENGTH,
    WRITE_PATH,
    ParameterKind,
    compute_magic,
    extract_token,
    format_parameter,
    generate_nonce,
)
from .session import SessionState
from .snapshot import Snapshot, parse_snapshot

logger = logging.getLogger(__name__)


class AtreaClient:
    """Client for the web interface of Atrea RD5 ventilation units.

    The device exposes an undocumented CGI interface used by its own web
    front-end. This client handles:
    - The MD5 login handshake and the numeric session token it yields
    - Reading the XML parameter dump and the alarm list
    - Writing one or more parameters in a single request

    Every request is bounded by a timeout. The client never re-authenticates
    on its own; the device keeps sessions alive until it restarts.
    """

    def __init__(
        self,
        host: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize Atrea client.

        Args:
            host: Device address (e.g., "192.168.1.50") or base URL
            timeout: Timeout for each HTTP request in seconds (default: 10.0)
            session: requests session to use (default: a new one)
        """
        if host.startswith(("http://", "https://")):
            self.base_url = host.rstrip("/")
        else:
            self.base_url = f"http://{host}"
        self.host = host
        self.timeout = timeout

        self._http = session if session is not None else requests.Session()
        self._session = SessionState()
        self._login_lock = threading.Lock()

    @classmethod
    def from_config(cls, config, session: Optional[requests.Session] = None) -> "AtreaClient":
        """Create a client from a :class:`~atreaassistant.config.DeviceConfig`."""
        return cls(config.host, timeout=config.timeout, session=session)

    def close(self):
        """Close the underlying HTTP session."""
        self._http.close()

    def is_authenticated(self) -> bool:
        """Check if the client holds a session token.

        Returns:
            bool: True if a token is held, False otherwise
        """
        return self._session.is_authenticated

    @property
    def session_id(self) -> Optional[str]:
        """Current session token, or None when unauthenticated."""
        return self._session.token

    @session_id.setter
    def session_id(self, token: Optional[str]):
        # Restores a saved session; None or "" logs out.
        if token:
            self._session.replace(token)
        else:
            self._session.clear()

    @property
    def session_age(self) -> float:
        return self._session.age

    def authenticate(self, password: str, timeout: Optional[float] = None) -> str:
        """Log in to the device.

        Sends the MD5 digest of CR LF + password with a random nonce and
        keeps the numeric token the device answers with. Concurrent calls are
        serialized. On failure the previous session state is left untouched.

        Args:
            password: Device password
            timeout: Override for the client's request timeout

        Returns:
            str: The new session token

        Raises:
            AuthenticationError: If the device denies the login, answers
                with something unusable, or cannot be reached
        """
        query = urlencode([
            ("magic", compute_magic(password)),
            ("rnd", generate_nonce(LOGIN_NONCE_LENGTH)),
        ])

        with self._login_lock:
            try:
                response = self._get(LOGIN_PATH, query, timeout)
            except TransportError as e:
                raise AuthenticationError(f"Login request failed: {e}") from e

            if not _is_success(response):
                raise AuthenticationError(f"Login failed: status {response.status_code}")

            try:
                token = extract_token(response.text)
            except AuthenticationError:
                logger.warning(f"Atrea device at {self.host} rejected login")
                raise

            self._session.replace(token)

        logger.info(f"Authenticated with Atrea device at {self.host}")
        return token

    def logout(self):
        """Forget the current session token."""
        self._session.clear()
        logger.info("Logged out from Atrea device")

    def fetch_snapshot(self, timeout: Optional[float] = None) -> bytes:
        """Download the raw XML parameter dump.

        Without a session the device answers with its unauthenticated view.

        Returns:
            bytes: Response body, unmodified

        Raises:
            TransportError: If the request fails
        """
        return self._read(DATA_PATH, timeout)

    def snapshot(self, timeout: Optional[float] = None) -> Snapshot:
        """Download and parse the parameter dump.

        Raises:
            TransportError: If the request fails
            MalformedDocumentError: If the body cannot be parsed
        """
        return parse_snapshot(self.fetch_snapshot(timeout))

    def fetch_alarms(self, timeout: Optional[float] = None) -> bytes:
        """Download the raw XML alarm list.

        Raises:
            TransportError: If the request fails
        """
        return self._read(ALARMS_PATH, timeout)

    def set_parameter(self, identifier: str, value, timeout: Optional[float] = None):
        """Write a single parameter.

        Raises:
            AccessModeError: If the identifier names a read-only sensor
            DeviceRejectedError: If the device answers with a non-2xx status
            TransportError: If the request fails
        """
        self.set_parameters({identifier: value}, timeout)

    def set_parameters(self, values: Mapping, timeout: Optional[float] = None):
        """Write several parameters in one request.

        Values are sent as given; composite values must already be encoded.
        Success only means the device accepted the request.

        Args:
            values: Mapping of identifier to value, sent in iteration order
            timeout: Override for the client's request timeout

        Raises:
            ValueError: If ``values`` is empty
            AccessModeError: If any identifier names a read-only sensor
            DeviceRejectedError: If the device answers with a non-2xx status
            TransportError: If the request fails
        """
        if not values:
            raise ValueError("No parameters to set")

        for identifier in values:
            kind = ParameterKind.from_identifier(identifier)
            if kind is not None and not kind.writable:
                raise AccessModeError(f"Parameter {identifier} is read-only")

        assignments = [format_parameter(key, value) for key, value in values.items()]
        token = self._session.token
        if token is not None:
            assignments.insert(0, urlencode([("auth", token)]))

        response = self._get(WRITE_PATH, "&".join(assignments), timeout)
        if not _is_success(response):
            raise DeviceRejectedError(
                f"Device rejected write of {', '.join(values)}: status {response.status_code}",
                response.status_code,
            )

    def _read(self, path: str, timeout: Optional[float]) -> bytes:
        params = []
        token = self._session.token
        if token is not None:
            params.append(("auth", token))
        params.append(("rnd", generate_nonce(READ_NONCE_LENGTH)))

        response = self._get(path, urlencode(params), timeout)
        return response.content

    def _get(self, path: str, query: str, timeout: Optional[float]) -> requests.Response:
        """Send a GET request to the device.

        Args:
            path: Endpoint path
            query: Encoded query string
            timeout: Request timeout, None for the client default

        Returns:
            requests.Response: The device's response

        Raises:
            TransportError: If the request fails or times out
        """
        url = f"{self.base_url}{path}?{query}"
        try:
            response = self._http.get(url, timeout=timeout if timeout is not None else self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Request to {path} failed: {e}") from e

        logger.debug(f"GET {path}: status={response.status_code}, len={len(response.content)}")
        return response

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300
