"""Session token management for Atrea RD5 communication."""

import threading
import time
from typing import Optional


class SessionState:
    """Holds the session token issued by the device.

    The token is opaque; it is replaced as a whole after each successful
    login and read by every authenticated request.
    """

    def __init__(self):
        """Initialize an unauthenticated session."""
        self._token: Optional[str] = None
        self._issued_at: Optional[float] = None
        self._lock = threading.Lock()

    def replace(self, token: str):
        """Install a new session token.

        Args:
            token: Token returned by the device

        Raises:
            ValueError: If the token is empty
        """
        if not token:
            raise ValueError("Session token must not be empty")
        with self._lock:
            self._token = token
            self._issued_at = time.monotonic()

    def clear(self):
        """Forget the current session token."""
        with self._lock:
            self._token = None
            self._issued_at = None

    @property
    def token(self) -> Optional[str]:
        """Get the current token, or None when unauthenticated."""
        with self._lock:
            return self._token

    @property
    def is_authenticated(self) -> bool:
        with self._lock:
            return self._token is not None

    @property
    def age(self) -> float:
        """Get seconds elapsed since the token was installed.

        Returns:
            float: Session age, 0.0 when unauthenticated
        """
        with self._lock:
            if self._issued_at is None:
                return 0.0
            return time.monotonic() - self._issued_at


class SessionManager:
    """Logs in on demand with a stored password.

    The device keeps sessions alive until it restarts, so there is no
    refresh timer; ``ensure_authenticated`` only logs in when no session
    exists.
    """

    def __init__(self, client, password: str):
        self.client = client
        self._password = password
        self._lock = threading.Lock()

    def ensure_authenticated(self) -> str:
        """Log in unless the client already holds a session.

        Concurrent callers share one login.

        Returns:
            str: The current session token

        Raises:
            AuthenticationError: If the login is rejected
        """
        with self._lock:
            if self.client.is_authenticated():
                return self.client.session_id
            return self.client.authenticate(self._password)

    def logout(self):
        """Drop the client's session."""
        self.client.logout()

    @property
    def session_age(self) -> float:
        return self.client.session_age
