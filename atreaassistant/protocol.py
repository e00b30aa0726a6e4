"""Protocol definitions for Atrea RD5 web communication."""

from enum import Enum
from typing import Optional, Union
from urllib.parse import quote
import hashlib
import random
import re

from .exceptions import AuthenticationError

LOGIN_PATH = "/config/login.cgi"
DATA_PATH = "/config/xml.xml"
ALARMS_PATH = "/config/alarms.xml"
WRITE_PATH = "/config/xml.cgi"

DEFAULT_TIMEOUT = 10.0

LOGIN_NONCE_LENGTH = 3
READ_NONCE_LENGTH = 2

# The login digest is computed over CR LF followed by the password.
MAGIC_PREFIX = b"\r\n"

REJECTED_TOKENS = ("0", "denied")
_TOKEN_PATTERN = re.compile(r"[0-9]+")
_ROOT_OPEN_PATTERN = re.compile(r"<root(?=[\s>])")


class ParameterKind(Enum):
    """Access class of a parameter, encoded in its identifier's prefix."""
    SENSOR = "I"   # Read-only measurement
    SETTING = "H"  # Read/write holding value
    COMMAND = "C"  # Write-only command

    @classmethod
    def from_identifier(cls, identifier: str) -> Optional["ParameterKind"]:
        """Derive the kind from an identifier such as ``"H11021"``.

        Returns:
            The matching kind, or None when the prefix is not recognised
        """
        if not identifier:
            return None
        try:
            return cls(identifier[0].upper())
        except ValueError:
            return None

    @property
    def readable(self) -> bool:
        """Informational only; reads fetch the whole document unfiltered."""
        return self is not ParameterKind.COMMAND

    @property
    def writable(self) -> bool:
        """Checked by the client before any parameter write."""
        return self is not ParameterKind.SENSOR


def compute_magic(password: str) -> str:
    """Compute the login digest for a password.

    Args:
        password: Device password as typed in the web front-end

    Returns:
        str: Lowercase hex MD5 of CR LF + password
    """
    return hashlib.md5(MAGIC_PREFIX + password.encode("utf-8")).hexdigest()


def generate_nonce(length: int = LOGIN_NONCE_LENGTH) -> str:
    """Generate the random decimal ``rnd`` value sent with requests."""
    if length < 1:
        raise ValueError("Nonce length must be at least 1")
    return "".join(random.choice("0123456789") for _ in range(length))


def extract_token(body: Union[str, bytes]) -> str:
    """Extract the session token from a login response.

    The device answers with ``<root lng="0">15736</root>``; the token is the
    text between the opening ``<root ...>`` tag and ``</root>``.

    Raises:
        AuthenticationError: If the response holds no usable token
    """
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")

    root_open = _ROOT_OPEN_PATTERN.search(body)
    if root_open is None:
        raise AuthenticationError("Login response has no <root> element")

    tag_end = body.find(">", root_open.end())
    end = body.find("</root>", tag_end) if tag_end != -1 else -1
    if tag_end == -1 or end == -1 or tag_end + 1 > end:
        raise AuthenticationError("Login response has a malformed <root> element")

    token = body[tag_end + 1:end].strip()
    if not token or token in REJECTED_TOKENS:
        raise AuthenticationError(f"Device denied login: {token or 'empty response'}")
    if not _TOKEN_PATTERN.fullmatch(token):
        raise AuthenticationError(f"Login response token is not numeric: {token!r}")

    return token


def format_parameter(key: str, value) -> str:
    """Render one ``KEY=VALUE`` assignment for the write endpoint."""
    if isinstance(value, bool):
        value = int(value)
    return f"{quote(str(key), safe='')}={quote(str(value), safe='')}"
