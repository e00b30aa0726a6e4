"""Custom exceptions for Atrea Assistant."""


class AtreaException(Exception):
    """Base exception for Atrea Assistant."""
    pass


class TransportError(AtreaException):
    """Exception raised when the HTTP request to the device fails."""
    pass


class AuthenticationError(AtreaException):
    """Exception raised when the device rejects a login attempt."""
    pass


class MalformedDocumentError(AtreaException):
    """Exception raised when a parameter dump cannot be parsed."""
    pass


class DeviceRejectedError(AtreaException):
    """Exception raised when the device answers a write with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class AccessModeError(AtreaException):
    """Exception raised when writing to a read-only parameter."""
    pass


class ConfigurationError(AtreaException):
    """Exception raised when a configuration file cannot be understood."""
    pass
