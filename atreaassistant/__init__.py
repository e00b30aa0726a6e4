"""Atrea Assistant - Control Atrea RD5 ventilation units."""

from .client import AtreaClient
from .catalog import (
    CommonParameters,
    current_temperature,
    extract_common_parameters,
    get_parameter_name,
    outdoor_temperature,
)
from .codec import decode_ipv4, decode_temperature, encode_ipv4, encode_temperature
from .config import DeviceConfig, load_config
from .controls import SystemControl, TemperatureControl
from .protocol import ParameterKind, format_parameter
from .session import SessionManager
from .snapshot import Snapshot, parse_snapshot
from .exceptions import (
    AtreaException,
    TransportError,
    AuthenticationError,
    MalformedDocumentError,
    DeviceRejectedError,
    AccessModeError,
    ConfigurationError,
)

__version__ = "0.1.0"
__all__ = [
    "AtreaClient",
    "Snapshot",
    "parse_snapshot",
    "ParameterKind",
    "format_parameter",
    "decode_temperature",
    "encode_temperature",
    "encode_ipv4",
    "decode_ipv4",
    "get_parameter_name",
    "current_temperature",
    "outdoor_temperature",
    "CommonParameters",
    "extract_common_parameters",
    "TemperatureControl",
    "SystemControl",
    "SessionManager",
    "DeviceConfig",
    "load_config",
    "AtreaException",
    "TransportError",
    "AuthenticationError",
    "MalformedDocumentError",
    "DeviceRejectedError",
    "AccessModeError",
    "ConfigurationError",
]
