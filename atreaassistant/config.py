"""Loading of device settings from a ``config.env`` file."""

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

from .exceptions import ConfigurationError
from .protocol import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.env"


@dataclass(frozen=True)
class DeviceConfig:
    """Connection settings for one Atrea unit."""
    host: str = ""
    password: str = ""
    timeout: float = DEFAULT_TIMEOUT


def load_config(path: str = DEFAULT_CONFIG_PATH, defaults: Optional[DeviceConfig] = None) -> DeviceConfig:
    """Read ``KEY=VALUE`` settings from a file.

    Recognised keys are ``DEVICE_IP``, ``DEVICE_PASSWORD`` and
    ``DEVICE_TIMEOUT``. Blank lines, ``#`` comments and unknown keys are
    ignored. A missing file yields the defaults.

    Args:
        path: Path to the settings file (default: "config.env")
        defaults: Values used for keys the file does not set

    Returns:
        DeviceConfig: The merged settings

    Raises:
        ConfigurationError: If a line or value cannot be understood
    """
    config = defaults if defaults is not None else DeviceConfig()

    if not os.path.exists(path):
        logger.info(f"{path} not found, using default configuration")
        return config

    with open(path, "r", encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                raise ConfigurationError(f"{path}:{lineno}: expected KEY=VALUE, got {line!r}")

            key, value = (part.strip() for part in line.split("=", 1))

            if key == "DEVICE_IP":
                config = replace(config, host=value)
            elif key == "DEVICE_PASSWORD":
                config = replace(config, password=value)
            elif key == "DEVICE_TIMEOUT":
                try:
                    timeout = float(value)
                except ValueError:
                    raise ConfigurationError(f"{path}:{lineno}: invalid timeout {value!r}")
                if timeout <= 0:
                    raise ConfigurationError(f"{path}:{lineno}: timeout must be positive")
                config = replace(config, timeout=timeout)

    return config
