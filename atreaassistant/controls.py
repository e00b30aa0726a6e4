"""Convenience wrappers around common parameter writes."""

from datetime import date

from .catalog import (
    CLEAR_MODE,
    DAY,
    DESIRED_TEMPERATURE,
    MONTH,
    SYSTEM_RESET,
    TEMPERATURE_MODE,
    TIMEZONE_OFFSET,
    YEAR,
)


class TemperatureControl:
    """Temperature settings of an Atrea unit."""

    def __init__(self, client):
        self.client = client

    def set_desired_temperature(self, temperature: float, mode: int):
        """Set the target temperature together with the control mode.

        Args:
            temperature: Target in whole degrees (fractions are truncated)
            mode: Control mode, e.g. 0 (off), 1 (heating), 2 (cooling)
        """
        self.client.set_parameters({
            DESIRED_TEMPERATURE: int(temperature),
            TEMPERATURE_MODE: mode,
        })


class SystemControl:
    """System commands and clock settings of an Atrea unit."""

    def __init__(self, client):
        self.client = client

    def reset(self):
        """Perform a system reset."""
        self.client.set_parameter(SYSTEM_RESET, 1)

    def clear_mode(self):
        """Clear the current mode."""
        self.client.set_parameter(CLEAR_MODE, 1)

    def set_timezone(self, offset_hours: int):
        """Set the timezone offset in hours from UTC."""
        self.client.set_parameter(TIMEZONE_OFFSET, offset_hours)

    def set_system_time(self, when: date):
        """Set the device date from a date or datetime."""
        self.client.set_parameters({
            YEAR: when.year,
            MONTH: when.month,
            DAY: when.day,
        })
