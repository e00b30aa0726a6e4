"""Parameter names and derived readings for the Atrea RD5."""

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from .codec import decode_temperature

# Names follow the RD5 parameter documentation.
PARAMETER_NAMES = {
    # System status and mode
    "I00000": "System Status",
    "I00001": "Mode",
    "I00002": "Temperature",
    "I00004": "Year",

    # Temperature sensors
    "I10211": "Outdoor Air Temperature (T-ODA)",
    "I10212": "Supply Air Temperature (T-SUP)",
    "I10213": "Extract Air Temperature (T-ETA)",
    "I10214": "Exhaust Air Temperature (T-EHA)",
    "I10215": "Indoor Air Temperature (T-IDA)",
    "I10222": "Indoor Air Temperature (alt)",
    "I10224": "Extract Air Temperature (alt)",
    "I10225": "Extract Air Temperature (alt)",
    "I10249": "Supply Air Temperature (alt)",
    "I10275": "Outdoor Air Temperature (alt)",
    "I10281": "Outdoor Air Temperature (alt)",
    "I10282": "Outdoor Air Temperature (alt)",

    # Fans
    "I10230": "Supply Fan Speed",
    "I10244": "Extract Fan Speed",
    "I10251": "Supply Air Pressure",
    "I10262": "Extract Air Pressure",
    "I10265": "Fan Status",

    # Filter
    "I12015": "Filter Status",
    "I12020": "Filter Hours",

    # Control settings
    "H10715": "Operating Mode",
    "H11010": "Temperature Setpoint Mode 1",
    "H11017": "Temperature Control Mode",
    "H11021": "Desired Temperature",
    "H11400": "Timezone Offset",
    "H11406": "System Uptime",

    # Date
    "H10905": "Year",
    "H10906": "Month",
    "H10907": "Day",

    # Network
    "H12200": "Network DHCP",
    "H12201": "IP Address",
    "H12202": "Subnet Mask",
    "H12203": "Gateway",
    "H12204": "DNS Server",

    # Commands
    "C10005": "System Reset",
    "C10007": "Clear Mode",
}

# Firmware variants report the same sensor under different identifiers;
# candidates are tried in order.
CURRENT_TEMPERATURE_CANDIDATES = ("I10215", "I10222", "I10224", "I10225", "I10249")
OUTDOOR_TEMPERATURE_CANDIDATES = ("I10211", "I10275", "I10282", "I10281")

READING_CANDIDATES = {
    "current_temperature": CURRENT_TEMPERATURE_CANDIDATES,
    "outdoor_temperature": OUTDOOR_TEMPERATURE_CANDIDATES,
}

OPERATING_MODE = "H10715"
DESIRED_TEMPERATURE = "H11021"
TEMPERATURE_MODE = "H11017"
TIMEZONE_OFFSET = "H11400"
YEAR = "H10905"
MONTH = "H10906"
DAY = "H10907"
SYSTEM_RESET = "C10005"
CLEAR_MODE = "C10007"


def get_parameter_name(identifier: str) -> str:
    """Return the human-readable name of a parameter, or the identifier itself."""
    return PARAMETER_NAMES.get(identifier, identifier)


def first_present_temperature(snapshot: Mapping, candidates: Sequence[str]) -> float:
    """Decode the first candidate present in the snapshot.

    Candidates whose value is not a number are skipped.

    Returns:
        float: Temperature in degrees Celsius, 0.0 if no candidate is usable
    """
    for identifier in candidates:
        raw = snapshot.get(identifier)
        if raw is None:
            continue
        try:
            return decode_temperature(raw)
        except (ValueError, OverflowError):
            continue
    return 0.0


def current_temperature(
    snapshot: Mapping, candidates: Sequence[str] = CURRENT_TEMPERATURE_CANDIDATES
) -> float:
    """Indoor air temperature in degrees Celsius."""
    return first_present_temperature(snapshot, candidates)


def outdoor_temperature(
    snapshot: Mapping, candidates: Sequence[str] = OUTDOOR_TEMPERATURE_CANDIDATES
) -> float:
    """Outdoor air temperature in degrees Celsius."""
    return first_present_temperature(snapshot, candidates)


@dataclass
class CommonParameters:
    """Frequently used settings read from a snapshot."""
    operating_mode: Optional[str] = None
    desired_temperature: Optional[float] = None
    temperature_mode: Optional[int] = None
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None


def _number(snapshot: Mapping, identifier: str, convert):
    raw = snapshot.get(identifier)
    if raw is None:
        return None
    try:
        return convert(raw)
    except ValueError:
        return None


def extract_common_parameters(snapshot: Mapping) -> CommonParameters:
    """Collect common settings; absent or unparsable entries stay None."""
    return CommonParameters(
        operating_mode=snapshot.get(OPERATING_MODE),
        desired_temperature=_number(snapshot, DESIRED_TEMPERATURE, float),
        temperature_mode=_number(snapshot, TEMPERATURE_MODE, int),
        year=_number(snapshot, YEAR, int),
        month=_number(snapshot, MONTH, int),
        day=_number(snapshot, DAY, int),
    )
