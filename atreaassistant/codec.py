"""Value encodings used by the Atrea RD5 controller."""

from typing import Tuple, Union

# Sensor registers are unsigned 16-bit values holding tenths of a degree.
# 65036..65535 are two's complement negatives (-50.0..-0.1 C),
# 1..1300 are positives (0.1..130.0 C).
NEGATIVE_TEMPERATURE_MIN = 65036
POSITIVE_TEMPERATURE_MAX = 1300
REGISTER_MODULUS = 65536

MIN_TEMPERATURE = -50.0
MAX_TEMPERATURE = 130.0


def decode_temperature(raw: Union[int, float, str]) -> float:
    """Convert a raw temperature register to degrees Celsius.

    Values outside the defined domain (0, 1301..65035, or anything that does
    not fit in 16 bits) decode to ``0.0``, meaning "unknown reading".

    Args:
        raw: Register value as int, float or numeric string. Fractions are
            truncated.

    Returns:
        float: Temperature in degrees Celsius

    Raises:
        ValueError: If ``raw`` is a string that is not a number
    """
    value = int(float(raw))

    if NEGATIVE_TEMPERATURE_MIN <= value < REGISTER_MODULUS:
        return (value - REGISTER_MODULUS) / 10

    if 1 <= value <= POSITIVE_TEMPERATURE_MAX:
        return value / 10

    return 0.0


def encode_temperature(celsius: float) -> int:
    """Convert degrees Celsius to the raw register value.

    Args:
        celsius: Temperature between -50.0 and 130.0

    Returns:
        int: Raw 16-bit register value

    Raises:
        ValueError: If the temperature is outside the register's range
    """
    if not MIN_TEMPERATURE <= celsius <= MAX_TEMPERATURE:
        raise ValueError(
            f"Temperature {celsius} outside {MIN_TEMPERATURE}..{MAX_TEMPERATURE}"
        )

    tenths = int(round(celsius * 10))
    if tenths < 0:
        return tenths + REGISTER_MODULUS
    return tenths


def encode_ipv4(address: str) -> Tuple[int, int]:
    """Pack a dotted-quad address into the device's two 16-bit fields.

    ``low`` carries the first two octets and ``high`` the last two, each
    little-endian: ``low = o1 + o2 * 256``, ``high = o3 + o4 * 256``.

    Raises:
        ValueError: If ``address`` is not four canonical decimal octets in
            0..255 (no surrounding whitespace, no leading zeros)
    """
    parts = address.split(".")
    if len(parts) != 4:
        raise ValueError(f"Invalid IPv4 address: {address!r}")

    octets = []
    for part in parts:
        if not part.isascii() or not part.isdigit() or part != str(int(part)):
            raise ValueError(f"Invalid IPv4 address: {address!r}")
        octet = int(part)
        if octet > 255:
            raise ValueError(f"Octet out of range in {address!r}: {octet}")
        octets.append(octet)

    low = octets[0] + (octets[1] << 8)
    high = octets[2] + (octets[3] << 8)
    return low, high


def decode_ipv4(low: int, high: int) -> str:
    """Unpack two 16-bit fields into a dotted-quad address.

    Negative readings (signed registers) are taken modulo 2**16.
    """
    low %= REGISTER_MODULUS
    high %= REGISTER_MODULUS

    octets = (
        low & 0xFF,
        (low >> 8) & 0xFF,
        high & 0xFF,
        (high >> 8) & 0xFF,
    )
    return ".".join(str(octet) for octet in octets)
