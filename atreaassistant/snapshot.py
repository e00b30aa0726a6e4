"""Parsing of the RD5 XML parameter dump."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional, Union
import xml.etree.ElementTree as ET

from .exceptions import MalformedDocumentError

ROOT_TAG = "RD5WEB"
DEVICE_TAG = "RD5"
ITEM_TAG = "O"
ID_ATTRIBUTE = "I"
VALUE_ATTRIBUTE = "V"

# Merge order; a later section overwrites an identifier seen in an earlier one.
SECTIONS = ("INTEGER_R", "STRING_R", "FLOAT_R", "ENUM_R")


class Snapshot(Mapping):
    """Immutable mapping of parameter identifier to raw string value."""

    def __init__(self, items: Optional[Mapping] = None):
        self._items = MappingProxyType(dict(items or {}))

    def __getitem__(self, key: str) -> str:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Snapshot({len(self._items)} parameters)"

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """Return a parameter as int, or ``default`` if it is absent.

        Raises:
            ValueError: If the value is present but not an integer
        """
        if key not in self._items:
            return default
        return int(self._items[key])

    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        """Return a parameter as float, or ``default`` if it is absent.

        Raises:
            ValueError: If the value is present but not a number
        """
        if key not in self._items:
            return default
        return float(self._items[key])


def parse_snapshot(document: Union[bytes, str]) -> Snapshot:
    """Parse the device's ``xml.xml`` document into a Snapshot.

    Items are read from the integer, string, float and enum sections in that
    order. Values are kept as the text the device sent.

    Args:
        document: Raw response body

    Returns:
        Snapshot: Flat identifier to value mapping (possibly empty)

    Raises:
        MalformedDocumentError: If the document is not well-formed XML or its
            root element is not ``RD5WEB``
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise MalformedDocumentError(f"Failed to parse parameter dump: {e}") from e

    if root.tag != ROOT_TAG:
        raise MalformedDocumentError(
            f"Unexpected root element: expected {ROOT_TAG}, got {root.tag}"
        )

    items: Dict[str, str] = {}
    for section in SECTIONS:
        for item in root.iterfind(f"{DEVICE_TAG}/{section}/{ITEM_TAG}"):
            identifier = item.get(ID_ATTRIBUTE)
            if not identifier:
                continue
            items[identifier] = item.get(VALUE_ATTRIBUTE, "")

    return Snapshot(items)
