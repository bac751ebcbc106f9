"""Helpers for reading values out of an SNMP result map.

SNMP poll results arrive as a map of OID -> value where the producer may hand
back either a float or a numeric string for the same kind of metric.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Tuple

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int64(text: str) -> int:
    """Parse a base-10 signed 64-bit integer.

    Stricter than ``int()``: no surrounding whitespace, no underscores,
    and the result must fit in 64 bits.

    Raises:
        ValueError: If the text is not a valid in-range integer.
    """
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    value = int(text, 10)
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(f"integer out of 64-bit range: {text!r}")
    return value


class SnmpValues:
    """Read-only view over an OID -> value map."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self.values = values if values is not None else {}

    def get_float64(self, oid: str) -> Tuple[float, bool]:
        """Look up an OID and coerce it to a float.

        Returns:
            Tuple of (value, found). ``found`` is True whenever the OID is
            present, even if the value could not be converted; in that case
            the value is 0.0.
        """
        if oid not in self.values:
            return 0.0, False

        value = self.values[oid]
        if isinstance(value, float):
            return value, True
        if isinstance(value, str):
            try:
                return float(parse_int64(value)), True
            except ValueError:
                return 0.0, True
        return 0.0, True

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, oid: object) -> bool:
        return oid in self.values
