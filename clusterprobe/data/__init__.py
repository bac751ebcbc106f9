"""Data layer - status records, system info and SNMP value helpers."""

from .models import CheckMessage, ClusterStatus, SystemInfo
from .snmp_values import SnmpValues, parse_int64

__all__ = [
    "CheckMessage",
    "ClusterStatus",
    "SystemInfo",
    "SnmpValues",
    "parse_int64",
]
