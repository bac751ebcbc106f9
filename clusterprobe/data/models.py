"""Data models for check state and reporting.

1. CLUSTER STATUS
   - Last observed identity of the local Elasticsearch node and its cluster
   - Leadership flag is a point-in-time observation (see ``leader_checked_at``)

2. SYSTEM INFO
   - Static description of the host the agent runs on

3. CHECK MESSAGES
   - Structured report messages returned from a check run
"""

from __future__ import annotations

import os
import platform
import socket
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


UNKNOWN = "unknown"


def _iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.replace(microsecond=0).isoformat()


@dataclass
class ClusterStatus:
    """Last observed state of the local node and its cluster."""

    node_name: str = ""
    cluster_name: str = ""
    cluster_uuid: str = ""
    is_leader: bool = False
    last_run: Optional[datetime] = None
    leader_checked_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "node_name": self.node_name,
            "cluster_name": self.cluster_name,
            "cluster_uuid": self.cluster_uuid,
            "is_leader": self.is_leader,
            "last_run": _iso(self.last_run),
            "leader_checked_at": _iso(self.leader_checked_at),
        }


@dataclass
class SystemInfo:
    """Description of the host running the agent."""

    hostname: str
    platform: str
    python_version: str
    cpu_count: int = 0

    @classmethod
    def collect(cls) -> "SystemInfo":
        """Build system info for the current host."""
        return cls(
            hostname=socket.gethostname(),
            platform=platform.platform(),
            python_version=platform.python_version(),
            cpu_count=os.cpu_count() or 0,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hostname": self.hostname,
            "platform": self.platform,
            "python_version": self.python_version,
            "cpu_count": self.cpu_count,
        }


@dataclass
class CheckMessage:
    """A single structured report produced by a check run."""

    check: str
    group_id: int
    payload: Dict[str, Any] = field(default_factory=dict)
    observed_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "check": self.check,
            "group_id": self.group_id,
            "payload": self.payload,
            "observed_at": _iso(self.observed_at),
        }
