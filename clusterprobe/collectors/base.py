"""Base check interface for agent checks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from ..data.models import CheckMessage, SystemInfo
    from ..server.config import Config


class BaseCheck(ABC):
    """Abstract base class for agent checks.

    The owning orchestrator calls ``init`` once and then ``run`` periodically.
    ``init`` must complete before the first ``run``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this check (e.g. 'elastic')."""
        pass

    @property
    def real_time(self) -> bool:
        """Whether this check only runs in low-latency real-time mode."""
        return False

    @abstractmethod
    def init(self, config: "Config", sys_info: Optional["SystemInfo"]) -> None:
        """Prepare the check. Failures are logged, not raised."""
        pass

    @abstractmethod
    def run(self, config: "Config", group_id: int) -> List["CheckMessage"]:
        """Execute one iteration of the check.

        Returns:
            List of report messages produced by this run.

        Raises:
            CheckError: If the check cannot run.
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this check is able to run."""
        pass

    def get_status(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "real_time": self.real_time,
            "available": self.is_available(),
        }


class CheckError(Exception):
    """Exception raised when a check fails."""

    def __init__(self, check_name: str, message: str, cause: Optional[Exception] = None):
        self.check_name = check_name
        self.cause = cause
        super().__init__(f"[{check_name}] {message}")


class CheckNotConfiguredError(CheckError):
    """Raised when a check is run without a usable client."""
