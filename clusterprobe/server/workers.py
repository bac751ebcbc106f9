"""Background worker for periodic check execution."""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

from ..collectors.base import BaseCheck, CheckError
from ..data.models import CheckMessage
from .config import Config

logger = logging.getLogger(__name__)


class CheckWorker(threading.Thread):
    """Runs an initialized check every ``interval`` seconds."""

    daemon = True

    def __init__(self, check: BaseCheck, config: Config, interval_seconds: Optional[int] = None):
        super().__init__(name=f"{check.name}-check-worker")
        self.check = check
        self.config = config
        if interval_seconds is None:
            interval_seconds = config.get_check_config(check.name).interval
        self.interval = max(1, int(interval_seconds))
        self._stop_event = threading.Event()
        self._state_lock = threading.Lock()
        self.group_id = 0
        self.last_error: Optional[str] = None
        self.last_messages: List[CheckMessage] = []
        self.consecutive_failures = 0

    def run(self) -> None:
        logger.info("[%s] Starting (interval=%ss)", self.check.name, self.interval)
        while not self._stop_event.is_set():
            self.run_once()
            if self._stop_event.wait(self.interval):
                break
        logger.info("[%s] Stopped", self.check.name)

    def run_once(self) -> bool:
        """Run the check a single time.

        Returns:
            True if the run succeeded.
        """
        self.group_id += 1
        try:
            messages = self.check.run(self.config, self.group_id)
        except CheckError as exc:
            with self._state_lock:
                self.consecutive_failures += 1
                self.last_error = str(exc)
            logger.error(
                "[%s] Run failed (failure %d): %s",
                self.check.name,
                self.consecutive_failures,
                exc,
            )
            return False
        except Exception as exc:
            with self._state_lock:
                self.consecutive_failures += 1
                self.last_error = str(exc)
            logger.exception(
                "[%s] Run failed unexpectedly (failure %d)",
                self.check.name,
                self.consecutive_failures,
            )
            return False

        with self._state_lock:
            self.consecutive_failures = 0
            self.last_error = None
            self.last_messages = messages
        return True

    def stop(self) -> None:
        self._stop_event.set()

    def get_status(self) -> Dict[str, Any]:
        with self._state_lock:
            return {
                "check": self.check.name,
                "group_id": self.group_id,
                "last_error": self.last_error,
                "consecutive_failures": self.consecutive_failures,
                "message_count": len(self.last_messages),
            }
