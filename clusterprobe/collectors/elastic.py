"""Elasticsearch cluster status check.

Determines the local node's identity and whether it is the elected master,
so agents on every node of a cluster can tell which one is the leader.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

import requests

from ..data.models import UNKNOWN, CheckMessage, ClusterStatus, SystemInfo
from ..server.config import CheckConfig, Config
from .base import BaseCheck, CheckError, CheckNotConfiguredError
from .es_client import ElasticsearchClient, json_path, read_json

logger = logging.getLogger(__name__)

CHECK_NAME = "elastic"
DEFAULT_RUN_DELAY = 1.0

ClientFactory = Callable[[CheckConfig], ElasticsearchClient]


def _run_delay(check_config: CheckConfig) -> float:
    """Placeholder delay in seconds; invalid values fall back to the default."""
    try:
        delay = float(check_config.get("run_delay", DEFAULT_RUN_DELAY))
    except (TypeError, ValueError):
        logger.warning("invalid run_delay %r, using %s", check_config.get("run_delay"), DEFAULT_RUN_DELAY)
        return DEFAULT_RUN_DELAY
    if not math.isfinite(delay):
        return DEFAULT_RUN_DELAY
    return max(0.0, delay)


class ElasticCheck(BaseCheck):
    """Collects cluster identity and leader status from the local node.

    Shard collection is not implemented yet; ``run`` returns no messages.
    """

    def __init__(self, client_factory: ClientFactory = ElasticsearchClient.from_config):
        self._client_factory = client_factory
        self._lock = threading.Lock()
        self._es: Optional[ElasticsearchClient] = None
        self._status = ClusterStatus()
        self.sys_info: Optional[SystemInfo] = None

    @property
    def name(self) -> str:
        return CHECK_NAME

    @property
    def real_time(self) -> bool:
        return False

    @property
    def status(self) -> ClusterStatus:
        return self._status

    def is_available(self) -> bool:
        return self._es is not None

    def init(self, config: Config, sys_info: Optional[SystemInfo]) -> None:
        self.sys_info = sys_info
        check_config = config.get_check_config(self.name)

        logger.info("elasticsearch client version: requests %s", requests.__version__)

        try:
            client = self._client_factory(check_config)
        except CheckError as exc:
            logger.error("failed to create elasticsearch client: %s", exc)
            return

        self._es = client
        self._get_cluster_info()
        self._update_leader()

        logger.info(
            "elasticsearch node: %s (leader: %s), elastic-check initialized",
            self._status.node_name,
            self._status.is_leader,
        )

    def _get_cluster_info(self) -> None:
        try:
            response = self._es.info()
        except requests.RequestException as exc:
            logger.error("failed to get elasticsearch info: %s", exc)
            return

        # {"name": "i-ABC", "cluster_name": "dd-test", "cluster_uuid": "HckBgZ...", "version": {...}}
        document = read_json(response)

        self._status.cluster_name = json_path(document, "cluster_name")
        if not self._status.cluster_name:
            self._status.cluster_name = UNKNOWN
            logger.warning("unable to find elasticsearch cluster name")

        self._status.cluster_uuid = json_path(document, "cluster_uuid")
        if not self._status.cluster_uuid:
            self._status.cluster_uuid = UNKNOWN
            logger.warning("unable to find elasticsearch cluster UUID")

        self._status.node_name = json_path(document, "name")
        if not self._status.node_name:
            self._status.node_name = UNKNOWN
            logger.warning("unable to find elasticsearch node name")

        logger.info("elasticsearch cluster: %s (%s)", self._status.cluster_name, self._status.cluster_uuid)

    def _is_leader(self) -> bool:
        """Compare the elected master's name with our own node name.

        A single observation: during a split brain several nodes may each
        see themselves reported as master.
        """
        try:
            response = self._es.cat_master(fmt="json")
        except requests.RequestException as exc:
            logger.warning("failed to get elasticsearch leader info: %s", exc)
            return False

        # [{"id": "8iGt13GbTR63qMBN4F4imQ", "host": "172.21.119.104", "ip": "172.21.119.104", "node": "i-ABDE"}]
        document = read_json(response)
        leader_node = json_path(document, "0.node")
        if not leader_node:
            logger.warning("unable to find elasticsearch leader, defaulting to false")
            return False

        return leader_node == self._status.node_name

    def _update_leader(self) -> None:
        self._status.is_leader = self._is_leader()
        self._status.leader_checked_at = datetime.now()

    def run(self, config: Config, group_id: int) -> List[CheckMessage]:
        with self._lock:
            if self._es is None:
                raise CheckNotConfiguredError(self.name, "no elasticsearch client configured")

            check_config = config.get_check_config(self.name)
            if check_config.get("refresh_leadership", True):
                was_leader = self._status.is_leader
                self._update_leader()
                if was_leader != self._status.is_leader:
                    logger.info(
                        "elasticsearch node %s leadership changed: %s -> %s",
                        self._status.node_name,
                        was_leader,
                        self._status.is_leader,
                    )

            started = time.monotonic()
            self._status.last_run = datetime.now()
            # Placeholder for shard collection
            time.sleep(_run_delay(check_config))

            logger.info("Collected %d shards in %.3fs", 0, time.monotonic() - started)
            return []

    def get_status(self) -> Dict[str, Any]:
        status = super().get_status()
        status["cluster"] = self._status.to_dict()
        return status

    def close(self) -> None:
        if self._es is not None:
            self._es.close()
            self._es = None
