"""Tests for data models."""

from datetime import datetime

from clusterprobe.data.models import CheckMessage, ClusterStatus, SystemInfo


class TestClusterStatus:
    def test_defaults(self):
        status = ClusterStatus()
        assert status.node_name == ""
        assert status.cluster_name == ""
        assert status.cluster_uuid == ""
        assert status.is_leader is False
        assert status.last_run is None

    def test_to_dict(self):
        status = ClusterStatus(
            node_name="i-ABC",
            cluster_name="dd-test",
            cluster_uuid="XYZ",
            is_leader=True,
            last_run=datetime(2026, 1, 22, 12, 0, 0, 123456),
        )
        data = status.to_dict()

        assert data["node_name"] == "i-ABC"
        assert data["is_leader"] is True
        assert data["last_run"] == "2026-01-22T12:00:00"
        assert data["leader_checked_at"] is None


class TestSystemInfo:
    def test_collect(self):
        info = SystemInfo.collect()
        assert info.hostname
        assert info.python_version.count(".") == 2
        assert info.to_dict()["cpu_count"] >= 0


class TestCheckMessage:
    def test_to_dict(self):
        message = CheckMessage(
            check="elastic",
            group_id=3,
            payload={"shards": 0},
            observed_at=datetime(2026, 1, 22, 12, 0, 0),
        )
        assert message.to_dict() == {
            "check": "elastic",
            "group_id": 3,
            "payload": {"shards": 0},
            "observed_at": "2026-01-22T12:00:00",
        }
