"""Pytest configuration and shared fixtures."""

import pytest
from unittest.mock import MagicMock

from clusterprobe.server.config import CheckConfig, Config


def _make_response(payload=None, invalid=False):
    """Build a mock requests response carrying a JSON body."""
    response = MagicMock()
    if invalid:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def sample_info_payload():
    """Sample GET / response from an Elasticsearch node."""
    return {
        "name": "i-ABC",
        "cluster_name": "dd-test",
        "cluster_uuid": "XYZ",
        "version": {
            "number": "6.8.23",
            "build_flavor": "default",
            "lucene_version": "7.7.3",
        },
        "tagline": "You Know, for Search",
    }


@pytest.fixture
def sample_master_payload():
    """Sample GET /_cat/master?format=json response."""
    return [
        {
            "id": "8iGt13GbTR63qMBN4F4imQ",
            "host": "172.21.119.104",
            "ip": "172.21.119.104",
            "node": "i-ABC",
        }
    ]


@pytest.fixture
def config():
    """Config with the placeholder delay disabled."""
    return Config(checks={"elastic": CheckConfig(extra={"run_delay": 0})})


@pytest.fixture
def es_client(sample_info_payload, sample_master_payload):
    """Mock Elasticsearch client answering both routes."""
    client = MagicMock()
    client.info.side_effect = lambda: _make_response(sample_info_payload)
    client.cat_master.side_effect = lambda fmt="json": _make_response(sample_master_payload)
    return client


@pytest.fixture
def make_response():
    """Factory for mock JSON responses."""
    return _make_response
