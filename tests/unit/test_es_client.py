"""Tests for the Elasticsearch REST client wrapper."""

import pytest
from unittest.mock import MagicMock, patch

from clusterprobe.collectors.base import CheckError
from clusterprobe.collectors.es_client import (
    DEFAULT_URL,
    ElasticsearchClient,
    json_path,
    read_json,
)
from clusterprobe.server.config import CheckConfig


class TestJsonPath:
    def test_top_level_field(self):
        assert json_path({"cluster_name": "dd-test"}, "cluster_name") == "dd-test"

    def test_list_index(self):
        assert json_path([{"node": "i-ABC"}, {"node": "i-DEF"}], "0.node") == "i-ABC"
        assert json_path([{"node": "i-ABC"}, {"node": "i-DEF"}], "1.node") == "i-DEF"

    def test_nested_field(self):
        assert json_path({"version": {"number": "6.8.23"}}, "version.number") == "6.8.23"

    def test_missing(self):
        assert json_path({}, "cluster_name") == ""
        assert json_path([], "0.node") == ""
        assert json_path({"a": 1}, "0.node") == ""
        assert json_path(None, "name") == ""

    def test_null_value(self):
        assert json_path({"name": None}, "name") == ""

    def test_scalars(self):
        assert json_path({"n": 3}, "n") == "3"
        assert json_path({"b": False}, "b") == "false"


class TestReadJson:
    def test_returns_body_and_closes(self):
        response = MagicMock()
        response.json.return_value = {"name": "i-ABC"}
        assert read_json(response) == {"name": "i-ABC"}
        response.__exit__.assert_called_once()

    def test_invalid_body(self):
        response = MagicMock()
        response.json.side_effect = ValueError("Expecting value")
        assert read_json(response) is None
        response.__exit__.assert_called_once()


class TestElasticsearchClient:
    def test_defaults(self):
        client = ElasticsearchClient()
        assert client.url == "http://localhost:9200"
        assert client.retries == 0

    @pytest.mark.parametrize("url", ["localhost:9200", "ftp://es:21", "http://", ""])
    def test_invalid_url(self, url):
        with pytest.raises(CheckError):
            ElasticsearchClient(url=url)

    @pytest.mark.parametrize("url", ["http://[::1:9200", 9200, None])
    def test_malformed_url_raises_check_error(self, url):
        with pytest.raises(CheckError):
            ElasticsearchClient(url=url)

    def test_non_numeric_retries(self):
        with pytest.raises(CheckError) as exc_info:
            ElasticsearchClient(retries="three")
        assert isinstance(exc_info.value.cause, ValueError)

    def test_trailing_slash_stripped(self):
        assert ElasticsearchClient(url="http://es-1:9200/").url == "http://es-1:9200"

    def test_from_config_url(self, monkeypatch):
        monkeypatch.setenv("ELASTICSEARCH_URL", "http://env:9200")
        client = ElasticsearchClient.from_config(
            CheckConfig(timeout=5, extra={"url": "https://es-1:9200", "retries": 2, "verify": False})
        )
        assert client.url == "https://es-1:9200"
        assert client.timeout == 5
        assert client.retries == 2
        assert client.verify is False

    def test_from_config_env(self, monkeypatch):
        monkeypatch.setenv("ELASTICSEARCH_URL", "http://es-a:9200, http://es-b:9200")
        client = ElasticsearchClient.from_config(CheckConfig())
        assert client.url == "http://es-a:9200"

    def test_from_config_default(self, monkeypatch):
        monkeypatch.delenv("ELASTICSEARCH_URL", raising=False)
        client = ElasticsearchClient.from_config(CheckConfig())
        assert client.url == DEFAULT_URL

    def test_session_has_no_retries_by_default(self):
        client = ElasticsearchClient()
        session = client._get_session()
        adapter = session.get_adapter("http://localhost:9200/")
        assert adapter.max_retries.total == 0
        assert session.headers["Accept"] == "application/json"
        assert client._get_session() is session
        client.close()
        assert client._session is None

    def test_info_route(self):
        client = ElasticsearchClient(url="http://es-1:9200", timeout=3)
        session = MagicMock()
        with patch.object(client, "_get_session", return_value=session):
            client.info()
        session.get.assert_called_once_with("http://es-1:9200/", params=None, timeout=3)

    def test_cat_master_route(self):
        client = ElasticsearchClient()
        session = MagicMock()
        with patch.object(client, "_get_session", return_value=session):
            client.cat_master(fmt="json")
        session.get.assert_called_once_with(
            "http://localhost:9200/_cat/master", params={"format": "json"}, timeout=10
        )
