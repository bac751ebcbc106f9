"""Agent checks - Elasticsearch leader detection and the shared check interface."""

from .base import BaseCheck, CheckError, CheckNotConfiguredError
from .elastic import ElasticCheck
from .es_client import ElasticsearchClient, json_path, read_json

__all__ = [
    "BaseCheck",
    "CheckError",
    "CheckNotConfiguredError",
    "ElasticCheck",
    "ElasticsearchClient",
    "json_path",
    "read_json",
]
