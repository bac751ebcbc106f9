"""Minimal Elasticsearch REST client.

Only the two routes the elastic check needs are wrapped: the root info route
and ``_cat/master``. Responses are returned as-is; HTTP error status codes are
not raised so callers can inspect whatever JSON body the node returned.
"""

from __future__ import annotations

import json
import logging
import os
from typing import TYPE_CHECKING, Any, Optional
from urllib.parse import urlparse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .base import CheckError

if TYPE_CHECKING:
    from ..server.config import CheckConfig

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:9200"
USER_AGENT = "clusterprobe/0.1"


def json_path(document: Any, path: str) -> str:
    """Look up a dotted path in a decoded JSON document.

    Numeric segments index into lists, so ``"0.node"`` reads the ``node``
    field of the first element. Missing paths and nulls yield ``""``.
    """
    current = document
    for part in path.split("."):
        if isinstance(current, dict):
            if part not in current:
                return ""
            current = current[part]
        elif isinstance(current, list):
            if not part.isdigit() or int(part) >= len(current):
                return ""
            current = current[int(part)]
        else:
            return ""

    if current is None:
        return ""
    if isinstance(current, bool):
        return "true" if current else "false"
    if isinstance(current, (dict, list)):
        return json.dumps(current, separators=(",", ":"))
    return str(current)


def read_json(response: requests.Response) -> Any:
    """Drain a response body and decode it as JSON.

    The response is always closed. Returns None if the body is not JSON.
    """
    with response:
        try:
            return response.json()
        except ValueError:
            return None


class ElasticsearchClient:
    """Thin wrapper around a requests session bound to one node."""

    def __init__(
        self,
        url: str = DEFAULT_URL,
        timeout: float = 10,
        retries: int = 0,
        verify: bool = True,
    ):
        try:
            parsed = urlparse(url)
        except (TypeError, ValueError, AttributeError) as exc:
            raise CheckError("elastic", f"invalid elasticsearch url: {url!r}", exc)
        if not isinstance(url, str) or parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise CheckError("elastic", f"invalid elasticsearch url: {url!r}")
        try:
            retries = int(retries)
        except (TypeError, ValueError) as exc:
            raise CheckError("elastic", f"invalid retries setting: {retries!r}", exc)
        self.url = url.rstrip("/")
        self.timeout = timeout
        self.retries = max(0, retries)
        self.verify = verify
        self._session: Optional[requests.Session] = None

    @classmethod
    def from_config(cls, check_config: "CheckConfig") -> "ElasticsearchClient":
        """Build a client from check config.

        The URL comes from the ``url`` setting, then the first entry of
        ``ELASTICSEARCH_URL``, then the local default port.
        """
        url = check_config.get("url")
        if not url:
            env_urls = os.environ.get("ELASTICSEARCH_URL", "")
            url = env_urls.split(",")[0].strip() or DEFAULT_URL
        return cls(
            url=url,
            timeout=check_config.timeout,
            retries=check_config.get("retries", 0),
            verify=check_config.get("verify", True),
        )

    def _get_session(self) -> requests.Session:
        """Get or create the session, reused for connection pooling."""
        if self._session is None:
            session = requests.Session()
            retry = Retry(
                total=self.retries,
                connect=self.retries,
                read=self.retries,
                backoff_factor=0.5,
                status_forcelist=(429, 502, 503, 504),
                allowed_methods=("GET", "HEAD"),
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry, pool_connections=1, pool_maxsize=2)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
            session.verify = self.verify
            session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
            self._session = session
        return self._session

    def _get(self, path: str, **params: Any) -> requests.Response:
        session = self._get_session()
        logger.debug("GET %s%s %s", self.url, path, params)
        return session.get(f"{self.url}{path}", params=params or None, timeout=self.timeout)

    def info(self) -> requests.Response:
        """GET / - node and cluster identity."""
        return self._get("/")

    def cat_master(self, fmt: str = "json") -> requests.Response:
        """GET /_cat/master - the currently elected master node."""
        return self._get("/_cat/master", format=fmt)

    def close(self) -> None:
        """Close the session and release resources."""
        if self._session is not None:
            self._session.close()
            self._session = None
