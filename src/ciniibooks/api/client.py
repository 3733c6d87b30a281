"""CiNii Books API client.

CiNii Books (ci.nii.ac.jp/books) provides bibliographic data for books and
journals held by Japanese university libraries:
- OpenSearch keyword search (Atom 1.0)
- Record retrieval by NCID (RDF/XML)

An appid (API key) is required for search and recommended for retrieval.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, Optional

import requests

from ..config import Config, get_config
from ..errors import NetworkError
from ..feed import SearchResult, parse_atom_feed
from ..identifiers import build_record_url, build_search_url
from ..record import Record, parse_record

logger = logging.getLogger(__name__)

_APPID_RE = re.compile(r"(appid=)[^&]+")


def _redact(url: str) -> str:
    """Mask the appid value for logging."""
    return _APPID_RE.sub(r"\1***", url)


class CiNiiClient:
    """Client for the CiNii Books API.

    One instance owns one requests.Session; use it as a context manager or
    call close() when done.
    """

    def __init__(self, config: Optional[Config] = None):
        """Initialize client.

        Args:
            config: Client configuration. Defaults to the process-wide config
                loaded from the environment.
        """
        self.config = config if config is not None else get_config()
        self.timeout = self.config.timeout
        self._session = requests.Session()
        self._session.headers.update({"User-Agent": self.config.user_agent})

    def __enter__(self) -> "CiNiiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._session.close()

    def _get(self, url: str) -> bytes:
        """Make GET request and return the full response body."""
        logger.debug("GET %s", _redact(url))
        try:
            response = self._session.get(url, timeout=self.timeout)
            try:
                response.raise_for_status()
                return response.content
            finally:
                response.close()
        except requests.exceptions.Timeout as e:
            logger.warning("Request timed out: %s", _redact(url))
            raise NetworkError("Request timed out") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code
            logger.warning("HTTP %s from %s", status, _redact(url))
            raise NetworkError(f"HTTP error: {status}", status_code=status) from e
        except requests.exceptions.RequestException as e:
            logger.warning("Request failed: %s", e)
            raise NetworkError(f"Request failed: {e}") from e

    # ========================================================================
    # Search
    # ========================================================================

    def search(self, params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> SearchResult:
        """Search CiNii Books with OpenSearch.

        Args:
            params: Query parameters (``q``, ``title``, ``count``, ...)
            **kwargs: Extra query parameters, merged over ``params``

        Returns:
            SearchResult for the single page the API returns

        Raises:
            ConfigurationError: If no appid is given or configured
            NetworkError: If the endpoint cannot be reached
            ParseError: If the response is not an Atom feed
        """
        query = dict(params or {})
        query.update(kwargs)
        if not query.get("appid"):
            query["appid"] = self.config.require_appid()

        body = self._get(build_search_url(query))
        return parse_atom_feed(body)

    # ========================================================================
    # Record Retrieval
    # ========================================================================

    def get(self, identifier: str, appid: Optional[str] = None) -> Record:
        """Retrieve a record by NCID or record URL.

        Args:
            identifier: NCID (e.g., "BB19132110") or record URL
            appid: API key; defaults to the configured appid if any

        Returns:
            Decoded Record

        Raises:
            NetworkError: If the endpoint cannot be reached
            ParseError: If the response is not an RDF document
        """
        url = build_record_url(identifier, appid or self.config.appid)
        body = self._get(url)
        return parse_record(body)


def search(
    params: Optional[Mapping[str, Any]] = None,
    config: Optional[Config] = None,
    **kwargs: Any,
) -> SearchResult:
    """Run one search with a short-lived client."""
    with CiNiiClient(config) as client:
        return client.search(params, **kwargs)


def get(identifier: str, appid: Optional[str] = None, config: Optional[Config] = None) -> Record:
    """Retrieve one record with a short-lived client."""
    with CiNiiClient(config) as client:
        return client.get(identifier, appid)
