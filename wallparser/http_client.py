from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from wallparser.errors import FetchError
from wallparser.models import Page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpConfig:
    timeout_sec: float
    user_agent: str
    encoding: str = "windows-1251"


class HttpClient:
    """
    Thin HTTP client wrapper:
    - Browser-like User-Agent (the wall rejects default client identifiers)
    - Timeout
    - Raw bytes only; decoding is done by Page with the configured encoding
    - Logs meaningful failures

    No retries here. Retry policy, if any, belongs to the caller.
    """

    def __init__(self, config: HttpConfig, session: Optional[requests.Session] = None):
        self._cfg = config
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": self._cfg.user_agent,
                "Accept-Language": "ru-RU,ru;q=0.9,en;q=0.8",
            }
        )

    def fetch(self, url: str) -> Page:
        """
        GET an URL and return the undecoded response body.

        Raises:
            FetchError: non-2xx responses or network errors
        """
        logger.info("Fetching page: url=%s", url)
        try:
            resp = self._session.get(url, timeout=self._cfg.timeout_sec)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error("HTTP GET failed: url=%s status=%s", url, status)
            raise FetchError(f"HTTP {status} for {url}", status_code=status) from e
        except requests.RequestException as e:
            logger.error("HTTP GET failed: url=%s err=%s", url, e)
            raise FetchError(f"Request to {url} failed: {e}") from e

        logger.info("Fetched page: url=%s status=%s bytes=%s", url, resp.status_code, len(resp.content))
        # Raw bytes; the transport must not pick a charset
        return Page(url=url, content=resp.content, encoding=self._cfg.encoding)

    def fetch_text(self, url: str) -> str:
        """
        Fetch and decode a page.

        Raises:
            FetchError: see fetch()
            DecodeError: if the configured encoding is unknown
        """
        return self.fetch(url).decode()

    def close(self) -> None:
        self._session.close()
