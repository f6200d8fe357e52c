"""HTTP fetcher for single-page analysis."""

import logging

import httpx

from analyzers.document import Document, parse_document
from config import settings

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised for any failure to retrieve a page (bad URL, DNS, timeout, HTTP status)."""


class Fetcher:
    """Blocking HTTP fetcher that returns a parsed document."""

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self.user_agent = user_agent or settings.user_agent
        self._transport = transport

    def fetch(self, url: str | None) -> Document:
        """
        Fetch ``url`` and parse the response body.

        Redirects are followed; non-2xx responses are treated as failures.

        Raises:
            FetchError: on any network, URL or status failure
        """
        if not url or not url.strip():
            raise FetchError("URL must not be empty")

        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise FetchError(f"Timed out after {self.timeout}s fetching {url}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(str(e)) from e

        logger.debug(
            f"Fetched {url} -> {response.url} ({response.status_code}, {len(response.content)} bytes)"
        )
        return parse_document(response.content)
