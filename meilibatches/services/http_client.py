"""requests-based HTTP transport for the Meilisearch API."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests
import structlog

from meilibatches import __version__
from meilibatches.errors import HttpStatusError, TransportError
from meilibatches.utils.retry import retry_with_logging

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = structlog.get_logger(__name__)

USER_AGENT = f"meilibatches/{__version__}"


class RequestsHttpClient:
    """Performs GET requests against a Meilisearch server.

    Connection failures and timeouts are retried up to ``max_attempts`` times
    and then raised as TransportError. Non-2xx responses raise HttpStatusError
    immediately.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 30.0,
        max_attempts: int = 3,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        if api_key:
            self.session.headers.update({"Authorization": f"Bearer {api_key}"})
        self._get_with_retry = retry_with_logging(max_attempts=max_attempts)(self._get_once)

    def get(self, path: str, params: Mapping[str, str] | None = None) -> str:
        """GET ``path`` relative to the base URL and return the response body."""
        return self._get_with_retry(path, params)

    def _get_once(self, path: str, params: Mapping[str, str] | None) -> str:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("http_request_failed", url=url, error=str(exc))
            raise TransportError(f"GET {url} failed: {exc}") from exc

        if not 200 <= response.status_code < 300:
            logger.debug(
                "http_status_error",
                url=url,
                status_code=response.status_code,
            )
            raise HttpStatusError(response.status_code, response.text)

        return response.text
