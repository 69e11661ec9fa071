"""Production HTTP client backed by httpx."""

import logging
from collections.abc import Generator

import httpx

from apiref.integrations.http.abc import HttpClient, HttpRequestError

logger = logging.getLogger(__name__)

USER_AGENT = "apiref"


def _describe_error(exc: httpx.HTTPError | httpx.InvalidURL) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        reason = exc.response.reason_phrase
        return f"{status} {reason}".strip()
    return str(exc) or type(exc).__name__


class HttpxClient(HttpClient):
    """HTTP client using httpx with redirects followed.

    A new httpx.Client is opened per request. apiref makes at most a handful
    of requests per invocation, so there is nothing to gain from pooling.

    Args:
        timeout_seconds: Connect and read timeout for each request
        transport: Optional httpx transport (tests pass httpx.MockTransport)
    """

    def __init__(
        self,
        *,
        timeout_seconds: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = httpx.Timeout(timeout_seconds, connect=timeout_seconds)
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self._timeout,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
            transport=self._transport,
        )

    def get_json(self, url: str) -> object:
        logger.debug("GET %s (json)", url)
        with self._client() as client:
            try:
                response = client.get(url, headers={"Accept": "application/json"})
                response.raise_for_status()
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise HttpRequestError(url, f"Request to {url} failed: {_describe_error(exc)}") from exc
            return response.json()

    def stream_bytes(self, url: str) -> Generator[bytes, None, None]:
        logger.debug("GET %s (stream)", url)
        with self._client() as client:
            try:
                with client.stream("GET", url) as response:
                    response.raise_for_status()
                    yield from response.iter_bytes()
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise HttpRequestError(url, f"Request to {url} failed: {_describe_error(exc)}") from exc
