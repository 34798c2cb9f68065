"""HTTP(S) playlist source built on httpx.

A non-success status is reported as FetchFailure before any parsing is
attempted. There are no retries.
"""

import httpx

from ..config import get_settings
from ..errors import FetchFailure
from ..logging import get_logger
from . import BaseSource

logger = get_logger(__name__)


def _client_options(timeout: float | None, user_agent: str | None) -> dict:
    settings = get_settings()
    return {
        "headers": {"User-Agent": user_agent or settings.user_agent},
        "timeout": timeout if timeout is not None else settings.fetch_timeout,
        "follow_redirects": True,
    }


def _check_response(url: str, response: httpx.Response) -> str:
    if not response.is_success:
        logger.error("playlist_fetch_failed", url=url, status=response.status_code)
        raise FetchFailure(url, status_code=response.status_code)
    logger.info("playlist_fetched", url=url, size=len(response.content))
    return response.text


class HttpSource(BaseSource):
    """Fetches playlists with a GET request."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ):
        """Initialize the HTTP source.

        Args:
            client: Optional preconfigured client; it is not closed by `close()`
            timeout: Request timeout in seconds, defaults to the configured value
            user_agent: User-Agent header, defaults to the configured value
        """
        self._owns_client = client is None
        self._client = client or httpx.Client(**_client_options(timeout, user_agent))

    @property
    def name(self) -> str:
        return "http"

    def read(self, location: str) -> str:
        logger.info("fetching_playlist", url=location)
        try:
            response = self._client.get(location)
        except httpx.HTTPError as e:
            logger.error("playlist_fetch_failed", url=location, error=str(e))
            raise FetchFailure(location, reason=str(e)) from e
        return _check_response(location, response)

    def close(self) -> None:
        """Close the HTTP client if this source created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpSource":
        return self

    def __exit__(self, *args) -> None:
        self.close()


async def fetch_text_async(
    url: str,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> str:
    """Fetch playlist text with an async client, reading the whole body."""
    if client is None:
        async with httpx.AsyncClient(**_client_options(timeout, None)) as own_client:
            return await fetch_text_async(url, client=own_client)

    logger.info("fetching_playlist", url=url)
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        logger.error("playlist_fetch_failed", url=url, error=str(e))
        raise FetchFailure(url, reason=str(e)) from e
    return _check_response(url, response)
