"""Plain HTTP fetcher for the conference pages.

Single GET with a fixed browser User-Agent. No retries, no cache: any
failure is raised as FetchError and ends the run.
"""

import logging
from typing import Optional

import httpx

from vivatech_scraper.config import USER_AGENT
from vivatech_scraper.errors import FetchError

logger = logging.getLogger(__name__)


def build_client() -> httpx.Client:
    """HTTP client with the scraper's User-Agent and redirect handling."""
    return httpx.Client(
        headers={"User-Agent": USER_AGENT},
        follow_redirects=True,
    )


def fetch_page(url: str, client: Optional[httpx.Client] = None) -> str:
    """Fetch a page and return its body as text.

    Args:
        url: Page to download.
        client: Optional pre-built client (closed by the caller). When
            omitted, a client is created and closed here.

    Raises:
        FetchError: connection failure or non-2xx status.
    """
    logger.info("Fetching content from URL: %s", url)

    owns_client = client is None
    if owns_client:
        client = build_client()

    try:
        try:
            response = client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise FetchError(f"Failed to send HTTP request to {url}: {e}") from e

        if not response.is_success:
            raise FetchError(
                f"Server returned non-success status code: {response.status_code}"
            )

        # Undecodable bytes are replaced, never raised
        content = response.text
    finally:
        if owns_client:
            client.close()

    logger.info("Successfully fetched %d bytes of content", len(content))
    return content
