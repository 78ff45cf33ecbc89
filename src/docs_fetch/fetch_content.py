import logging
from typing import Optional

import requests

from docs_fetch.errors import FetchError

logger = logging.getLogger(__name__)

# Desktop Chrome request headers; some documentation hosts reject obvious bots.
BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,image/apng,*/*;q=0.8"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Sec-Ch-Ua": '"Google Chrome";v="131", "Chromium";v="131", "Not_A Brand";v="24"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"macOS"',
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
    "Upgrade-Insecure-Requests": "1",
}


def fetch_content(url: str, timeout: Optional[float] = None) -> str:
    """
    Fetch a URL and return its body as text, following redirects.

    No retries. With ``timeout=None`` a stalled server blocks the caller.

    Raises:
        FetchError: on a non-2xx response or any transport failure.
    """
    try:
        response = requests.get(
            url,
            headers=BROWSER_HEADERS,
            allow_redirects=True,
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise FetchError(url, message=f"Failed to fetch {url}: {exc}") from exc

    if not response.ok:
        raise FetchError(url, status=response.status_code, reason=response.reason)

    logger.debug("Fetched %s (%d bytes)", response.url, len(response.content))
    return response.content.decode("utf-8", errors="replace")
