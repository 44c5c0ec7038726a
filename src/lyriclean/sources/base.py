import logging
from abc import ABC, abstractmethod

import httpx

from ..exceptions import FetchError
from ..models import Lyrics

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0

# Several lyric sites answer 403 to clients without browser-like headers.
FETCH_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept-Language": "en-US,en;q=0.9,id;q=0.8",
    "Accept": "text/html,application/xhtml+xml,text/plain;q=0.9,*/*;q=0.8",
}


class LyricsSource(ABC):
    """Abstract base class for everything that turns a URL into raw lyrics."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    @classmethod
    @abstractmethod
    def can_handle(cls, url: str) -> bool:
        """Return True if this source can handle the given URL."""

    def fetch(self, url: str) -> str:
        """GET *url* and return the response body as text.

        Raises FetchError on transport failures and non-200 responses.
        """
        logger.debug("GET %s (timeout=%ss)", url, self.timeout)
        try:
            resp = httpx.get(
                url,
                headers=FETCH_HEADERS,
                follow_redirects=True,
                timeout=self.timeout,
            )
        except httpx.RequestError as exc:
            raise FetchError(url, 0) from exc
        if resp.status_code != 200:
            raise FetchError(url, resp.status_code)
        return resp.text

    @abstractmethod
    def extract(self, payload: str, url: str) -> Lyrics:
        """Return the raw (uncleaned) lyrics contained in *payload*.

        Raises ParseError if no lyric text can be found.
        """

    def scrape(self, url: str) -> Lyrics:
        """Convenience method: fetch + extract."""
        payload = self.fetch(url)
        return self.extract(payload, url)
