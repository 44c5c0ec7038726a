class LyricleanError(Exception):
    """Base exception for lyriclean."""


class FetchError(LyricleanError):
    """Raised when an HTTP request fails.

    ``status_code`` is 0 when no response was received at all.
    """

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class ParseError(LyricleanError):
    """Raised when no lyric text can be extracted from a fetched page."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Parse error for {url}: {reason}")


class UnsupportedSourceError(LyricleanError):
    """Raised when no source matches the given URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"No source found for URL: {url}")
