from .exceptions import UnsupportedSourceError
from .sources.base import DEFAULT_TIMEOUT, LyricsSource
from .sources.plaintext import PlainTextSource
from .sources.webpage import WebPageSource

# Most specific first; WebPageSource accepts any http(s) URL.
_SOURCES: list[type[LyricsSource]] = [
    PlainTextSource,
    WebPageSource,
]


def get_source(url: str, timeout: float = DEFAULT_TIMEOUT) -> LyricsSource:
    """Return an instantiated source for the given URL.

    Raises UnsupportedSourceError if no source matches.
    """
    for cls in _SOURCES:
        if cls.can_handle(url):
            return cls(timeout=timeout)
    raise UnsupportedSourceError(url)
