"""Source for plain-text lyric files served over HTTP (``.../song.txt``)."""

from urllib.parse import urlparse

from ..exceptions import ParseError
from ..models import Lyrics
from .base import LyricsSource


class PlainTextSource(LyricsSource):
    """The response body is the lyrics, verbatim."""

    @classmethod
    def can_handle(cls, url: str) -> bool:
        parsed = urlparse(url)
        return parsed.scheme in ("http", "https") and parsed.path.lower().endswith(".txt")

    def extract(self, payload: str, url: str) -> Lyrics:
        if not payload.strip():
            raise ParseError(url, "Response body is empty")
        return Lyrics(text=payload, title=_title_from_url(url), source_url=url)


def _title_from_url(url: str) -> str:
    """Derive a title from the file name, e.g. ``amazing-grace.txt``."""
    name = urlparse(url).path.rstrip("/").split("/")[-1]
    return name.rsplit(".", 1)[0].replace("-", " ").replace("_", " ").title()
