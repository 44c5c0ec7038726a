"""Generic source for HTML lyric pages.

There is no per-site adapter: lyric pages tend to put the text in one of a
handful of recognisable containers.  They are tried in order:

    <div data-lyrics-container="true">   (Genius; several per page, joined)
    .lyrics / #lyrics                     (most lyric sites)
    [class*="lyrics" i]                   (Lyrics__Root, song-lyrics, ...)
    <pre>                                 (chord sheets; the longest one wins)

``<br>`` tags and block boundaries become line breaks so verse lines and
paragraph gaps survive for the cleanup pipeline.
"""

import logging
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag

from ..exceptions import ParseError
from ..models import Lyrics
from .base import LyricsSource

logger = logging.getLogger(__name__)

_CONTAINER_SELECTORS = (".lyrics", "#lyrics", '[class*="lyrics" i]')

_BLOCK_TAGS = ("p", "div", "section", "article", "li", "h1", "h2", "h3", "h4", "h5", "h6")


class WebPageSource(LyricsSource):
    """Fallback source for any http(s) page."""

    @classmethod
    def can_handle(cls, url: str) -> bool:
        return urlparse(url).scheme in ("http", "https")

    def extract(self, payload: str, url: str) -> Lyrics:
        soup = BeautifulSoup(payload, "html.parser")
        text = _find_lyrics_text(soup)
        if not text:
            raise ParseError(url, "Could not find a lyrics container")
        return Lyrics(text=text, title=_page_title(soup), source_url=url)


def element_text(element: Tag) -> str:
    """Return the text of *element* with line structure preserved."""
    for br in element.find_all("br"):
        br.replace_with("\n")
    for block in element.find_all(_BLOCK_TAGS):
        block.append("\n")
    return element.get_text().strip()


def _find_lyrics_text(soup: BeautifulSoup) -> str:
    containers = soup.select("div[data-lyrics-container]")
    if containers:
        logger.debug("found %d data-lyrics-container blocks", len(containers))
        return "\n".join(element_text(c) for c in containers).strip()

    for selector in _CONTAINER_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue
        text = element_text(element)
        if text:
            logger.debug("found lyrics via %r", selector)
            return text

    pre_blocks = [element_text(pre) for pre in soup.find_all("pre")]
    return max(pre_blocks, key=len, default="")


def _page_title(soup: BeautifulSoup) -> str | None:
    og_title = soup.find("meta", attrs={"property": "og:title"})
    if og_title and og_title.get("content"):
        return og_title["content"].strip()
    if soup.title and soup.title.string:
        return soup.title.string.strip()
    return None
