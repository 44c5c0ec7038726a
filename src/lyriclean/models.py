from dataclasses import dataclass


@dataclass
class Lyrics:
    """Raw lyric text as obtained from a source, before cleanup."""

    text: str
    title: str | None = None
    artist: str | None = None
    source_url: str = ""
