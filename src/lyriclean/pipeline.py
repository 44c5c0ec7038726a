"""Deterministic lyrics cleanup pipeline.

Turns raw lyrics from a web page, chord sheet or paste into plain sung text:

  1. strip_section_markers()  drops [Verse 1], Chorus:, Reff, Bait 2 ...
  2. remove_chord_lines()     drops C  G  Am  F
  3. deduplicate_sections()   collapses repeated choruses
  4. normalize_whitespace()   trims lines, one blank line between sections

Every stage is a pure ``str -> str`` function; the order is fixed.
Running :func:`clean_lyrics` on its own output returns it unchanged.

Usage::

    from lyriclean.pipeline import clean_lyrics
    text = clean_lyrics(Path("song.txt").read_text())
"""

import logging
from enum import Enum, auto

from .cleanup.chords import is_chord_line, remove_chord_lines
from .cleanup.markers import is_marker_line, strip_section_markers
from .cleanup.sections import deduplicate_sections
from .cleanup.whitespace import normalize_whitespace

logger = logging.getLogger(__name__)

STAGES = (
    ("markers", strip_section_markers),
    ("chords", remove_chord_lines),
    ("sections", deduplicate_sections),
    ("whitespace", normalize_whitespace),
)


class LineKind(Enum):
    BLANK = auto()  # empty or whitespace only
    MARKER = auto()  # section label: [Verse 1], Chorus:
    CHORD = auto()  # chord-only line: C  G  Am  F
    LYRIC = auto()  # everything else


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def clean_lyrics(raw_text: str | None) -> str:
    """Return the cleaned form of *raw_text*.

    Empty or whitespace-only input yields ``""``.  Never raises for string
    input.
    """
    if not raw_text or not raw_text.strip():
        return ""

    text = normalize_newlines(raw_text)
    for name, stage in STAGES:
        before = text.count("\n") + 1
        text = stage(text)
        logger.debug("stage %s: %d -> %d lines", name, before, text.count("\n") + 1 if text else 0)
    return text


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


def classify_line(line: str) -> LineKind:
    """Return how the pipeline treats a single input line.

    Markers are checked before chords, matching stage order.
    """
    if not line.strip():
        return LineKind.BLANK
    if is_marker_line(line):
        return LineKind.MARKER
    if is_chord_line(line):
        return LineKind.CHORD
    return LineKind.LYRIC


def explain(raw_text: str) -> list[tuple[LineKind, str]]:
    """Classify every line of *raw_text*.

    Deduplication works on whole paragraphs and is not reflected here.
    """
    if not raw_text:
        return []
    return [(classify_line(line), line) for line in normalize_newlines(raw_text).split("\n")]
