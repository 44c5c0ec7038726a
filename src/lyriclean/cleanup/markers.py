"""Section-marker stripping.

Lyrics scraped from the web (or pasted from a chord sheet) carry structural
labels that are never sung::

    [Verse 1]
    Chorus:
    Intro 2x
    Reff
    Bait 2 - 3

A line is a marker only if the label is *all* there is on it.  A lyric that
merely starts with a keyword ("Repeat after me") is kept.  Blank lines are
structural separators for the later stages and always pass through.
"""

import re

# Song-structure keywords, English and Indonesian.  Order is irrelevant: the
# pattern below is anchored on both ends.
SECTION_KEYWORDS = (
    "intro",
    "verse",
    "chorus",
    "reff",
    "refrain",
    "bridge",
    "hook",
    "pre-chorus",
    "prechorus",
    "post-chorus",
    "postchorus",
    "interlude",
    "outro",
    "solo",
    "breakdown",
    "drop",
    "build",
    "instrumental",
    "break",
    "coda",
    "ending",
    "spoken",
    "bait",
    "ulang",
    "pengulangan",
    "repeat",
)

# [Verse], [Chorus 2x], [Pre-Chorus: Artist], [Bridge, x2]
BRACKETED_MARKER_RE = re.compile(r"^\s*\[[\w\s\-':,]+\d*x?\]\s*$", re.IGNORECASE)

# Verse, Verse 2, Chorus:, Intro 1:, Pre-Chorus -, Bait 2 - 3, Reff 2x
KEYWORD_MARKER_RE = re.compile(
    r"^\s*(?:" + "|".join(re.escape(k) for k in SECTION_KEYWORDS) + r")"
    r"\s*(?:\d+)?\s*[:;\-–—]?\s*(?:\d+)?\s*x?\s*$",
    re.IGNORECASE,
)


def is_marker_line(line: str) -> bool:
    """Return True if *line* is a section label and nothing else.

    Blank lines are never markers.
    """
    stripped = line.strip()
    if not stripped:
        return False
    return bool(BRACKETED_MARKER_RE.match(stripped) or KEYWORD_MARKER_RE.match(stripped))


def strip_section_markers(text: str) -> str:
    """Drop every marker line from *text*, keeping all other lines in order."""
    return "\n".join(line for line in text.split("\n") if not is_marker_line(line))
