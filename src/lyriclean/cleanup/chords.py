"""Chord-line detection and removal.

Chord sheets put chord symbols on their own line above the lyric::

    C        G         Am      F
    I found a love for me

Telling the two apart is approximate.  :func:`is_chord_line` runs an ordered
list of small predicates:

  1. lyric-word override: a common English word means lyrics, stop here
  2. chord exhaustion:     nothing but chords and bar symbols
  3. chord density:        chord tokens cover most of the line
  4. structural shape:     a short line of mostly chord-shaped tokens
  5. accidentals:          a sharp/flat root on a short uppercase-heavy line
  6. chord suffix:         an isolated maj7 / sus4 / add9 ... token

Predicates 2-6 are OR'd.  Each one takes the trimmed line and can be tested
on its own.
"""

import re

# Root A-G, optional accidental, optional quality, degree digits, optional
# addN extension, optional slash bass.  Case-sensitive: "am" is a word,
# "Am" is a chord.  Single capitals ("A", "E") match as well.
CHORD_RE = re.compile(
    r"\b[A-G](?:#|b)?(?:m|maj|min|aug|dim|sus)?\d*(?:add\d+)?(?:/[A-G](?:#|b)?)?\b"
)

# What may be left once every chord has been cut out of a chord line.
_CHORD_LEFTOVER_RE = re.compile(r"^[\s\-|/\\,()]+$")

# Root followed by a sharp or flat at the start of a token: C#, Bb, F#m
_ACCIDENTAL_ROOT_RE = re.compile(r"(?:^|\s)[A-G][#b]")

_CHORD_SUFFIX_RE = re.compile(r"\b(?:maj7|min7|sus2|sus4|dim7|aug|add9|m7|M7)\b")

_UPPERCASE_RE = re.compile(r"[A-Z]")
_WHITESPACE_RE = re.compile(r"\s")
_WORD_PUNCTUATION_RE = re.compile(r"[.,!?;:'\"()]")

COMMON_LYRIC_WORDS = frozenset(
    {
        "the", "and", "i", "you", "my", "is", "are", "was", "were", "be",
        "been", "have", "has", "had", "do", "does", "did", "will", "would",
        "can", "could", "me", "we", "he", "she", "it", "they", "a", "an",
        "to", "in", "on", "at", "for", "with", "from", "but", "or", "not",
        "all", "when", "so", "up", "out",
    }
)

DENSITY_THRESHOLD = 0.5
SHAPE_THRESHOLD = 0.6
UPPERCASE_THRESHOLD = 0.4
SHORT_LINE = 40
MEDIUM_LINE = 50
MAX_CHORD_TOKEN = 6


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def has_lyric_word(line: str) -> bool:
    """True if any whitespace token, stripped of punctuation, is a common word."""
    for word in line.lower().split():
        if _WORD_PUNCTUATION_RE.sub("", word) in COMMON_LYRIC_WORDS:
            return True
    return False


def is_only_chords(line: str) -> bool:
    """True if removing every chord leaves only whitespace or bar symbols."""
    remainder = CHORD_RE.sub("", line).strip()
    return not remainder or bool(_CHORD_LEFTOVER_RE.match(remainder))


def is_chord_dense(line: str) -> bool:
    """True if 2+ chords make up more than half of the non-space characters."""
    chords = [m.group() for m in CHORD_RE.finditer(line)]
    if len(chords) < 2:
        return False
    non_space = len(_WHITESPACE_RE.sub("", line))
    return non_space > 0 and sum(map(len, chords)) / non_space > DENSITY_THRESHOLD


def _looks_like_chord(token: str) -> bool:
    return (
        len(token) <= MAX_CHORD_TOKEN
        and re.match(r"[A-G]", token) is not None
        and re.search(r"[A-G#b/]", token) is not None
    )


def has_chord_shape(line: str) -> bool:
    """True for a short line whose tokens are mostly chord-shaped."""
    tokens = line.split()
    if len(line) >= SHORT_LINE or len(tokens) < 2:
        return False
    chord_like = sum(1 for token in tokens if _looks_like_chord(token))
    return chord_like >= len(tokens) * SHAPE_THRESHOLD


def has_accidental_chords(line: str) -> bool:
    """True for a short, uppercase-heavy line with a sharp or flat root."""
    if not _ACCIDENTAL_ROOT_RE.search(line) or not CHORD_RE.search(line):
        return False
    non_space = len(_WHITESPACE_RE.sub("", line))
    if non_space == 0 or len(line) >= MEDIUM_LINE:
        return False
    return len(_UPPERCASE_RE.findall(line)) / non_space > UPPERCASE_THRESHOLD


def has_chord_suffix(line: str) -> bool:
    """True for a short line containing an isolated chord-quality token."""
    return len(line) < MEDIUM_LINE and bool(_CHORD_SUFFIX_RE.search(line))


# Evaluated after has_lyric_word(); any hit removes the line.
CHORD_HEURISTICS = (
    is_only_chords,
    is_chord_dense,
    has_chord_shape,
    has_accidental_chords,
    has_chord_suffix,
)


# ---------------------------------------------------------------------------
# Classification + removal
# ---------------------------------------------------------------------------


def is_chord_line(line: str) -> bool:
    """Return True if *line* is chord notation rather than lyrics.

    Blank lines are never chord lines.
    """
    stripped = line.strip()
    if not stripped:
        return False
    if has_lyric_word(stripped):
        return False
    return any(heuristic(stripped) for heuristic in CHORD_HEURISTICS)


def remove_chord_lines(text: str) -> str:
    """Drop every chord line from *text*, keeping all other lines in order."""
    return "\n".join(line for line in text.split("\n") if not is_chord_line(line))
