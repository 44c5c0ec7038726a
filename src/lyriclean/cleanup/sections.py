"""Repeated-section collapsing.

Lyric sites write a chorus out every time it is sung.  This stage keeps one
copy of each paragraph (a blank-line separated block):

- an exact repeat (same words, ignoring case and spacing) is dropped;
- a near repeat (word-set Jaccard similarity above the threshold) is dropped
  too, but if it is longer than the copy already kept it takes that copy's
  place, so the most complete variant survives at the first position.
"""

import re

from .similarity import jaccard_similarity, normalize_for_comparison

SIMILARITY_THRESHOLD = 0.8

# One or more blank lines; a "blank" line may still hold spaces or tabs.
_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


def split_paragraphs(text: str) -> list[str]:
    """Return the trimmed, non-empty paragraphs of *text* in order."""
    paragraphs = (p.strip() for p in _PARAGRAPH_BREAK_RE.split(text))
    return [p for p in paragraphs if p]


def _collapse(paragraphs: list[str], threshold: float) -> list[str]:
    """One deduplication pass over *paragraphs*."""
    kept: list[str] = []
    keys: list[str] = []
    positions: dict[str, int] = {}  # normalized key -> index into kept

    for paragraph in paragraphs:
        key = normalize_for_comparison(paragraph)
        if key in positions:
            continue

        match = next(
            (i for i, kept_key in enumerate(keys) if jaccard_similarity(key, kept_key) > threshold),
            None,
        )
        if match is None:
            positions[key] = len(kept)
            kept.append(paragraph)
            keys.append(key)
            continue

        if len(paragraph) > len(kept[match]):
            del positions[keys[match]]
            positions[key] = match
            kept[match] = paragraph
            keys[match] = key

    return kept


def deduplicate_sections(text: str, threshold: float = SIMILARITY_THRESHOLD) -> str:
    """Collapse exact and near-duplicate paragraphs of *text*.

    Args:
        text:      Lyrics with paragraphs separated by blank lines.
        threshold: Jaccard similarity above which two paragraphs are treated
                   as the same section.

    Returns:
        The kept paragraphs joined by exactly one blank line.
    """
    paragraphs = split_paragraphs(text)
    # A longer variant replacing a kept paragraph can make it a near repeat of
    # another kept one; rerun until nothing more collapses.
    while True:
        collapsed = _collapse(paragraphs, threshold)
        if len(collapsed) == len(paragraphs):
            break
        paragraphs = collapsed
    return "\n\n".join(collapsed)
