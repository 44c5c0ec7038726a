"""Text comparison helpers shared by the section deduplicator.

Both the exact-match path and the near-duplicate path of
:func:`~lyriclean.cleanup.sections.deduplicate_sections` go through
:func:`normalize_for_comparison`, so they always agree on what a paragraph's
key is.
"""

import re

_WHITESPACE_RUN_RE = re.compile(r"\s+")


def normalize_for_comparison(text: str) -> str:
    """Lowercase *text* and collapse every whitespace run to a single space."""
    return _WHITESPACE_RUN_RE.sub(" ", text.lower()).strip()


def jaccard_similarity(first: str, second: str) -> float:
    """Return the Jaccard similarity of the whitespace-split word sets.

    ``|A & B| / |A | B|`` in the range 0.0 (disjoint) to 1.0 (same words).
    Two texts without any words score 0.0.
    """
    words_a = set(first.split())
    words_b = set(second.split())
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)
