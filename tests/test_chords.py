import pytest

from lyriclean.cleanup.chords import (
    has_accidental_chords,
    has_chord_shape,
    has_chord_suffix,
    has_lyric_word,
    is_chord_dense,
    is_chord_line,
    is_only_chords,
    remove_chord_lines,
)

# ---------------------------------------------------------------------------
# has_lyric_word
# ---------------------------------------------------------------------------


def test_lyric_word_found():
    assert has_lyric_word("I am the one")
    assert has_lyric_word("Sing it, baby")


def test_lyric_word_ignores_punctuation():
    assert has_lyric_word("(you)")
    assert has_lyric_word("Forever, and...")


def test_no_lyric_word():
    assert not has_lyric_word("C G Am F")
    assert not has_lyric_word("Dancing through midnight")


# ---------------------------------------------------------------------------
# Individual heuristics
# ---------------------------------------------------------------------------


def test_only_chords_basic():
    assert is_only_chords("C G Am F")
    assert is_only_chords("Am7   G/B   D")
    assert is_only_chords("Cadd9  Dsus  Emaj7")


def test_only_chords_with_bar_symbols():
    assert is_only_chords("| C | G | Am | F |")
    assert is_only_chords("(C - G)")


def test_only_chords_false_for_words():
    assert not is_only_chords("Dancing through midnight")


def test_chord_dense_sharp_chords():
    # "F#" matches only as "F", leaving "#" behind; density still catches it
    assert not is_only_chords("C#m7  F#")
    assert is_chord_dense("C#m7  F#")


def test_chord_dense_needs_two_chords():
    assert not is_chord_dense("Am")


def test_chord_shape():
    assert has_chord_shape("Bbm Ebsus Gx")


def test_chord_shape_false_for_words():
    assert not has_chord_shape("Hello there friend")


def test_chord_shape_skips_long_lines():
    assert not has_chord_shape("Bbm Ebsus Gx " * 4)


def test_chord_shape_needs_two_tokens():
    assert not has_chord_shape("Bbm")


def test_accidental_uppercase_heavy():
    assert has_accidental_chords("F# Bb RIFF")


def test_accidental_lowercase_line():
    assert not has_accidental_chords("F# Bb riff")


def test_chord_suffix_isolated():
    assert has_chord_suffix("riff in maj7 time")


def test_chord_suffix_long_line():
    assert not has_chord_suffix("x" * 60 + " maj7")


# ---------------------------------------------------------------------------
# is_chord_line
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("line", ["C G Am F", "  D   G   E  ", "Am7 G/B D", "| Em | C |"])
def test_chord_lines(line):
    assert is_chord_line(line)


@pytest.mark.parametrize(
    "line",
    ["I am the one", "Amazing grace, how sweet the sound", "Dancing through midnight", "Hello"],
)
def test_lyric_lines(line):
    assert not is_chord_line(line)


def test_lyric_word_override_beats_heuristics():
    # every token but "the" is chord-shaped
    assert not is_chord_line("C G the Am")


def test_blank_is_not_chord_line():
    assert not is_chord_line("")
    assert not is_chord_line("   ")


# ---------------------------------------------------------------------------
# remove_chord_lines
# ---------------------------------------------------------------------------


def test_remove_chord_lines_keeps_lyrics_and_blanks():
    text = "C  G  Am  F\nI found a love for me\n\nG  D\nDarling just dive right in"
    assert remove_chord_lines(text) == "I found a love for me\n\nDarling just dive right in"


def test_remove_chord_lines_empty():
    assert remove_chord_lines("") == ""
