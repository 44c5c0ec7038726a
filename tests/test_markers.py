import pytest

from lyriclean.cleanup.markers import is_marker_line, strip_section_markers

# ---------------------------------------------------------------------------
# is_marker_line
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "line",
    ["[Verse 1]", "[Chorus]", "[Chorus 2x]", "[Pre-Chorus: Both]", "  [Bridge]  "],
)
def test_bracketed_markers(line):
    assert is_marker_line(line)


@pytest.mark.parametrize(
    "line",
    ["Chorus", "Chorus:", "Verse 2", "Intro 1:", "Pre-Chorus -", "Reff 2x", "outro", "CHORUS"],
)
def test_english_keyword_markers(line):
    assert is_marker_line(line)


@pytest.mark.parametrize("line", ["Bait", "Bait 2", "Ulang", "Pengulangan:", "Repeat 2x", "Reff"])
def test_indonesian_keyword_markers(line):
    assert is_marker_line(line)


def test_keyword_with_number_range():
    assert is_marker_line("Bait 2 - 3")
    assert is_marker_line("Verse 1 — 2")
    assert is_marker_line("Verse 1–2")


def test_keyword_followed_by_lyrics_is_not_marker():
    assert not is_marker_line("Repeat after me")
    assert not is_marker_line("Chorus of angels singing")
    assert not is_marker_line("Bridge over troubled water")


def test_bracket_followed_by_lyrics_is_not_marker():
    assert not is_marker_line("[Verse 1] la la la")


def test_blank_is_not_marker():
    assert not is_marker_line("")
    assert not is_marker_line("    ")


def test_plain_lyric_is_not_marker():
    assert not is_marker_line("Amazing grace, how sweet the sound")


# ---------------------------------------------------------------------------
# strip_section_markers
# ---------------------------------------------------------------------------


def test_strip_removes_markers_keeps_lyrics():
    text = "[Verse 1]\nHello\n[Chorus]\nWorld"
    assert strip_section_markers(text) == "Hello\nWorld"


def test_strip_preserves_blank_lines():
    text = "[Verse 1]\nHello\n\n\nChorus:\nWorld"
    assert strip_section_markers(text) == "Hello\n\n\nWorld"


def test_strip_empty_input():
    assert strip_section_markers("") == ""


def test_strip_does_not_touch_line_content():
    text = "  Hello there  \nBait\n\tWorld"
    assert strip_section_markers(text) == "  Hello there  \n\tWorld"
