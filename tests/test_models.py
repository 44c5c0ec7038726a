from lyriclean.models import Lyrics


def test_lyrics_defaults():
    lyrics = Lyrics(text="Amazing grace")
    assert lyrics.text == "Amazing grace"
    assert lyrics.title is None
    assert lyrics.artist is None
    assert lyrics.source_url == ""


def test_lyrics_all_fields():
    lyrics = Lyrics(
        text="Amazing grace",
        title="Amazing Grace",
        artist="John Newton",
        source_url="https://example.com/amazing-grace",
    )
    assert lyrics.title == "Amazing Grace"
    assert lyrics.artist == "John Newton"
    assert lyrics.source_url == "https://example.com/amazing-grace"
