import pytest

from infofetch.custom import ModuleError
from infofetch.song import artist_in_title, format_song, prettify_artist, prettify_song


def test_prettify_song_removes_marker():
    assert prettify_song("Never Gonna Give You Up (Official Music Video)") == "Never Gonna Give You Up"


def test_prettify_song_removes_several_markers():
    assert prettify_song("Title [Lyrics] | Official Audio") == "Title"


def test_prettify_song_keeps_title_when_only_marker():
    assert prettify_song("(Official Video)") == "(Official Video)"


def test_prettify_song_without_markers_is_unchanged():
    assert prettify_song("Plain Title") == "Plain Title"


def test_prettify_artist_strips_vevo():
    assert prettify_artist("SomeoneVEVO") == "Someone"


def test_prettify_artist_strips_topic_case_insensitive():
    assert prettify_artist("Someone - topic") == "Someone"


def test_prettify_artist_strips_vevo_then_spaces():
    assert prettify_artist("Someone vevo") == "Someone"


@pytest.mark.parametrize(
    "song, artist, expected",
    [
        ("Daft Punk - One More Time", "Daft Punk", True),
        ("D.aft-punk  x", "daft punk", True),
        ("One More Time", "Daft Punk", False),
        ("Daft", "Daft Punk", False),
        ("anything", "", True),
    ],
)
def test_artist_in_title(song, artist, expected):
    assert artist_in_title(song, artist) is expected


def test_format_song_drops_artist_already_in_title():
    assert format_song("Daft Punk - One More Time", "Daft Punk") == "Daft Punk - One More Time"


def test_format_song_prefixes_artist_and_album():
    assert format_song("Song", "Artist", "Album") == "Artist - Album - Song"


def test_format_song_skips_url_album():
    assert format_song("Song", "Artist", "https://example.com/x") == "Artist - Song"


def test_format_song_cleans_title_and_artist():
    assert format_song("Song (Lyrics)", "Artist VEVO") == "Artist - Song"


def test_format_song_title_only():
    assert format_song("Song") == "Song"


def test_format_song_requires_song():
    with pytest.raises(ModuleError) as info:
        format_song("", "Artist", "Album")
    assert info.value.module == "Song"