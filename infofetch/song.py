"""The song that a media player is currently playing."""

from __future__ import annotations

from .custom import ModuleError
from .strbuf import remove_strings, remove_suffix_ignore_case, starts_with_ignore_case, trim_right

__all__ = ["prettify_song", "prettify_artist", "artist_in_title", "format_song"]

MODULE_NAME = "Song"

_REMOVE_STRINGS = (
    "(Official Music Video)", "(Official Video)", "(Music Video)",
    "[Official Music Video]", "[Official Video]", "[Music Video]",
    "| Official Music Video", "| Official Video", "| Music Video",
    "[Official Audio]", "[Audio]", "(Audio)", "| Official Audio", "| Audio", "| OFFICIAL AUDIO",
    "(Lyric Video)", "(Official Lyric Video)", "(Lyrics)",
    "[Lyric Video]", "[Official Lyric Video]", "[Lyrics]",
    "| Lyric Video", "| Official Lyric Video", "| Lyrics",
)

_IGNORED_CHARS = frozenset(" \t-.")


def prettify_song(title: str) -> str:
    """Remove video and lyric markers from a title; keep the title if nothing is left."""
    pretty = trim_right(remove_strings(title, _REMOVE_STRINGS), " ")
    return pretty or title


def prettify_artist(artist: str) -> str:
    """Remove channel suffixes such as " - Topic" and "VEVO" from an artist name."""
    artist = remove_suffix_ignore_case(artist, " - Topic")
    artist = remove_suffix_ignore_case(artist, "VEVO")
    return trim_right(artist, " ")


def _significant(text: str) -> list[str]:
    return [char.lower() for char in text if char not in _IGNORED_CHARS]


def artist_in_title(song: str, artist: str) -> bool:
    """Whether the song title starts with the artist name.

    Blanks, dashes and dots are ignored and case does not matter.
    """
    song_chars = _significant(song)
    artist_chars = _significant(artist)
    return song_chars[: len(artist_chars)] == artist_chars


def format_song(song: str, artist: str = "", album: str = "") -> str:
    """The default song line: artist, album and title joined by dashes.

    The artist is left out when the title already names it, and an album
    that is really a URL is left out too.
    """
    if not song:
        raise ModuleError(MODULE_NAME, "No song detected")

    song_pretty = prettify_song(song)
    artist_pretty = prettify_artist(artist)
    if artist_in_title(song_pretty, artist_pretty):
        artist_pretty = ""

    parts = []
    if artist_pretty:
        parts.append(artist_pretty)
    if album and not starts_with_ignore_case(album, "http"):
        parts.append(album)
    parts.append(song_pretty)
    return " - ".join(parts)