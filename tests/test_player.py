import pytest

from infofetch.custom import ModuleError
from infofetch.player import format_player, site_name


def test_site_name_capitalizes_plain_domain():
    assert site_name("https://www.youtube.com/watch?v=abc") == "Youtube"


def test_site_name_keeps_subdomain_lowercase():
    assert site_name("https://music.youtube.com/watch") == "music.youtube"


def test_site_name_without_http_is_empty():
    assert site_name("file:///home/user/song.mp3") == ""


def test_site_name_empty_url():
    assert site_name("") == ""


def test_site_name_has_no_path_or_slash():
    name = site_name("http://www.example.com/a/b/c")
    assert "/" not in name
    assert name.lower() == "example"


def test_format_player_without_url():
    assert format_player("Firefox") == "Firefox"


def test_format_player_with_url_wraps_player():
    url = "https://www.youtube.com/watch?v=abc"
    assert format_player("Firefox", url) == f"{site_name(url)} (Firefox)"


def test_format_player_with_non_web_url():
    assert format_player("mpv", "file:///tmp/a.mp3") == "mpv"


def test_format_player_requires_player():
    with pytest.raises(ModuleError) as info:
        format_player("", "https://www.youtube.com/")
    assert info.value.module == "Media Player"