import pytest

from infofetch.strbuf import (
    equals_ignore_case,
    remove_all,
    remove_strings,
    remove_suffix_ignore_case,
    starts_with_ignore_case,
    substr_after_first,
    substr_after_first_str,
    substr_after_last,
    substr_before_first,
    substr_before_last,
    trim,
    trim_left,
    trim_right,
)


def test_source_sequence():
    text = "123456789"
    assert len(text) == 9
    assert starts_with_ignore_case(text, "123")
    text = remove_all(text, "78")
    assert len(text) == 7
    assert text == "1234569"
    text = remove_strings(text, ["23", "45", "9"])
    assert len(text) == 2
    assert text == "16"


def test_remove_all_does_not_rescan_formed_matches():
    assert remove_all("aaabbb", "ab") == "aabb"


def test_remove_all_multiple_and_empty():
    assert remove_all("x(R) y(R)", "(R)") == "x y"
    assert remove_all("abc", "") == "abc"
    assert remove_all("abc", "zz") == "abc"


def test_remove_strings_order_matters():
    assert remove_strings("Intel(R) Core(TM) CPU", ["(R)", "(TM)", " CPU"]) == "Intel Core"


def test_trims():
    assert trim_left("__a__", "_") == "a__"
    assert trim_right("__a__", "_") == "__a"
    assert trim("__a__", "_") == "a"
    assert trim("____", "_") == ""


def test_trim_requires_single_char():
    with pytest.raises(ValueError):
        trim("abc", "ab")


def test_substr_before():
    assert substr_before_first("a@b@c", "@") == "a"
    assert substr_before_last("a@b@c", "@") == "a@b"
    assert substr_before_first("abc", "@") == "abc"
    assert substr_before_last("abc", "@") == "abc"
    assert substr_before_last("", "@") == ""


def test_substr_after():
    assert substr_after_first("a/b/c", "/") == "b/c"
    assert substr_after_last("a/b/c", "/") == "c"
    assert substr_after_first("abc", "/") == "abc"
    assert substr_after_last("abc/", "/") == ""


def test_substr_after_first_str():
    assert substr_after_first_str("head\r\n\r\nbody", "\r\n\r\n") == "body"
    assert substr_after_first_str("nothing", "\r\n\r\n") == "nothing"
    assert substr_after_first_str("abc", "") == "abc"
    assert substr_after_first_str("abc", "bc") == ""


def test_starts_with_ignore_case():
    assert starts_with_ignore_case("XFCE4", "xfce")
    assert not starts_with_ignore_case("xf", "xfce")
    assert starts_with_ignore_case("anything", "")


def test_equals_ignore_case():
    assert equals_ignore_case("KDE Plasma", "kde plasma")
    assert not equals_ignore_case("KDE", "KDE Plasma")


def test_remove_suffix_ignore_case():
    assert remove_suffix_ignore_case("Breeze_Cursors", "cursors") == "Breeze_"
    assert remove_suffix_ignore_case("Adwaita", "cursors") == "Adwaita"
    assert remove_suffix_ignore_case("abc", "") == "abc"
    assert remove_suffix_ignore_case("s", "cursors") == "s"