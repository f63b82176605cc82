import pytest

from infofetch.custom import ModuleError
from infofetch.theme import format_theme, plasma_color_pretty


def test_color_pretty_removes_widget_prefix():
    assert plasma_color_pretty("BreezeDark", "Breeze") == "Dark"


def test_color_pretty_keeps_unrelated_scheme():
    assert plasma_color_pretty("Oxygen", "Breeze") == "Oxygen"


def test_color_pretty_prefix_is_case_sensitive():
    assert plasma_color_pretty("breezeDark", "Breeze") == "breezeDark"


def test_color_pretty_trims_spaces():
    assert plasma_color_pretty("Breeze Light", "Breeze") == "Light"


def test_format_theme_full():
    assert format_theme("Breeze", "BreezeDark", "Adwaita [GTK3]") == "Breeze (Dark) [Plasma], Adwaita [GTK3]"


def test_format_theme_gtk_only():
    assert format_theme("", "", "Adwaita [GTK2/3/4]") == "Adwaita [GTK2/3/4]"


def test_format_theme_widget_only():
    assert format_theme("Breeze", "", "") == "Breeze [Plasma]"


def test_format_theme_scheme_equal_to_widget_falls_back():
    assert format_theme("Breeze", "Breeze", "") == "Breeze (Breeze) [Plasma]"


def test_format_theme_color_scheme_only():
    result = format_theme("", "Oxygen", "")
    assert result.startswith("Oxygen")
    assert result.endswith(" [Plasma]")


def test_format_theme_nothing_raises():
    with pytest.raises(ModuleError) as info:
        format_theme("", "", "")
    assert info.value.module == "Theme"