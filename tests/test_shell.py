import pytest

from infofetch.custom import ModuleError
from infofetch.shell import format_shell, format_terminal


def test_shell_with_version():
    assert format_shell("zsh", "5.9") == "zsh 5.9"


def test_shell_without_version():
    assert format_shell("bash") == "bash"


def test_shell_missing_raises():
    with pytest.raises(ModuleError) as info:
        format_shell("", "5.9")
    assert info.value.module == "Shell"


def test_terminal_same_names():
    assert format_terminal("kitty", "kitty") == "kitty"


def test_terminal_prefers_longer_exe_name():
    assert format_terminal("gnome-terminal-", "gnome-terminal-server") == "gnome-terminal-server"


def test_terminal_falls_back_to_process_name():
    assert format_terminal("login", "bash") == "login"


def test_terminal_without_exe_name():
    assert format_terminal("konsole") == "konsole"


def test_terminal_missing_raises():
    with pytest.raises(ModuleError) as info:
        format_terminal("", "kitty")
    assert info.value.module == "Terminal"