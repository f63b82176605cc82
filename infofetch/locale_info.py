"""System locale from locale.conf or the environment."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from pathlib import Path

from .custom import ModuleError

__all__ = ["locale_from_env", "parse_locale_conf", "detect_locale"]

MODULE_NAME = "Locale"

_ENV_VARIABLES = ("LANG", "LC_ALL", "LC_CTYPE", "LC_MESSAGES")
_LANG_RE = re.compile(r"^\s*LANG\s*=\s*(.*?)\s*$")


def locale_from_env(environ: Mapping[str, str] | None = None) -> str:
    """The first non-empty of LANG, LC_ALL, LC_CTYPE and LC_MESSAGES."""
    environ = os.environ if environ is None else environ
    return next((environ[name] for name in _ENV_VARIABLES if environ.get(name)), "")


def parse_locale_conf(text: str) -> str:
    """The LANG value of locale.conf content, or an empty string."""
    for line in text.splitlines():
        match = _LANG_RE.match(line)
        if match:
            value = match.group(1)
            if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                value = value[1:-1]
            return value
    return ""


def detect_locale(
    conf_path: str | Path = "/etc/locale.conf",
    environ: Mapping[str, str] | None = None,
) -> str:
    """Locale from ``conf_path``, falling back to the environment."""
    try:
        locale = parse_locale_conf(Path(conf_path).read_text(errors="replace"))
    except OSError:
        locale = ""
    if not locale:
        locale = locale_from_env(environ)
    if not locale:
        raise ModuleError(MODULE_NAME, "No locale found")
    return locale