"""Small string helpers shared by the information modules."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "remove_all",
    "remove_strings",
    "trim_left",
    "trim_right",
    "trim",
    "substr_before_first",
    "substr_before_last",
    "substr_after_first",
    "substr_after_last",
    "substr_after_first_str",
    "starts_with_ignore_case",
    "equals_ignore_case",
    "remove_suffix_ignore_case",
]


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def remove_all(text: str, sub: str) -> str:
    """Remove every occurrence of ``sub``.

    After each removal the search resumes at the position of the removed
    text, so a match that only forms by the removal is not removed again.
    """
    if not sub:
        return text
    index = text.find(sub)
    while index != -1:
        text = text[:index] + text[index + len(sub):]
        index = text.find(sub, index)
    return text


def remove_strings(text: str, strings: Iterable[str]) -> str:
    """Apply :func:`remove_all` for each string, in order."""
    for sub in strings:
        text = remove_all(text, sub)
    return text


def trim_left(text: str, char: str) -> str:
    """Strip leading repetitions of a single character."""
    _check_char(char)
    return text.lstrip(char)


def trim_right(text: str, char: str) -> str:
    """Strip trailing repetitions of a single character."""
    _check_char(char)
    return text.rstrip(char)


def trim(text: str, char: str) -> str:
    """Strip a single character from both ends."""
    _check_char(char)
    return text.strip(char)


def substr_before_first(text: str, char: str) -> str:
    """Text before the first ``char``; unchanged if it does not occur."""
    _check_char(char)
    return text.partition(char)[0]


def substr_before_last(text: str, char: str) -> str:
    """Text before the last ``char``; unchanged if it does not occur."""
    _check_char(char)
    head, sep, _ = text.rpartition(char)
    return head if sep else text


def substr_after_first(text: str, char: str) -> str:
    """Text after the first ``char``; unchanged if it does not occur."""
    _check_char(char)
    _, sep, tail = text.partition(char)
    return tail if sep else text


def substr_after_last(text: str, char: str) -> str:
    """Text after the last ``char``; unchanged if it does not occur."""
    _check_char(char)
    _, sep, tail = text.rpartition(char)
    return tail if sep else text


def substr_after_first_str(text: str, sub: str) -> str:
    """Text after the first ``sub``; unchanged if absent or ``sub`` is empty."""
    if not sub:
        return text
    _, sep, tail = text.partition(sub)
    return tail if sep else text


def starts_with_ignore_case(text: str, prefix: str) -> bool:
    """Case-insensitive prefix test."""
    return text[: len(prefix)].lower() == prefix.lower()


def equals_ignore_case(text: str, other: str) -> bool:
    """Case-insensitive equality."""
    return text.lower() == other.lower()


def remove_suffix_ignore_case(text: str, suffix: str) -> str:
    """Remove ``suffix`` from the end if it matches regardless of case."""
    if not suffix:
        return text
    if len(suffix) <= len(text) and text[-len(suffix):].lower() == suffix.lower():
        return text[: -len(suffix)]
    return text