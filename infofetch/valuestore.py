"""A small case-insensitive store of named string values."""

from __future__ import annotations

__all__ = ["ValueStore"]

MAX_NAME_LENGTH = 31
MAX_VALUE_LENGTH = 1023


class ValueStore:
    """Maps names to values, comparing names without regard to case.

    Names keep the spelling they were first stored with.
    """

    def __init__(self) -> None:
        self._pairs: dict[str, tuple[str, str]] = {}

    def set(self, name: str, value: str) -> None:
        """Store ``value`` under ``name``, replacing any earlier value."""
        if len(name) > MAX_NAME_LENGTH:
            raise ValueError(f"name longer than {MAX_NAME_LENGTH} characters: {name!r}")
        if len(value) > MAX_VALUE_LENGTH:
            raise ValueError(f"value longer than {MAX_VALUE_LENGTH} characters")
        folded = name.lower()
        stored_name = self._pairs[folded][0] if folded in self._pairs else name
        self._pairs[folded] = (stored_name, value)

    def get(self, name: str) -> str | None:
        """Return the value stored under ``name``, or None."""
        pair = self._pairs.get(name.lower())
        return pair[1] if pair is not None else None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._pairs

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self):
        return (name for name, _ in self._pairs.values())