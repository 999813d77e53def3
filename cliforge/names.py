"""Helpers for splitting and matching option names."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import BadNameString


def _valid_first_char(char: str) -> bool:
    return (char.isascii() and char.isalpha()) or char in "_?@"


def _valid_later_char(char: str) -> bool:
    return _valid_first_char(char) or (char.isascii() and char.isdigit()) or char in ".-"


def _valid_name_string(text: str) -> bool:
    return bool(text) and _valid_first_char(text[0]) and all(_valid_later_char(c) for c in text[1:])


def split_names(text: str) -> list[str]:
    """Split a comma separated name string, trimming whitespace around each name."""
    return [part.strip() for part in text.split(",")]


def get_names(names: Sequence[str]) -> tuple[list[str], list[str], str]:
    """Sort names into short names, long names and a positional name."""
    short_names: list[str] = []
    long_names: list[str] = []
    positional = ""
    for name in names:
        if not name:
            continue
        if len(name) > 1 and name[0] == "-" and name[1] != "-":
            if len(name) == 2 and _valid_first_char(name[1]):
                short_names.append(name[1])
            else:
                raise BadNameString(f"Invalid one char name: {name}")
        elif len(name) > 2 and name.startswith("--"):
            long_name = name[2:]
            if _valid_name_string(long_name):
                long_names.append(long_name)
            else:
                raise BadNameString(f"Bad long name: {name}")
        elif name in ("-", "--"):
            raise BadNameString(f"Must have a name, not just dashes: {name}")
        else:
            if positional:
                raise BadNameString(f"Only one positional name allowed, remove: {name}")
            positional = name
    return short_names, long_names, positional


def remove_underscore(text: str) -> str:
    """Return the text with every underscore removed."""
    return text.replace("_", "")


def find_member(
    name: str,
    names: Sequence[str],
    ignore_case: bool = False,
    ignore_underscore: bool = False,
) -> int | None:
    """Return the index of the first entry of names matching name, or None."""

    def normalise(value: str) -> str:
        if ignore_underscore:
            value = remove_underscore(value)
        if ignore_case:
            value = value.lower()
        return value

    target = normalise(name)
    return next((index for index, candidate in enumerate(names) if normalise(candidate) == target), None)


_TRUE_WORDS = frozenset({"true", "on", "yes", "enable"})
_FALSE_WORDS = frozenset({"false", "off", "no", "disable"})
_TRUE_CHARS = frozenset("1ty+")
_FALSE_CHARS = frozenset("0fn-")


def to_flag_value(text: str) -> int:
    """Interpret a flag argument: positive for true, -1 for false, or a count.

    Raises ValueError when the text cannot be read as a flag value.
    """
    if text == "true":
        return 1
    if text == "false":
        return -1
    lowered = text.lower()
    if len(lowered) == 1:
        if lowered in _FALSE_CHARS:
            return -1
        if lowered in _TRUE_CHARS:
            return 1
        if lowered.isdigit():
            return int(lowered)
        raise ValueError(f"unrecognized character: {text!r}")
    if lowered in _TRUE_WORDS:
        return 1
    if lowered in _FALSE_WORDS:
        return -1
    return int(lowered)


def split(text: str, delimiter: str) -> list[str]:
    """Split text on a delimiter, dropping a single trailing empty piece."""
    if not text:
        return [""]
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts