"""Reading option values from INI-style configuration files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike

from .errors import ConversionError, FileError
from .names import split

_QUOTES = "'\"`"


def ini_join(args: Iterable[str]) -> str:
    """Join values with spaces, quoting any value that contains whitespace."""
    pieces = []
    for arg in args:
        if not any(ch.isspace() for ch in arg):
            pieces.append(arg)
        elif '"' not in arg:
            pieces.append(f'"{arg}"')
        else:
            pieces.append(f"'{arg}'")
    return " ".join(pieces)


def _split_up(text: str) -> list[str]:
    """Split on whitespace, keeping quoted sections together."""
    text = text.strip()
    output: list[str] = []
    while text:
        first = text[0]
        if first in _QUOTES:
            end = text.find(first, 1)
            escaped = False
            while end != -1 and text[end - 1] == "\\":
                end = text.find(first, end + 1)
                escaped = True
            if end != -1:
                value, text = text[1:end], text[end + 1:]
            else:
                value, text = text[1:], ""
            if escaped:
                value = value.replace("\\" + first, first)
        else:
            cut = next((index for index, ch in enumerate(text) if ch.isspace()), len(text))
            value, text = text[:cut], text[cut:]
        output.append(value)
        text = text.strip()
    return output


@dataclass
class ConfigItem:
    """One setting read from a configuration source."""

    parents: list[str] = field(default_factory=list)
    name: str = ""
    inputs: list[str] = field(default_factory=list)

    @property
    def fullname(self) -> str:
        """The parents and the name joined by dots."""
        return ".".join([*self.parents, self.name])


class Config(ABC):
    """Turns a configuration source into a list of items."""

    @abstractmethod
    def from_config(self, lines: Iterable[str] | str) -> list[ConfigItem]:
        """Parse configuration lines into items."""

    def to_flag(self, item: ConfigItem) -> str:
        """Return the single value of a flag item."""
        if len(item.inputs) == 1:
            return item.inputs[0]
        raise ConversionError.too_many_inputs_flag(item.fullname)

    def from_file(self, path: str | PathLike[str]) -> list[ConfigItem]:
        """Parse a configuration file, raising FileError when it cannot be read."""
        try:
            with open(path, encoding="utf-8") as handle:
                return self.from_config(handle)
        except OSError as exc:
            raise FileError.missing(str(path)) from exc


class ConfigINI(Config):
    """Reads INI files with sections, dotted names and ';' comments."""

    def from_config(self, lines: Iterable[str] | str) -> list[ConfigItem]:
        if isinstance(lines, str):
            lines = lines.splitlines()
        section = "default"
        output: list[ConfigItem] = []
        for raw in lines:
            line = raw.strip()
            if len(line) > 1 and line[0] == "[" and line[-1] == "]":
                section = line[1:-1]
                continue
            if not line or line[0] == ";":
                continue

            key, sep, value = line.partition("=")
            item = ConfigItem(name=key.strip())
            item.inputs = _split_up(value.strip()) if sep else ["ON"]

            if section.lower() != "default":
                item.parents = [section]
            if "." in item.name:
                *prefix, item.name = split(item.name, ".")
                item.parents.extend(prefix)
            output.append(item)
        return output