"""A single command line option: its names, settings and parsed results."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from .defaults import MultiOptionPolicy
from .errors import (
    ArgumentMismatch,
    ConversionError,
    IncorrectConstruction,
    OptionAlreadyAdded,
    OptionNotFound,
    ValidationError,
)
from .names import find_member, get_names, remove_underscore, split, split_names, to_flag_value

T = TypeVar("T")

Callback = Callable[[list[str]], bool]

_TRUE = "true"
_FALSE = "false"
_EMPTY_FLAG = "{}"


class _CheckKind(Enum):
    CHECK = "check"
    TRANSFORM = "transform"
    EACH = "each"


@dataclass
class _Check:
    """A validator, transformer or observer attached to an option."""

    func: Callable[[str], Any]
    description: str = ""
    name: str = ""
    kind: _CheckKind = _CheckKind.CHECK

    @property
    def modifying(self) -> bool:
        return self.kind is _CheckKind.TRANSFORM

    def apply(self, value: str) -> tuple[str, str]:
        """Return the (possibly changed) value and an error message."""
        if self.kind is _CheckKind.TRANSFORM:
            return str(self.func(value)), ""
        if self.kind is _CheckKind.EACH:
            self.func(value)
            return value, ""
        return value, self.func(value) or ""

    def __call__(self, value: str) -> str:
        return self.apply(value)[1]


class Option:
    """An option with short, long and positional names and its parsed results."""

    def __init__(
        self,
        name: str,
        description: str = "",
        callback: Callback | None = None,
        parent: Any = None,
    ) -> None:
        self.snames, self.lnames, self.pname = get_names(split_names(name))
        self.description = description
        self.callback = callback
        self.parent = parent

        self.group = "Options"
        self.required = False
        self._ignore_case = False
        self._ignore_underscore = False
        self.configurable = True
        self.disable_flag_override = False
        self.delimiter: str | None = None
        self.always_capture_default = False
        self._multi_option_policy = MultiOptionPolicy.THROW

        self.envname = ""
        self.default_str = ""
        self.type_name: str | Callable[[], str] = ""
        self.default_function: Callable[[], str] | None = None

        self._type_size = 1
        self._expected = 1
        self._checks: list[_Check] = []
        self._needs: dict[Option, None] = {}
        self._excludes: dict[Option, None] = {}

        self.default_flag_values: list[tuple[str, str]] = []
        self.fnames: list[str] = []

        self.results: list[str] = []
        self.callback_run = False

    def __repr__(self) -> str:
        return f"Option({self.get_name(True, True)!r})"

    # ----- basic state -----

    @property
    def count(self) -> int:
        """Number of results collected."""
        return len(self.results)

    def __bool__(self) -> bool:
        return bool(self.results)

    def clear(self) -> None:
        """Forget all parsed results."""
        self.results.clear()

    # ----- settings with checks -----

    @property
    def arity(self) -> int:
        """Arguments making up one value: 0 for flags, negative for unlimited."""
        return self._type_size

    @property
    def expected(self) -> int:
        """Number of times the value is expected; negative means at least that many."""
        return self._expected

    @expected.setter
    def expected(self, value: int) -> None:
        if self._type_size == 0:
            raise IncorrectConstruction.set_flag(self.get_name(True, True))
        if value == 0:
            raise IncorrectConstruction.set_zero_expected(self.get_name())
        if self._expected == value:
            return
        if self._type_size >= 0:
            raise IncorrectConstruction.change_not_vector(self.get_name())
        if value != 1 and self._multi_option_policy is not MultiOptionPolicy.THROW:
            raise IncorrectConstruction.after_multi_opt(self.get_name())
        self._expected = value

    @property
    def multi_option_policy(self) -> MultiOptionPolicy:
        return self._multi_option_policy

    @multi_option_policy.setter
    def multi_option_policy(self, value: MultiOptionPolicy) -> None:
        if self.items_expected < 0:
            raise IncorrectConstruction.multi_option_policy(self.get_name())
        self._multi_option_policy = value

    @property
    def ignore_case(self) -> bool:
        return self._ignore_case

    @ignore_case.setter
    def ignore_case(self, value: bool) -> None:
        self._ignore_case = value
        self._ensure_unique()

    @property
    def ignore_underscore(self) -> bool:
        return self._ignore_underscore

    @ignore_underscore.setter
    def ignore_underscore(self, value: bool) -> None:
        self._ignore_underscore = value
        self._ensure_unique()

    def _ensure_unique(self) -> None:
        if self.parent is None:
            return
        for other in self.parent.options:
            if other is not self and other.shares_name_with(self):
                raise OptionAlreadyAdded(other.get_name(True, True))

    @property
    def items_expected(self) -> int:
        """Total values expected: positive for exactly, negative for at least."""
        size = abs(self._type_size * self._expected)
        loose = self._multi_option_policy is not MultiOptionPolicy.THROW or (
            self._expected < 0 and self._type_size < 0
        )
        return -size if loose else size

    @property
    def positional(self) -> bool:
        return bool(self.pname)

    @property
    def nonpositional(self) -> bool:
        return bool(self.snames or self.lnames)

    @property
    def validators(self) -> tuple[_Check, ...]:
        return tuple(self._checks)

    # ----- validators -----

    def check(self, validator: Callable[[str], str], description: str = "", name: str = "") -> Option:
        """Add a validator returning an error message (empty when the value is fine)."""
        self._checks.append(
            _Check(
                validator,
                description or getattr(validator, "description", ""),
                name or getattr(validator, "name", ""),
                _CheckKind.CHECK,
            )
        )
        return self

    def transform(self, func: Callable[[str], str], description: str = "", name: str = "") -> Option:
        """Add a function that rewrites each value; runs before other validators."""
        self._checks.insert(0, _Check(func, description, name, _CheckKind.TRANSFORM))
        return self

    def each(self, func: Callable[[str], Any]) -> Option:
        """Call func with every value as it is processed."""
        self._checks.append(_Check(func, "", "", _CheckKind.EACH))
        return self

    def get_validator(self, name: str = "") -> _Check:
        """Return the validator with this name, or the first one when name is empty."""
        for check in self._checks:
            if check.name == name:
                return check
        if not name and self._checks:
            return self._checks[0]
        raise OptionNotFound(f"Validator {name} Not Found")

    # ----- links between options -----

    def _find_sibling(self, name: str) -> Option:
        siblings = self.parent.options if self.parent is not None else ()
        for other in siblings:
            if other is not self and other.check_name(name):
                return other
        raise IncorrectConstruction.missing_option(name)

    def needs(self, *args: Option | str) -> Option:
        """Require other options (objects or names) whenever this one is given."""
        for arg in args:
            other = self._find_sibling(arg) if isinstance(arg, str) else arg
            if other in self._needs:
                raise OptionAlreadyAdded.requires(self.get_name(), other.get_name())
            self._needs[other] = None
        return self

    def remove_needs(self, option: Option) -> bool:
        return self._needs.pop(option, False) is None

    def excludes(self, *args: Option | str) -> Option:
        """Forbid other options (objects or names) alongside this one, in both directions."""
        for arg in args:
            other = self._find_sibling(arg) if isinstance(arg, str) else arg
            self._excludes[other] = None
            other._excludes[self] = None
        return self

    def remove_excludes(self, option: Option) -> bool:
        return self._excludes.pop(option, False) is None

    @property
    def needed_options(self) -> tuple[Option, ...]:
        return tuple(self._needs)

    @property
    def excluded_options(self) -> tuple[Option, ...]:
        return tuple(self._excludes)

    def set_flag_defaults(self, pairs: Iterable[tuple[str, str]]) -> Option:
        """Give flag names a value they produce when passed without one."""
        self.default_flag_values = list(pairs)
        self.fnames = [flag_name for flag_name, _ in self.default_flag_values]
        return self

    # ----- names -----

    def get_name(self, positional: bool = False, all_options: bool = False) -> str:
        """Return the most descriptive name, or every name joined by commas."""
        if all_options:
            names: list[str] = []
            if (positional and self.pname) or not (self.snames or self.lnames):
                names.append(self.pname)
            show_flags = self.items_expected == 0 and bool(self.fnames)
            for prefix, group in (("-", self.snames), ("--", self.lnames)):
                for item in group:
                    entry = prefix + item
                    if show_flags and self.check_fname(item):
                        entry += "{" + self.get_flag_value(item, "") + "}"
                    names.append(entry)
            return ",".join(names)
        if positional:
            return self.pname
        if self.lnames:
            return "--" + self.lnames[0]
        if self.snames:
            return "-" + self.snames[0]
        return self.pname

    def shares_name_with(self, other: Option) -> bool:
        """True if the options share a short or long name."""
        if any(other.check_sname(n) for n in self.snames):
            return True
        if any(other.check_lname(n) for n in self.lnames):
            return True
        if self._ignore_case or self._ignore_underscore:
            if any(self.check_sname(n) for n in other.snames):
                return True
            if any(self.check_lname(n) for n in other.lnames):
                return True
        return False

    def check_name(self, name: str) -> bool:
        """Match a name written with its dashes, or a positional name."""
        if len(name) > 2 and name.startswith("--"):
            return self.check_lname(name[2:])
        if len(name) > 1 and name.startswith("-"):
            return self.check_sname(name[1:])
        local = self.pname
        if self._ignore_underscore:
            local = remove_underscore(local)
            name = remove_underscore(name)
        if self._ignore_case:
            local = local.lower()
            name = name.lower()
        return name == local

    def check_sname(self, name: str) -> bool:
        return find_member(name, self.snames, self._ignore_case) is not None

    def check_lname(self, name: str) -> bool:
        return find_member(name, self.lnames, self._ignore_case, self._ignore_underscore) is not None

    def check_fname(self, name: str) -> bool:
        if not self.fnames:
            return False
        return find_member(name, self.fnames, self._ignore_case, self._ignore_underscore) is not None

    def get_flag_value(self, name: str, input_value: str) -> str:
        """Work out the value a flag stores when given by name with an optional value."""
        index = find_member(name, self.fnames, self._ignore_case, self._ignore_underscore)
        no_value = input_value in ("", _EMPTY_FLAG)
        if self.disable_flag_override and not no_value:
            if index is not None:
                if self.default_flag_values[index][1] != input_value:
                    raise ArgumentMismatch.flag_override(name)
            elif input_value != _TRUE:
                raise ArgumentMismatch.flag_override(name)
        if no_value:
            return _TRUE if index is None else self.default_flag_values[index][1]
        if index is None or self.default_flag_values[index][1] != _FALSE:
            return input_value
        try:
            value = to_flag_value(input_value)
        except ValueError:
            return input_value
        if value == 1:
            return _FALSE
        if value == -1:
            return _TRUE
        return str(-value)

    # ----- results -----

    def _store(self, value: str) -> int:
        if self.delimiter and self.delimiter in value:
            pieces = [piece for piece in split(value, self.delimiter) if piece]
            self.results.extend(pieces)
            return len(pieces)
        self.results.append(value)
        return 1

    def add_result(self, value: str) -> int:
        """Add a result, split on the delimiter if one is set; return how many were added."""
        added = self._store(value)
        self.callback_run = False
        return added

    def add_results(self, values: Iterable[str]) -> int:
        """Add several results; return how many were added."""
        added = sum(self._store(value) for value in values)
        self.callback_run = False
        return added

    def _validate(self, value: str) -> tuple[str, str]:
        error = ""
        for check in self._checks:
            try:
                value, error = check.apply(value)
            except ValidationError as exc:
                error = str(exc)
            if error:
                break
        return value, error

    def run_callback(self) -> None:
        """Validate the results and hand them to the callback."""
        self.callback_run = True
        if self._checks:
            for index, value in enumerate(self.results):
                value, error = self._validate(value)
                self.results[index] = value
                if error:
                    raise ValidationError(f"{self.get_name()}: {error}")
        if self.callback is None:
            return

        expected = self.items_expected
        trim = min(max(abs(expected), 1), len(self.results))
        policy = self._multi_option_policy
        if policy is MultiOptionPolicy.TAKE_LAST:
            values = self.results[len(self.results) - trim:]
        elif policy is MultiOptionPolicy.TAKE_FIRST:
            values = self.results[:trim]
        elif policy is MultiOptionPolicy.JOIN:
            values = ["\n".join(self.results)]
        else:
            received = len(self.results)
            if expected > 0 and received != expected:
                raise ArgumentMismatch.for_counts(self.get_name(), expected, received)
            if expected < 0 and (received < -expected or received % abs(self._type_size) != 0):
                raise ArgumentMismatch.for_counts(self.get_name(), expected, received)
            values = self.results
        if not self.callback(list(values)):
            raise ConversionError.for_results(self.get_name(), self.results)

    def as_type(self, convert: Callable[[str], T]) -> T:
        """Convert the result (or the default string) with convert."""
        if not self.results:
            text = self.default_str
        elif len(self.results) == 1:
            text = self.results[0]
        elif self._multi_option_policy is MultiOptionPolicy.THROW:
            raise ConversionError.for_results(self.get_name(), self.results)
        elif self._multi_option_policy is MultiOptionPolicy.TAKE_FIRST:
            text = self.results[0]
        elif self._multi_option_policy is MultiOptionPolicy.JOIN:
            text = ",".join(self.results)
        else:
            text = self.results[-1]
        try:
            return convert(text)
        except (ValueError, TypeError) as exc:
            raise ConversionError.for_results(self.get_name(), self.results) from exc

    def as_list(self, convert: Callable[[str], T]) -> list[T]:
        """Convert every result with convert."""
        try:
            return [convert(value) for value in self.results]
        except (ValueError, TypeError) as exc:
            raise ConversionError.for_results(self.get_name(), self.results) from exc

    # ----- defaults and types -----

    def type_size(self, size: int) -> Option:
        """Set how many arguments make up one value (0 makes a flag)."""
        self._type_size = size
        if size == 0:
            self.required = False
        if size < 0:
            self._expected = -1
        return self

    def capture_default_str(self) -> Option:
        """Set the default string from the default function, if there is one."""
        if self.default_function is not None:
            self.default_str = self.default_function()
        return self

    def default_val(self, value: str) -> Option:
        """Set the default string and run it through the callback."""
        self.default_str = value
        saved = self.results
        self.results = [value]
        try:
            self.run_callback()
        finally:
            self.results = saved
        return self

    @property
    def full_type_name(self) -> str:
        """The type name followed by every validator description."""
        base = self.type_name() if callable(self.type_name) else self.type_name
        return base + "".join(":" + c.description for c in self._checks if c.description)