"""Exception hierarchy raised while building and parsing command lines."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes associated with each kind of error."""

    SUCCESS = 0
    INCORRECT_CONSTRUCTION = 100
    BAD_NAME_STRING = 101
    OPTION_ALREADY_ADDED = 102
    FILE_ERROR = 103
    CONVERSION_ERROR = 104
    VALIDATION_ERROR = 105
    OPTION_NOT_FOUND = 113
    ARGUMENT_MISMATCH = 114
    BASE_CLASS = 127


class Error(Exception):
    """Base class of every error the library raises."""

    default_exit_code: ExitCode = ExitCode.BASE_CLASS

    def __init__(self, message: str = "", exit_code: int | None = None, name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = int(self.default_exit_code if exit_code is None else exit_code)
        self.name = name if name else type(self).__name__

    def __str__(self) -> str:
        return self.message


class ConstructionError(Error):
    """Raised when an application or option is defined incorrectly."""


class IncorrectConstruction(ConstructionError):
    """Raised when an option is configured in a contradictory way."""

    default_exit_code = ExitCode.INCORRECT_CONSTRUCTION

    @classmethod
    def set_flag(cls, name: str) -> IncorrectConstruction:
        return cls(f"{name}: Cannot set an expected number for flags")

    @classmethod
    def set_zero_expected(cls, name: str) -> IncorrectConstruction:
        return cls(f"{name}: Cannot set 0 expected, use a flag instead")

    @classmethod
    def change_not_vector(cls, name: str) -> IncorrectConstruction:
        return cls(f"{name}: You can only change the expected arguments for vectors")

    @classmethod
    def after_multi_opt(cls, name: str) -> IncorrectConstruction:
        return cls(f"{name}: You can't change expected arguments after you've changed the multi option policy!")

    @classmethod
    def missing_option(cls, name: str) -> IncorrectConstruction:
        return cls(f"Option {name} is not defined")

    @classmethod
    def multi_option_policy(cls, name: str) -> IncorrectConstruction:
        return cls(f"{name}: multi_option_policy only works for flags and exact value options")


class BadNameString(ConstructionError):
    """Raised when an option name string cannot be understood."""

    default_exit_code = ExitCode.BAD_NAME_STRING


class OptionAlreadyAdded(ConstructionError):
    """Raised when a name or link is added twice."""

    default_exit_code = ExitCode.OPTION_ALREADY_ADDED

    @classmethod
    def requires(cls, name: str, other: str) -> OptionAlreadyAdded:
        return cls(f"{name} requires {other}")


class ParseError(Error):
    """Base class for errors found while parsing input."""


class ConversionError(ParseError):
    """Raised when parsed text cannot be converted to the target value."""

    default_exit_code = ExitCode.CONVERSION_ERROR

    @classmethod
    def too_many_inputs_flag(cls, name: str) -> ConversionError:
        return cls(f"{name}: too many inputs for a flag")

    @classmethod
    def for_results(cls, name: str, results: Iterable[str]) -> ConversionError:
        return cls(f"Could not convert: {name} = {','.join(results)}")


class ValidationError(ParseError):
    """Raised when a validator rejects a value."""

    default_exit_code = ExitCode.VALIDATION_ERROR


class ArgumentMismatch(ParseError):
    """Raised when the wrong number of arguments is given."""

    default_exit_code = ExitCode.ARGUMENT_MISMATCH

    @classmethod
    def for_counts(cls, name: str, expected: int, received: int) -> ArgumentMismatch:
        if expected > 0:
            return cls(f"Expected exactly {expected} arguments to {name}, got {received}")
        return cls(f"Expected at least {-expected} arguments to {name}, got {received}")

    @classmethod
    def flag_override(cls, name: str) -> ArgumentMismatch:
        return cls(f"{name} was given a disallowed flag override")


class FileError(ParseError):
    """Raised when a file cannot be read."""

    default_exit_code = ExitCode.FILE_ERROR

    @classmethod
    def missing(cls, name: str) -> FileError:
        return cls(f"{name} was not readable (missing?)")


class OptionNotFound(Error):
    """Raised when a requested option, validator or subcommand does not exist."""

    default_exit_code = ExitCode.OPTION_NOT_FOUND