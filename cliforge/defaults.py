"""Default settings that new options copy when they are created."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class MultiOptionPolicy(Enum):
    """What to do when an option receives more values than it expects."""

    THROW = "throw"
    TAKE_LAST = "take_last"
    TAKE_FIRST = "take_first"
    JOIN = "join"


@dataclass
class OptionDefaults:
    """Settings shared by options; copied onto each new option."""

    group: str = "Options"
    required: bool = False
    ignore_case: bool = False
    ignore_underscore: bool = False
    configurable: bool = True
    disable_flag_override: bool = False
    delimiter: str | None = None
    always_capture_default: bool = False
    multi_option_policy: MultiOptionPolicy = MultiOptionPolicy.THROW

    def take_last(self) -> OptionDefaults:
        """Keep only the last value given."""
        self.multi_option_policy = MultiOptionPolicy.TAKE_LAST
        return self

    def take_first(self) -> OptionDefaults:
        """Keep only the first value given."""
        self.multi_option_policy = MultiOptionPolicy.TAKE_FIRST
        return self

    def join(self) -> OptionDefaults:
        """Join all values given into one."""
        self.multi_option_policy = MultiOptionPolicy.JOIN
        return self

    def apply_to(self, option: Any) -> Any:
        """Copy these settings onto an option and return it."""
        option.group = self.group
        option.required = self.required
        option.ignore_case = self.ignore_case
        option.ignore_underscore = self.ignore_underscore
        option.configurable = self.configurable
        option.disable_flag_override = self.disable_flag_override
        option.delimiter = self.delimiter
        option.always_capture_default = self.always_capture_default
        option.multi_option_policy = self.multi_option_policy
        return option