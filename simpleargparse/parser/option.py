# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` class used by `ArgumentParser` to describe one flag.

An option knows its spelling (a primary flag and an optional secondary one),
the name it is stored under in the `Namespace`, its `OptionType`, whether it
takes a value, may repeat or is required, its default and its help text.

Options should be created using `ArgumentParser.add_option()`. They may be
reconfigured through their attributes until parsing starts; the attribute
setters keep the shape consistent:
- a BOOLEAN option never takes a value, and an option that takes no value is
  BOOLEAN;
- letting a BOOLEAN option take a value turns it into a STRING option;
- marking an option required clears its default.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from simpleargparse.exceptions import OptionDefinitionError
from simpleargparse.parser.option_type import OptionType
from simpleargparse.parser.utils import coerce_bool


class Option:
    """
    Represents one registered command-line flag.

    Attributes:
        flag (str): Primary flag, e.g. `-o`.
        second_flag (str | None): Optional alternative spelling, e.g. `--out`.
        name (str): Key of the option's value in the `Namespace`.
        type (OptionType): Type of the value.
        takes_value (bool): Whether the flag consumes the following token.
        repeatable (bool): Whether occurrences accumulate into a list.
        required (bool): Whether parsing fails when the flag never appears.
        default (Any): Value used when the flag never appears.
        help (str): Help text, may span several lines.
        display_name (str | None): Placeholder shown in usage and help text.
    """

    def __init__(
        self,
        flag: str,
        second_flag: str | None = None,
        *,
        dest: str | None = None,
        takes_value: bool = True,
        type: OptionType | str | Any = OptionType.STRING,
        repeatable: bool = False,
        required: bool = False,
        default: Any = None,
        help: str | None = None,
        display_name: str | None = None,
    ) -> None:
        self.flag: str = flag
        self.second_flag: str | None = second_flag
        self.name: str = dest or flag.lstrip("-")
        if not self.name:
            raise OptionDefinitionError(f"Cannot derive a name from flag '{flag}'")
        self._type: OptionType = OptionType.STRING
        self._takes_value: bool = True
        self._required: bool = False
        self.default: Any = default
        self.type = type
        if not takes_value:
            self.takes_value = False
        self.repeatable: bool = repeatable
        self.required = required
        self.help: str = help if help is not None else self.name
        self.display_name: str | None = display_name

    @property
    def type(self) -> OptionType:
        return self._type

    @type.setter
    def type(self, value: OptionType | str | Any) -> None:
        try:
            self._type = OptionType(value)
        except ValueError as error:
            raise OptionDefinitionError(
                f"Invalid type for option '{self.name}': {error}"
            ) from error
        self._takes_value = self._type is not OptionType.BOOLEAN

    @property
    def takes_value(self) -> bool:
        return self._takes_value

    @takes_value.setter
    def takes_value(self, value: bool) -> None:
        self._takes_value = value
        if not value:
            self._type = OptionType.BOOLEAN
        elif self._type is OptionType.BOOLEAN:
            self._type = OptionType.STRING

    @property
    def required(self) -> bool:
        return self._required

    @required.setter
    def required(self, value: bool) -> None:
        self._required = value
        if value:
            self.default = None

    @property
    def flags(self) -> tuple[str, ...]:
        """Primary flag followed by the secondary flag, if any."""
        if self.second_flag:
            return (self.flag, self.second_flag)
        return (self.flag,)

    @property
    def placeholder(self) -> str:
        """Value placeholder shown in usage and help text."""
        return self.display_name or self.name.upper()

    def get_flag_text(self) -> str:
        """Get the flag text for the option, e.g. `-o, --out`."""
        return ", ".join(self.flags)

    def get_usage_text(self) -> str:
        """Get the token rendered for this option on the usage line."""
        text = self.get_flag_text()
        if self.takes_value:
            text = f"{text} {self.placeholder}"
        if self.repeatable:
            text = f"{text}..."
        if not self.required:
            text = f"[{text}]"
        return text

    def _coerce_default(self, value: Any) -> Any:
        if self.type.is_path and isinstance(value, (str, os.PathLike)):
            return Path(value)
        if not isinstance(value, str) or self.type is OptionType.STRING:
            return value
        if self.type is OptionType.BOOLEAN:
            return coerce_bool(value)
        try:
            return self.type.parse(value)
        except ValueError as error:
            raise OptionDefinitionError(
                f"Default value {value!r} for '{self.name}' cannot be parsed as {self.type}: {error}"
            ) from error

    def resolve_default(self) -> Any:
        """
        Return the value a fresh `Namespace` holds for this option.

        Repeatable options start from a copy of a list or tuple default, or
        an empty list. Other options use their default, or the zero value of
        their type when they have none. String defaults for non-string types
        are parsed.

        Raises:
            OptionDefinitionError: If a string default cannot be parsed.
        """
        if self.repeatable:
            if isinstance(self.default, (list, tuple)):
                return [self._coerce_default(item) for item in self.default]
            return []
        if self.default is None:
            return self.type.zero_value()
        return self._coerce_default(self.default)

    def flip_value(self) -> bool:
        """The value a repeatable BOOLEAN option appends on every occurrence."""
        return not coerce_bool(self.default)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return False
        return self.name == other.name

    def __lt__(self, other: Option) -> bool:
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return (
            f"Option(name={self.name!r}, flag={self.flag!r}, "
            f"second_flag={self.second_flag!r}, type={self.type}, "
            f"takes_value={self.takes_value}, default={self.default!r}, "
            f"required={self.required}, repeatable={self.repeatable})"
        )
