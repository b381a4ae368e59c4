# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by SimpleArgParse.

Parse failures are terminal: they are raised where they are detected and stop
the scan over the argument vector. `ArgumentParser.handle_error()` decides
whether a failure prints the help screen or an error report.

Exception Hierarchy:
- ArgumentParserError
    ├── HelpRequested
    ├── MissingArgumentError
    ├── InvalidArgumentError
    ├── RequiredOptionMissingError
    └── OptionDefinitionError
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from simpleargparse.parser.option import Option


class ArgumentParserError(Exception):
    """Base exception for all SimpleArgParse errors."""


class HelpRequested(ArgumentParserError):
    """Raised when `--help` is encountered. Not a real failure."""

    def __init__(self, message: str = "Help requested"):
        super().__init__(message)


class MissingArgumentError(ArgumentParserError):
    """Raised when a value-taking flag is not followed by a value."""

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"No argument supplied: {flag}")


class InvalidArgumentError(ArgumentParserError):
    """Raised when the value following a flag fails type or path validation."""

    def __init__(self, flag: str, type: Any, value: str):
        self.flag = flag
        self.type = type
        self.value = value
        super().__init__(
            f"Invalid argument for '{flag}': expected {type}, but encountered '{value}'"
        )


class RequiredOptionMissingError(ArgumentParserError):
    """Raised when required options were never supplied."""

    def __init__(self, options: Iterable[Option]):
        self.options: list[Option] = list(options)
        super().__init__(f"Required options not supplied: {', '.join(self.flags)}")

    @property
    def flags(self) -> list[str]:
        return [option.flag for option in self.options]


class OptionDefinitionError(ArgumentParserError):
    """Raised when an option is registered or configured incorrectly."""
