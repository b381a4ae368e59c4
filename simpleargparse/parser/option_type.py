# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionType`, the closed set of value types an `Option` can carry.

Each member knows how to validate a raw command-line literal (`is_valid`) and
how to convert a validated literal into its Python value (`parse`). The nine
path members additionally check the live file system when validating.

Supports alias coercion for shorthand or config-friendly values as well as
the Python builtins most callers reach for first.

Exports:
    - OptionType: Enum of supported option value types.

Example:
    OptionType("int")          → OptionType.INTEGER
    OptionType(float)          → OptionType.DOUBLE
    OptionType("existing-dir") → OptionType.EXISTING_DIRECTORY
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from simpleargparse.parser.utils import (
    check_path,
    coerce_bool,
    coerce_float,
    coerce_integer,
)


class OptionType(Enum):
    """
    Defines the type of value an option accepts.

    Members:
        STRING: Any literal, stored unchanged (default).
        BOOLEAN: A flag that takes no value; each occurrence flips the default.
        BYTE, SHORT, INTEGER, LONG: 8, 16, 32 and 64-bit signed integers.
        FLOAT, DOUBLE: Single and double precision floating point numbers.
        FILE: A path that is not a directory, or does not exist yet.
        DIRECTORY: A path that is a directory, or does not exist yet.
        FILE_OR_DIRECTORY: Any path.
        EXISTING_FILE, EXISTING_DIRECTORY, EXISTING_FILE_OR_DIRECTORY:
            The path must exist (and be of the given kind).
        NONEXISTING_FILE, NONEXISTING_DIRECTORY, NONEXISTING_FILE_OR_DIRECTORY:
            Nothing may exist at the path.

    Aliases:
        - "str" → "string", "bool" → "boolean", "int" → "integer"
        - "path" → "file_or_directory", "dir" → "directory"
        - `str`, `bool`, `int`, `float`, `pathlib.Path`
    """

    STRING = "string"
    BOOLEAN = "boolean"
    BYTE = "byte"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    FILE = "file"
    DIRECTORY = "directory"
    FILE_OR_DIRECTORY = "file_or_directory"
    EXISTING_FILE = "existing_file"
    EXISTING_DIRECTORY = "existing_directory"
    EXISTING_FILE_OR_DIRECTORY = "existing_file_or_directory"
    NONEXISTING_FILE = "nonexisting_file"
    NONEXISTING_DIRECTORY = "nonexisting_directory"
    NONEXISTING_FILE_OR_DIRECTORY = "nonexisting_file_or_directory"

    @classmethod
    def choices(cls) -> list[OptionType]:
        """Return a list of all option types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "bool": "boolean",
            "int": "integer",
            "path": "file_or_directory",
            "dir": "directory",
            "existing_dir": "existing_directory",
            "nonexisting_dir": "nonexisting_directory",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        builtins: dict[Any, OptionType] = {
            str: cls.STRING,
            bool: cls.BOOLEAN,
            int: cls.INTEGER,
            float: cls.DOUBLE,
            Path: cls.FILE_OR_DIRECTORY,
        }
        if isinstance(value, type) and value in builtins:
            return builtins[value]
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def is_path(self) -> bool:
        return self in _PATH_RULES

    @property
    def is_numeric(self) -> bool:
        return self in _INTEGER_BITS or self in (OptionType.FLOAT, OptionType.DOUBLE)

    def is_valid(self, value: str) -> bool:
        """
        Check whether a raw literal is acceptable for this type.

        Nothing is converted or stored. Path types consult the file system,
        so the answer reflects its state at the moment of the call.
        """
        if self in (OptionType.STRING, OptionType.BOOLEAN):
            return True
        if self.is_path:
            kind, must_exist = _PATH_RULES[self]
            return check_path(value, kind, must_exist)
        try:
            self.parse(value)
        except ValueError:
            return False
        return True

    def parse(self, value: str) -> Any:
        """
        Convert a literal that passed `is_valid()` into its typed value.

        Raises:
            ValueError: For numeric types, if the literal does not parse.
        """
        if self is OptionType.STRING:
            return value
        if self is OptionType.BOOLEAN:
            return coerce_bool(value)
        if self in _INTEGER_BITS:
            return coerce_integer(value, _INTEGER_BITS[self])
        if self is OptionType.FLOAT:
            return coerce_float(value, single=True)
        if self is OptionType.DOUBLE:
            return coerce_float(value)
        return Path(value)

    def zero_value(self) -> Any:
        """Return the value a non-repeatable option holds when it has no default."""
        if self is OptionType.STRING:
            return ""
        if self is OptionType.BOOLEAN:
            return False
        if self in _INTEGER_BITS:
            return 0
        if self in (OptionType.FLOAT, OptionType.DOUBLE):
            return 0.0
        return Path(".")

    def __str__(self) -> str:
        """Return the upper-case name used in diagnostics, e.g. 'INTEGER'."""
        return self.name


_INTEGER_BITS: dict[OptionType, int] = {
    OptionType.BYTE: 8,
    OptionType.SHORT: 16,
    OptionType.INTEGER: 32,
    OptionType.LONG: 64,
}

# kind, must_exist
_PATH_RULES: dict[OptionType, tuple[str, bool | None]] = {
    OptionType.FILE: ("file", None),
    OptionType.DIRECTORY: ("directory", None),
    OptionType.FILE_OR_DIRECTORY: ("any", None),
    OptionType.EXISTING_FILE: ("file", True),
    OptionType.EXISTING_DIRECTORY: ("directory", True),
    OptionType.EXISTING_FILE_OR_DIRECTORY: ("any", True),
    OptionType.NONEXISTING_FILE: ("file", False),
    OptionType.NONEXISTING_DIRECTORY: ("directory", False),
    OptionType.NONEXISTING_FILE_OR_DIRECTORY: ("any", False),
}
