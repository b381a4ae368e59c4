# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Namespace`, the value store produced by `ArgumentParser.parse_args()`.

A namespace is seeded from the defaults of every registered option and then
updated while the argument vector is scanned: scalar options are overwritten
(last occurrence wins), repeatable options are appended to.

Hosts read results back through typed accessors. The numeric accessors
reinterpret the string form of the stored value, so a STRING option holding
"2" can be read with `get_int()` just as well as an INTEGER option.

Typical Usage:
    namespace = parser.parse_args(["--count", "3", "--tag", "a", "--tag", "b"])
    namespace.get_int("count")   # 3
    namespace.get_list("tag")    # ["a", "b"]
    namespace["count"]           # 3
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from simpleargparse.parser.option import Option
from simpleargparse.parser.utils import coerce_bool, coerce_float, coerce_integer


class Namespace:
    """
    Mapping from option name to a typed value or a list of typed values.

    Attributes:
        help_requested (bool): True if `--help` was seen while parsing.
        consumed_indices (frozenset[int]): Positions in the argument vector
            that were consumed as flags or flag values.
    """

    def __init__(self, options: Iterable[Option] | None = None) -> None:
        self._values: dict[str, Any] = {}
        self.help_requested: bool = False
        self.consumed_indices: frozenset[int] = frozenset()
        for option in options or []:
            self._values[option.name] = option.resolve_default()

    def _get(self, name: str) -> Any:
        try:
            return self._values[name]
        except KeyError:
            raise KeyError(f"Unknown option '{name}'") from None

    def set_value(self, name: str, value: Any) -> None:
        self._values[name] = value

    def add_value(self, name: str, value: Any) -> None:
        self.get_list(name).append(value)

    def flip_default(self, name: str) -> bool:
        """Return the logical NOT of the stored value, read as a boolean."""
        return not coerce_bool(self._values.get(name))

    def get_string(self, name: str) -> str | None:
        value = self._get(name)
        if value is None:
            return None
        return str(value)

    def get_boolean(self, name: str) -> bool:
        return coerce_bool(self._get(name))

    def get_byte(self, name: str) -> int:
        return coerce_integer(self._get(name), 8)

    def get_short(self, name: str) -> int:
        return coerce_integer(self._get(name), 16)

    def get_int(self, name: str) -> int:
        return coerce_integer(self._get(name), 32)

    def get_long(self, name: str) -> int:
        return coerce_integer(self._get(name), 64)

    def get_float(self, name: str) -> float:
        return coerce_float(self._get(name), single=True)

    def get_double(self, name: str) -> float:
        return coerce_float(self._get(name))

    def get_file(self, name: str) -> Path | None:
        value = self._values.get(name)
        if value is None:
            return None
        return Path(str(value))

    def get_list(self, name: str) -> list[Any]:
        value = self._get(name)
        if not isinstance(value, list):
            raise TypeError(f"Option '{name}' does not hold a list of values")
        return value

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def names(self) -> list[str]:
        return list(self._values)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the stored values."""
        return dict(self._values)

    def __getitem__(self, name: str) -> Any:
        return self._get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        return f"Namespace({self._values!r})"
