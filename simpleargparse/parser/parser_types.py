# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Transient state for a single `ArgumentParser.parse_args()` call.

`ParseState` holds the flag lookup table, the required options that have not
been seen yet and the cursor into the argument vector. A fresh state is built
for every parse, so parses against different argument vectors never share
anything but the (read-only) option definitions.
"""
from dataclasses import dataclass, field
from typing import Iterable

from simpleargparse.exceptions import OptionDefinitionError
from simpleargparse.parser.option import Option


@dataclass
class ParseState:
    """Tracks lookup tables and progress while scanning an argument vector."""

    flag_map: dict[str, Option] = field(default_factory=dict)
    pending_required: dict[str, Option] = field(default_factory=dict)
    cursor: int = 0
    consumed_indices: set[int] = field(default_factory=set)
    help_requested: bool = False

    @classmethod
    def from_options(cls, options: Iterable[Option]) -> "ParseState":
        """
        Build the lookup table and the pending-required set.

        Raises:
            OptionDefinitionError: If two options share a name or a flag.
        """
        state = cls()
        names: set[str] = set()
        for option in options:
            if option.name in names:
                raise OptionDefinitionError(
                    f"Option name '{option.name}' is used by more than one option"
                )
            names.add(option.name)
            for flag in option.flags:
                if flag in state.flag_map:
                    raise OptionDefinitionError(
                        f"Flag '{flag}' is already used by option '{state.flag_map[flag].name}'"
                    )
                state.flag_map[flag] = option
            if option.required:
                state.pending_required[option.name] = option
        return state

    def mark_matched(self, option: Option) -> None:
        """Record that an option was seen; the first match satisfies it."""
        self.pending_required.pop(option.name, None)

    def consume(self, *indices: int) -> None:
        self.consumed_indices.update(indices)
