# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, a small declarative flag parser.

Callers register options, hand the parser an argument vector and read the
typed results back from a `Namespace`. The parser only reacts to tokens that
match a registered flag (or `--help`); anything else is left alone, which
makes it possible to run several parsers over the same argument vector, each
consuming only the flags it owns.

Key Features:
- Declarative option registration via `add_option()`
- Typed values, including integer widths and file-system path kinds
- Repeatable options that accumulate values in order
- Required options, reported all at once when missing
- In-place consumption of recognized tokens for layered parsers
- An error-suppressing mode that still returns a best-effort `Namespace`
- Plain-text, word-wrapped help screen generation

Public Interface:
- `add_option(...)`: Register a new option.
- `parse_args(...)`: Parse an argument vector into a `Namespace`.
- `generate_help_screen(...)`: Render the help screen as a string.
- `handle_error(...)`: Print help or an error report for a parse failure.

Example Usage:
    parser = ArgumentParser("Counts words in files.")
    parser.add_option("-i", "--input", type=OptionType.EXISTING_FILE,
                      repeatable=True, required=True, help="File to read.")
    parser.add_option("-v", "--verbose", takes_value=False)

    try:
        namespace = parser.parse_args(["-i", "a.txt", "-v"])
    except ArgumentParserError as error:
        parser.handle_error(error)
"""
from __future__ import annotations

import sys
from typing import Any

from rich.markup import escape
from rich.traceback import Traceback

from simpleargparse.console import console, error_console, print_plain
from simpleargparse.exceptions import (
    ArgumentParserError,
    HelpRequested,
    InvalidArgumentError,
    MissingArgumentError,
    OptionDefinitionError,
    RequiredOptionMissingError,
)
from simpleargparse.help import HelpFormat, HelpFormatter
from simpleargparse.help.formatter import HELP_FLAG
from simpleargparse.logger import logger
from simpleargparse.parser.namespace import Namespace
from simpleargparse.parser.option import Option
from simpleargparse.parser.parser_types import ParseState


class ArgumentParser:
    """
    Declarative command-line flag parser.

    Features:
    - Flags with an optional second spelling (e.g. `-o` and `--out`).
    - Type validation and conversion through `OptionType`.
    - Defaults, required and repeatable options.
    - Boolean flags that flip their default on every occurrence.
    - `--help` is always recognized and cannot be registered.
    - Word-wrapped help screen with configurable layout.
    """

    def __init__(
        self,
        description: str = "",
        screen_width: int = 80,
        tab_width: int = 8,
        break_chars: str = " ,;!?",
        help_format: HelpFormat | None = None,
    ) -> None:
        """
        Initialize the ArgumentParser.

        Args:
            description (str): Text shown at the top of the help screen.
            screen_width (int): Screen width used when wrapping help text.
            tab_width (int): Width of the tab stop that indents help text.
            break_chars (str): Characters at which help text may be wrapped.
            help_format (HelpFormat | None): Complete layout configuration;
                overrides the three layout arguments when given.

        Raises:
            pydantic.ValidationError: If the layout configuration is invalid.
        """
        self.description: str = description
        self.help_format: HelpFormat = help_format or HelpFormat(
            screen_width=screen_width,
            tab_width=tab_width,
            break_chars=break_chars,
        )
        self._options: list[Option] = []
        self._help_requested: bool = False

    @property
    def options(self) -> list[Option]:
        """Registered options, in registration order."""
        return list(self._options)

    @property
    def help_requested(self) -> bool:
        """Whether `--help` was seen during the most recent parse."""
        return self._help_requested

    def _validate_flag(self, flag: Any) -> None:
        if not isinstance(flag, str) or not flag:
            raise OptionDefinitionError(f"Flag {flag!r} must be a non-empty string")
        if not flag.startswith("-") or not flag.lstrip("-"):
            raise OptionDefinitionError(
                f"Flag '{flag}' must start with '-' and contain a name"
            )
        if flag == HELP_FLAG:
            raise OptionDefinitionError(f"Flag '{HELP_FLAG}' is reserved")
        for option in self._options:
            if flag in option.flags:
                raise OptionDefinitionError(
                    f"Flag '{flag}' is already used by option '{option.name}'"
                )

    def add_option(
        self,
        flag: str,
        second_flag: str | None = None,
        **kwargs: Any,
    ) -> Option:
        """
        Define a new option for the parser.

        Args:
            flag (str): Primary flag, e.g. "-o".
            second_flag (str | None): Alternative spelling, e.g. "--out".
            **kwargs: Any `Option` keyword: `dest`, `takes_value`, `type`,
                `repeatable`, `required`, `default`, `help`, `display_name`.

        Returns:
            Option: The registered option, which may be adjusted further
                before parsing.

        Raises:
            OptionDefinitionError: If a flag is malformed, reserved or
                already registered, or the name is already in use.
        """
        self._validate_flag(flag)
        if second_flag is not None:
            if second_flag == flag:
                raise OptionDefinitionError(
                    f"Second flag '{second_flag}' repeats the primary flag"
                )
            self._validate_flag(second_flag)
        option = Option(flag, second_flag, **kwargs)
        if self.get_option(option.name) is not None:
            raise OptionDefinitionError(
                f"Option name '{option.name}' is already defined. "
                "Define a unique 'dest' for each option."
            )
        self._options.append(option)
        logger.debug("Registered option %r", option)
        return option

    def get_option(self, name: str) -> Option | None:
        """
        Return the Option registered under a given name.

        Args:
            name (str): Name (destination key) of the option.

        Returns:
            Option or None: Matching Option instance, if defined.
        """
        return next((option for option in self._options if option.name == name), None)

    def _handle_option(
        self,
        option: Option,
        token: str,
        args: list[str],
        state: ParseState,
        result: Namespace,
        remove: bool,
    ) -> None:
        i = state.cursor
        if option.takes_value:
            if i + 1 >= len(args):
                raise MissingArgumentError(token)
            literal = args[i + 1]
            if not option.type.is_valid(literal):
                raise InvalidArgumentError(token, option.type, literal)
            value = option.type.parse(literal)
            state.consume(i, i + 1)
            if remove:
                args[i] = ""
                args[i + 1] = ""
                state.cursor += 1
        else:
            if option.repeatable:
                value = option.flip_value()
            else:
                value = result.flip_default(option.name)
            state.consume(i)
            if remove:
                args[i] = ""

        if option.repeatable:
            result.add_value(option.name, value)
        else:
            result.set_value(option.name, value)
        state.mark_matched(option)
        logger.debug("[%s] %s -> %r", option.name, token, value)

    def parse_args(
        self,
        args: list[str] | None = None,
        remove: bool = False,
        suppress_errors: bool = False,
    ) -> Namespace:
        """
        Parse an argument vector into a `Namespace`.

        The vector is scanned once, left to right. Tokens that are not a
        registered flag are ignored. Without `remove`, the token following a
        value-taking flag is examined again as a potential flag.

        Args:
            args (list[str] | None): Argument vector. Defaults to a copy of
                `sys.argv[1:]`.
            remove (bool): Blank out every consumed flag and value in `args`
                so that a later parser only sees what is left.
            suppress_errors (bool): Do not raise `HelpRequested` or
                `RequiredOptionMissingError`; return the best-effort result.
                Missing and invalid values are still raised.

        Returns:
            Namespace: Parsed values.

        Raises:
            HelpRequested: If `--help` is encountered.
            MissingArgumentError: If a value-taking flag has no value.
            InvalidArgumentError: If a value fails validation.
            RequiredOptionMissingError: If required options were not supplied.
            OptionDefinitionError: If options share a name or a flag.
        """
        if args is None:
            args = sys.argv[1:]

        state = ParseState.from_options(self._options)
        result = Namespace(self._options)
        self._help_requested = False
        logger.debug("Parsing %d tokens against %s", len(args), self)

        while state.cursor < len(args):
            token = args[state.cursor]
            if token == HELP_FLAG:
                state.help_requested = True
                self._help_requested = True
                result.help_requested = True
                if not suppress_errors:
                    raise HelpRequested()
                logger.debug("Ignoring %s because errors are suppressed", HELP_FLAG)
            elif token in state.flag_map:
                self._handle_option(
                    state.flag_map[token], token, args, state, result, remove
                )
            state.cursor += 1

        result.consumed_indices = frozenset(state.consumed_indices)

        if state.pending_required:
            error = RequiredOptionMissingError(state.pending_required.values())
            if not suppress_errors:
                raise error
            logger.warning("Ignoring parse failure: %s", error)

        return result

    def generate_help_screen(
        self,
        requested: bool = False,
        description: bool = True,
        usage: bool = True,
        options: bool = True,
    ) -> str:
        """
        Generate the help screen.

        Args:
            requested (bool): Whether the user asked for help; adds a banner.
            description (bool): Include the description.
            usage (bool): Include the usage line.
            options (bool): Include the per-option help.

        Returns:
            str: The help screen as plain text.
        """
        formatter = HelpFormatter(self.description, self._options, self.help_format)
        return formatter.render(
            requested=requested,
            show_description=description,
            show_usage=usage,
            show_options=options,
        )

    def handle_error(self, error: ArgumentParserError) -> None:
        """
        Report a parse failure to the user.

        A help request prints the help screen to standard output. Any other
        error prints its message and traceback to standard error, followed by
        the help screen without the banner.
        """
        if isinstance(error, HelpRequested):
            print_plain(
                console,
                self.generate_help_screen(requested=True),
                tab_size=self.help_format.tab_width,
            )
            return

        logger.debug("Handling parse error: %s", error)
        error_console.print(f"[error]{type(error).__name__}:[/] {escape(str(error))}")
        error_console.print(
            Traceback.from_exception(type(error), error, error.__traceback__)
        )
        print_plain(
            error_console,
            self.generate_help_screen(requested=False),
            tab_size=self.help_format.tab_width,
        )

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        flags = sum(len(option.flags) for option in self._options)
        required = sum(option.required for option in self._options)
        return (
            f"ArgumentParser(options={len(self._options)}, "
            f"flags={flags}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
