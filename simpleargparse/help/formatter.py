# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders the plain-text help screen for an `ArgumentParser`.

The screen has up to four blocks, in order:
- a "Help requested" banner, when the user asked for help;
- the parser description, wrapped and indented by one tab stop;
- a usage line listing `[--help]` and every option, continued on indented
  lines whenever the next option would run past the screen width;
- an options section with each option's flags, value placeholder and its
  help text wrapped at `screen_width - tab_width` behind one tab stop.

The output is meant for a fixed-width terminal and is not machine-parseable.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from simpleargparse.help.help_format import HelpFormat
from simpleargparse.help.wrap import wrap_text

if TYPE_CHECKING:
    from simpleargparse.parser.option import Option

HELP_FLAG = "--help"
USAGE_PREFIX = "Usage:"
USAGE_INDENT = " " * len(USAGE_PREFIX)


class HelpFormatter:
    """Builds help text from a description, options and a `HelpFormat`."""

    def __init__(
        self,
        description: str,
        options: Sequence[Option],
        help_format: HelpFormat | None = None,
    ) -> None:
        self.description: str = description
        self.options: Sequence[Option] = options
        self.help_format: HelpFormat = help_format or HelpFormat()

    def render_description(self) -> str:
        if not self.description:
            return ""
        lines = wrap_text(
            self.description,
            self.help_format.screen_width,
            self.help_format.break_chars,
        )
        return "".join(f"\t{line}\n" for line in lines) + "\n"

    def render_usage(self) -> str:
        text = f"{USAGE_PREFIX} [{HELP_FLAG}]"
        for option in self.options:
            token = option.get_usage_text()
            line_width = len(text) - (text.rfind("\n") + 1)
            if line_width + len(token) + 1 > self.help_format.screen_width:
                text += f"\n{USAGE_INDENT}"
            text += f" {token}"
        return text + "\n\n"

    def render_options(self) -> str:
        text = "Options:\n"
        for option in self.options:
            text += option.get_flag_text()
            if option.takes_value:
                text += f" {option.placeholder}"
            text += "\n"
            for line in wrap_text(
                option.help,
                self.help_format.option_help_width,
                self.help_format.break_chars,
            ):
                text += f"\t{line}\n"
            text += "\n"
        return text

    def render(
        self,
        requested: bool = False,
        show_description: bool = True,
        show_usage: bool = True,
        show_options: bool = True,
    ) -> str:
        """
        Render the help screen.

        Args:
            requested (bool): Prepend the "Help requested" banner.
            show_description (bool): Include the description block.
            show_usage (bool): Include the usage block.
            show_options (bool): Include the options block.

        Returns:
            str: The help screen.
        """
        text = ""
        if requested:
            text += "Help requested\n\n"
        if show_description:
            text += self.render_description()
        if show_usage:
            text += self.render_usage()
        if show_options:
            text += self.render_options()
        return text
