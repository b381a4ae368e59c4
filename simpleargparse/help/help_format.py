# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `HelpFormat`, the layout configuration for generated help screens.

Example:
    HelpFormat(screen_width=100, tab_width=4, break_chars=" ,;")
"""
from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

DEFAULT_BREAK_CHARS = " ,;!?"


class HelpFormat(BaseModel):
    """
    Layout settings used by `HelpFormatter`.

    - `screen_width`: Width of the fixed-width screen, in columns.
    - `tab_width`: Width of the tab stop used to indent help text.
    - `break_chars`: Characters after which a long line may be broken.

    Option help is indented by one tab stop and wrapped at
    `screen_width - tab_width`, so it never extends past the screen.
    """

    screen_width: int = Field(default=80, ge=2)
    tab_width: int = Field(default=8, ge=1)
    break_chars: str = Field(default=DEFAULT_BREAK_CHARS, min_length=1)

    @model_validator(mode="after")
    def validate_widths(self) -> HelpFormat:
        if self.tab_width >= self.screen_width:
            raise ValueError(
                f"tab_width ({self.tab_width}) must be smaller than "
                f"screen_width ({self.screen_width})"
            )
        return self

    @property
    def option_help_width(self) -> int:
        return self.screen_width - self.tab_width
