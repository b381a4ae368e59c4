# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Shared console instances for help and error output."""
from rich.console import Console
from rich.text import Text
from rich.theme import Theme

theme = Theme(
    {
        "banner": "bold",
        "error": "bold red",
    }
)

console = Console(color_system="truecolor", theme=theme)
error_console = Console(color_system="truecolor", theme=theme, stderr=True)


def print_plain(target: Console, text: str, tab_size: int = 8) -> None:
    """Print text verbatim, expanding tabs to `tab_size` columns."""
    target.print(Text(text, tab_size=tab_size), highlight=False, soft_wrap=True)
