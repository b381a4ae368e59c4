"""
SimpleArgParse

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .formatter import HelpFormatter
from .help_format import HelpFormat
from .wrap import wrap_line, wrap_text

__all__ = [
    "HelpFormat",
    "HelpFormatter",
    "wrap_line",
    "wrap_text",
]
