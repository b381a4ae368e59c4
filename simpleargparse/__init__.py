"""
SimpleArgParse

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    ArgumentParserError,
    HelpRequested,
    InvalidArgumentError,
    MissingArgumentError,
    OptionDefinitionError,
    RequiredOptionMissingError,
)
from .help import HelpFormat, HelpFormatter
from .logger import logger
from .parser import ArgumentParser, Namespace, Option, OptionType

__all__ = [
    "ArgumentParser",
    "ArgumentParserError",
    "HelpFormat",
    "HelpFormatter",
    "HelpRequested",
    "InvalidArgumentError",
    "MissingArgumentError",
    "Namespace",
    "Option",
    "OptionDefinitionError",
    "OptionType",
    "RequiredOptionMissingError",
    "logger",
]
