"""
SimpleArgParse

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument_parser import ArgumentParser
from .namespace import Namespace
from .option import Option
from .option_type import OptionType

__all__ = [
    "ArgumentParser",
    "Namespace",
    "Option",
    "OptionType",
]
