# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion and file-system checks used by `OptionType`.

Every coercer takes the raw command-line literal (or any value whose string
form should be reinterpreted) and either returns the typed value or raises
`ValueError`. `OptionType.is_valid()` is built on top of these by catching
that `ValueError`, so validation and conversion can never disagree.

Functions:
- coerce_bool: Interpret a literal as a boolean ("true" in any case is True).
- coerce_integer: Parse a signed integer that fits in a given bit width.
- coerce_float: Parse a floating point literal, optionally at single precision.
- check_path: Test a path against a kind and existence requirement.
"""
import math
import re
import struct
from pathlib import Path
from typing import Any

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


def coerce_bool(value: Any) -> bool:
    """
    Convert a value to a boolean.

    Only the literal "true" (case-insensitive) is truthy; every other
    literal, including "yes" or "1", is False. This never fails.
    """
    if isinstance(value, bool):
        return value
    return str(value).lower() == "true"


def coerce_integer(value: Any, bits: int = 32) -> int:
    """
    Convert a value to a signed integer of the given bit width.

    Args:
        value (Any): The input value; its string form is parsed.
        bits (int): Width of the two's-complement range to enforce.

    Returns:
        int: The parsed integer.

    Raises:
        ValueError: If the literal is not an optional sign followed by digits,
            or if the number does not fit in `bits` bits.
    """
    text = str(value)
    if not _INTEGER_LITERAL.fullmatch(text):
        raise ValueError(f"'{text}' is not an integer literal")
    number = int(text)
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1
    if not low <= number <= high:
        raise ValueError(f"{number} is out of range for a {bits}-bit integer")
    return number


def to_single_precision(number: float) -> float:
    """Round a float to the nearest IEEE 754 single precision value."""
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def coerce_float(value: Any, single: bool = False) -> float:
    """
    Convert a value to a float.

    Args:
        value (Any): The input value; its string form is parsed.
        single (bool): Round the result to single precision.

    Raises:
        ValueError: If the literal is not a floating point number.
    """
    text = str(value)
    if "_" in text:
        raise ValueError(f"'{text}' is not a floating point literal")
    try:
        number = float(text)
    except ValueError as error:
        raise ValueError(f"'{text}' is not a floating point literal") from error
    if single:
        return to_single_precision(number)
    return number


def check_path(value: str, kind: str, must_exist: bool | None) -> bool:
    """
    Check a path literal against the current state of the file system.

    Args:
        value (str): The path literal.
        kind (str): "file", "directory" or "any".
        must_exist (bool | None): True if the path has to exist, False if it
            must not exist, None if either is acceptable.

    Returns:
        bool: Whether the path is acceptable. The answer is only valid at the
            instant it is computed.
    """
    path = Path(value)
    try:
        exists = path.exists()
        is_dir = path.is_dir()
    except (OSError, ValueError):
        return False

    if must_exist is False:
        return not exists
    if not exists:
        return must_exist is None
    if kind == "file":
        return not is_dir
    if kind == "directory":
        return is_dir
    return True
