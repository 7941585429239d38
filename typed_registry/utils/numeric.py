"""
Numeric string classification and casting for environment values.
"""

import re
import sys

from .logger import get_logger

_WS = " \t\n\r\v\f"

_NUMERIC_RE = re.compile(
    r"[ \t\n\r\v\f]*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?[ \t\n\r\v\f]*",
    re.ASCII,
)

INT_MAX = sys.maxsize
INT_MIN = -sys.maxsize - 1

_INT_DIGITS = len(str(INT_MAX))

log = get_logger("typed_registry.numeric")


def is_numeric(value: str) -> bool:
    """True for decimal, fractional and exponent notation, surrounding whitespace allowed."""
    return _NUMERIC_RE.fullmatch(value) is not None


def normalize_whole(value: str) -> str:
    """Drops a '+' sign and leading zeros from a whole-number string."""
    sign = ""
    digits = value
    if digits[:1] in ("+", "-"):
        sign, digits = digits[0], digits[1:]
    digits = digits.lstrip("0") or "0"
    if sign == "-" and digits != "0":
        return "-" + digits
    return digits


def cast_numeric(value: str) -> int | float | str:
    """
    Narrows a numeric string to int or float.

    Non-numeric strings come back unchanged. Whole numbers outside the
    native signed integer range become floats.
    """
    if not is_numeric(value):
        return value

    s = value.strip(_WS)
    if "." in s or "e" in s or "E" in s:
        return float(s)

    whole = normalize_whole(s)
    # int() refuses very long digit strings, anything this long overflows anyway
    if len(whole.lstrip("-")) <= _INT_DIGITS:
        n = int(whole)
        if INT_MIN <= n <= INT_MAX:
            return n

    log.debug("integer out of range, casting to float", extra={"value": whole})
    return float(whole)
