"""Numeric policy shared by the serializer and deserializer.

The host's native integer is a signed 32-bit value. Anything wider is
carried as a float, accepting the precision loss past 2**53.

Bare literals are disambiguated integer-first, then float. The order
matters: ``"10"`` must stay an integer even though it also parses as a
float.
"""

from __future__ import annotations

import math
import re

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")
_FLOAT_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def fits_narrow(number: int) -> bool:
    """Whether *number* fits the host's native 32-bit integer."""
    return INT32_MIN <= number <= INT32_MAX


def narrow(number: int) -> int | float | str:
    """Keep *number* as an int when it fits 32 bits, otherwise widen to float.

    Integers beyond float range keep their decimal text, the same result a
    bare literal of those digits gets.

    Examples:
        >>> narrow(2147483647)
        2147483647
        >>> narrow(2147483648)
        2147483648.0
        >>> narrow(10**400) == "1" + "0" * 400
        True
    """
    if fits_narrow(number):
        return number
    try:
        return float(number)
    except OverflowError:
        return str(number)


def parse_int_literal(text: str) -> int | None:
    """Parse a bare 32-bit integer literal, or return None.

    Accepts an optional sign and ASCII digits only. Out-of-range values
    return None so the caller falls through to float parsing.
    """
    if _INT_LITERAL.fullmatch(text) is None:
        return None
    try:
        number = int(text)
    except ValueError:
        # past the interpreter's int digit limit
        return None
    if not fits_narrow(number):
        return None
    return number


def parse_float_literal(text: str) -> float | None:
    """Parse a finite decimal or exponent literal, or return None.

    ``NaN``, ``Infinity`` and underscore-grouped digits are rejected.
    """
    if _FLOAT_LITERAL.fullmatch(text) is None:
        return None
    number = float(text)
    if math.isinf(number):
        return None
    return number
